"""Build the blog and project listing pages.

Both listings are rendered from the content catalogs: the blog listing shows
posts newest first with a tag filter bar, and the project listing shows every
project with a category filter bar and featured/status badges. The filter bars
are plain buttons carrying ``data-filter`` values; the page script toggles
cards whose ``data-tags``/``data-category`` do not match.

>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> from folio_pages.listing import ListingPageBuilder
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> ListingPageBuilder(site).run(posts, projects)  # doctest: +SKIP
[PosixPath('public/blogs/index.html'), PosixPath('public/projects/index.html')]
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .content import (
    ALL_FILTER,
    collect_categories,
    collect_tags,
    filter_by_category,
    filter_by_tag,
    sort_posts,
)
from .seo import build_page_metadata

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .content import BlogPost, Project

BLOG_LISTING_DESCRIPTION = (
    "Thoughts on building AI products, data engineering patterns, and lessons "
    "from shipping software."
)


@dc.dataclass(slots=True, frozen=True)
class FilterOption:
    """A filter button and the number of cards it leaves visible."""

    value: str
    count: int


class ListingPageBuilder:
    """Render listing pages enumerating posts and projects."""

    def __init__(
        self, site_config: SiteConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the listing builder.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed site configuration (produced by
            :func:`folio_pages.config.load_site_config`).
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``folio_pages/templates`` directory when ``None``.
        """
        self.site = site_config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def run(self, posts: list[BlogPost], projects: list[Project]) -> list[Path]:
        """Render both listing pages and return their paths."""
        return [self.write_blog_listing(posts), self.write_project_listing(projects)]

    def write_blog_listing(self, posts: list[BlogPost]) -> Path:
        """Write ``blogs/index.html`` with posts sorted newest first."""
        context = {
            "posts": sort_posts(posts),
            "filters": [
                FilterOption(value, len(filter_by_tag(posts, value)))
                for value in [ALL_FILTER, *collect_tags(posts)]
            ],
            "meta": build_page_metadata(
                self.site,
                title="Blog",
                description=BLOG_LISTING_DESCRIPTION,
                path="blogs",
            ),
        }
        return self._write("blog_listing.jinja", "blogs", context)

    def write_project_listing(self, projects: list[Project]) -> Path:
        """Write ``projects/index.html`` in catalog order."""
        context = {
            "projects": list(projects),
            "filters": [
                FilterOption(value, len(filter_by_category(projects, value)))
                for value in [ALL_FILTER, *collect_categories(projects)]
            ],
            "meta": build_page_metadata(
                self.site,
                title="Projects",
                description=self.site.site.description,
                path="projects",
            ),
        }
        return self._write("project_listing.jinja", "projects", context)

    def _write(self, template_name: str, section: str, context: dict[str, typ.Any]) -> Path:
        out_dir = self.site.output_dir / section
        out_dir.mkdir(parents=True, exist_ok=True)
        output_path = out_dir / "index.html"
        html = self.env.get_template(template_name).render(
            site=self.site,
            nav_links=self.site.nav_links,
            generated_at=dt.datetime.now(dt.UTC),
            **context,
        )
        if not html.endswith("\n"):
            html += "\n"
        output_path.write_text(html, encoding="utf-8")
        return output_path


__all__ = ["FilterOption", "ListingPageBuilder"]
