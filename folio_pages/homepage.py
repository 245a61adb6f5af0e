"""Portfolio homepage rendering pipeline.

This module turns the hero block of ``config/site.yaml`` together with the
content catalogs into the static ``index.html`` artefact. The main entry point
is ``HomePageBuilder``, which loads the ``home_page.jinja`` template, injects
the hero, the latest posts, and the featured projects, and persists the
generated HTML.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> builder = HomePageBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> builder.run(posts, projects)  # doctest: +SKIP
PosixPath('public/index.html')
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .content import sort_posts
from .seo import build_page_metadata

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .content import BlogPost, Project

LATEST_POST_COUNT = 3


class HomePageBuilder:
    """Render the homepage from site config and content catalogs."""

    def __init__(
        self, site_config: SiteConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed site configuration; provides navigation links, hero
            content, and SEO defaults.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``folio_pages/templates`` when not supplied.
        """
        self.site = site_config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("home_page.jinja")

    def run(self, posts: list[BlogPost], projects: list[Project]) -> Path:
        """Render and write the homepage HTML, returning the output path.

        Featured projects are listed first; when none are flagged every
        project is shown. The three most recent posts are included.
        """
        output_path = self.site.output_dir / "index.html"
        output_path.parent.mkdir(parents=True, exist_ok=True)
        featured = [project for project in projects if project.featured]
        context = {
            "site": self.site,
            "hero": self.site.hero,
            "nav_links": self.site.nav_links,
            "latest_posts": sort_posts(posts)[:LATEST_POST_COUNT],
            "projects": featured or list(projects),
            "meta": build_page_metadata(
                self.site,
                title=self.site.site.name,
                description=self.site.site.description,
            ),
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        output_path.write_text(html, encoding="utf-8")
        return output_path


__all__ = ["HomePageBuilder"]
