"""Page metadata, sitemap, and robots generation for the portfolio site.

Each generated page carries a :class:`PageMetadata` describing its
``<title>``, description, canonical URL, OpenGraph, and Twitter card fields.
:class:`SeoBuilder` additionally writes ``sitemap.xml`` (static routes, every
project, and every post) and ``robots.txt`` into the output directory.

Example
-------
>>> from folio_pages.config import SiteConfig, SiteMetadata
>>> site = SiteConfig(site=SiteMetadata("Ada", "https://ada.dev", "Ada"))
>>> build_page_metadata(site, title="Blog", description="Notes", path="blogs").url
'https://ada.dev/blogs'
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .content import BlogPost, Project


@dc.dataclass(slots=True)
class PageMetadata:
    """Head metadata for one generated page."""

    title: str
    description: str
    url: str
    og_title: str
    og_type: str
    site_name: str
    locale: str
    twitter_card: str
    image: str | None = None
    published_time: str | None = None
    tags: list[str] = dc.field(default_factory=list)
    keywords: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True, frozen=True)
class SitemapEntry:
    """A single ``<url>`` element in ``sitemap.xml``."""

    url: str
    lastmod: dt.date
    changefreq: str
    priority: float


def _title(site: SiteConfig, title: str) -> str:
    return f"{title} | {site.site.name}"


def build_page_metadata(
    site: SiteConfig,
    *,
    title: str,
    description: str,
    path: str = "",
    og_type: str = "website",
) -> PageMetadata:
    """Return metadata for a site-level page such as a listing or the homepage.

    Parameters
    ----------
    site : SiteConfig
        Resolved site configuration supplying the name, base URL, and defaults.
    title : str
        Page title shown before the site name in ``<title>``.
    description : str
        Meta description; falls back to the site description when empty.
    path : str, optional
        Site-relative path of the page (``""`` for the homepage).
    og_type : str, optional
        OpenGraph object type. Defaults to ``"website"``.
    """
    meta = site.site
    return PageMetadata(
        title=_title(site, title) if path else title,
        description=description or meta.description,
        url=site.page_url(path),
        og_title=title,
        og_type=og_type,
        site_name=meta.name,
        locale=meta.locale,
        twitter_card=meta.twitter_card,
        image=meta.og_image,
        keywords=list(meta.keywords),
    )


def build_post_metadata(site: SiteConfig, post: BlogPost) -> PageMetadata:
    """Return article metadata for a blog post detail page."""
    metadata = build_page_metadata(
        site,
        title=post.title,
        description=post.description,
        path=f"blogs/{post.id}",
        og_type="article",
    )
    metadata.published_time = post.date.isoformat()
    metadata.tags = list(post.tags)
    return metadata


def build_project_metadata(site: SiteConfig, project: Project) -> PageMetadata:
    """Return article metadata for a project detail page."""
    metadata = build_page_metadata(
        site,
        title=project.title,
        description=project.description,
        path=f"projects/{project.id}",
        og_type="article",
    )
    metadata.tags = list(project.technologies)
    return metadata


def build_sitemap_entries(
    site: SiteConfig,
    posts: list[BlogPost],
    projects: list[Project],
    *,
    today: dt.date | None = None,
) -> list[SitemapEntry]:
    """Return sitemap entries for static routes, projects, and posts.

    Static routes and projects use ``today`` as their modification date; posts
    use their publication date.
    """
    stamp = today or dt.datetime.now(dt.UTC).date()
    entries = [
        SitemapEntry(site.page_url(), stamp, "monthly", 1.0),
        SitemapEntry(site.page_url("projects"), stamp, "monthly", 0.8),
        SitemapEntry(site.page_url("blogs"), stamp, "weekly", 0.8),
    ]
    entries.extend(
        SitemapEntry(site.page_url(f"projects/{project.id}"), stamp, "monthly", 0.6)
        for project in projects
    )
    entries.extend(
        SitemapEntry(site.page_url(f"blogs/{post.id}"), post.date, "yearly", 0.7)
        for post in posts
    )
    return entries


class SeoBuilder:
    """Write ``sitemap.xml`` and ``robots.txt`` for the site."""

    def __init__(self, site: SiteConfig, *, templates_dir: Path | None = None) -> None:
        self.site = site
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def run(
        self,
        posts: list[BlogPost],
        projects: list[Project],
        *,
        today: dt.date | None = None,
    ) -> list[Path]:
        """Render the sitemap and robots files, returning the written paths."""
        out_dir = self.site.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)
        entries = build_sitemap_entries(self.site, posts, projects, today=today)

        sitemap_path = out_dir / "sitemap.xml"
        sitemap = self.env.get_template("sitemap.xml.jinja").render(entries=entries)
        sitemap_path.write_text(sitemap, encoding="utf-8")

        robots_path = out_dir / "robots.txt"
        robots = self.env.get_template("robots.txt.jinja").render(
            sitemap_url=self.site.page_url("sitemap.xml")
        )
        robots_path.write_text(robots, encoding="utf-8")
        return [sitemap_path, robots_path]


__all__ = [
    "PageMetadata",
    "SeoBuilder",
    "SitemapEntry",
    "build_page_metadata",
    "build_post_metadata",
    "build_project_metadata",
    "build_sitemap_entries",
]
