"""Typed dataclasses describing the portfolio site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteMetadata:
    """Identity and SEO defaults shared by every generated page."""

    name: str
    base_url: str
    author: str
    description: str = ""
    keywords: list[str] = dc.field(default_factory=list)
    og_image: str | None = None
    twitter_card: str = "summary_large_image"
    locale: str = "en_US"


@dc.dataclass(slots=True)
class ContentPaths:
    """Locations of the JSON catalogs and their Markdown write-ups."""

    blogs: Path = Path("content/blogs.json")
    projects: Path = Path("content/projects.json")
    blog_markdown_dir: Path = Path("content/blogs")
    project_markdown_dir: Path = Path("content/projects")


@dc.dataclass(slots=True)
class NavLinkConfig:
    """Navigation link shown in the page header."""

    label: str
    href: str
    variant: str | None = None


@dc.dataclass(slots=True)
class CTAButtonConfig:
    """Call-to-action button within the homepage hero."""

    label: str
    href: str
    variant: str


@dc.dataclass(slots=True)
class HeroConfig:
    """Hero copy and CTAs for the homepage."""

    eyebrow: str
    title: str
    description: str
    ctas: list[CTAButtonConfig]


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved site configuration."""

    site: SiteMetadata
    content: ContentPaths = dc.field(default_factory=ContentPaths)
    output_dir: Path = Path("public")
    pygments_style: str = "github-dark"
    nav_links: list[NavLinkConfig] = dc.field(default_factory=list)
    hero: HeroConfig | None = None

    def page_url(self, path: str = "") -> str:
        """Return the absolute URL for a site-relative ``path``."""
        base = self.site.base_url.rstrip("/")
        if not path:
            return base
        return f"{base}/{path.lstrip('/')}"


__all__ = [
    "CTAButtonConfig",
    "ContentPaths",
    "HeroConfig",
    "NavLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetadata",
]
