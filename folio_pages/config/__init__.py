"""Load and validate the portfolio site configuration YAML.

This subpackage parses ``config/site.yaml``, applies defaults for content
locations and rendering options, and produces typed dataclasses
(:class:`SiteConfig`, :class:`SiteMetadata`, etc.) that the page builders
consume. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.page_url("blogs")  # doctest: +SKIP
'https://yenweelim.dev/blogs'
"""

from .loader import load_site_config
from .models import (
    ContentPaths,
    CTAButtonConfig,
    HeroConfig,
    NavLinkConfig,
    SiteConfig,
    SiteConfigError,
    SiteMetadata,
)

__all__ = [
    "CTAButtonConfig",
    "ContentPaths",
    "HeroConfig",
    "NavLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetadata",
    "load_site_config",
]
