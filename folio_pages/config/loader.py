"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _build_content_paths, _build_site_metadata, _optional_str
from .homepage import _build_hero_config, _build_nav_links
from .models import SiteConfig

DEFAULT_PYGMENTS_STYLE = "github-dark"


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the portfolio site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration including site metadata, content locations,
        output directory, navigation, and the optional homepage hero.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from folio_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.site.name  # doctest: +SKIP
    'Yen Wee Lim'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    navigation = raw.get("navigation", {}) or {}
    return SiteConfig(
        site=_build_site_metadata(raw.get("site")),
        content=_build_content_paths(raw.get("content")),
        output_dir=Path(raw.get("output_dir", "public")),
        pygments_style=_optional_str(raw.get("pygments_style"))
        or DEFAULT_PYGMENTS_STYLE,
        nav_links=_build_nav_links(navigation.get("links")),
        hero=_build_hero_config(raw.get("hero")),
    )


__all__ = ["load_site_config"]
