"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import ContentPaths, SiteConfigError, SiteMetadata


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, context: str) -> str:
    """Return ``payload[key]`` as a non-empty string or raise SiteConfigError."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"{context} requires a '{key}'."
        raise SiteConfigError(msg)
    return value


def _build_site_metadata(payload: typ.Mapping[str, typ.Any] | None) -> SiteMetadata:
    """Build the site identity block, validating required fields."""
    if not isinstance(payload, dict):
        msg = "Site configuration requires a 'site' mapping."
        raise SiteConfigError(msg)
    base_url = _require_str(payload, "base_url", "Site configuration")
    if not base_url.startswith(("http://", "https://")):
        msg = f"Site base_url must be an absolute http(s) URL, got '{base_url}'."
        raise SiteConfigError(msg)
    base = SiteMetadata(name="", base_url="", author="")
    return SiteMetadata(
        name=_require_str(payload, "name", "Site configuration"),
        base_url=base_url.rstrip("/"),
        author=_require_str(payload, "author", "Site configuration"),
        description=_optional_str(payload.get("description")) or base.description,
        keywords=[str(word) for word in payload.get("keywords") or []],
        og_image=_optional_str(payload.get("og_image")),
        twitter_card=_optional_str(payload.get("twitter_card")) or base.twitter_card,
        locale=_optional_str(payload.get("locale")) or base.locale,
    )


def _build_content_paths(payload: typ.Mapping[str, typ.Any] | None) -> ContentPaths:
    """Build content locations, falling back to the defaults per field."""
    base = ContentPaths()
    if not payload:
        return base
    if not isinstance(payload, dict):
        msg = "Content configuration must be a mapping."
        raise SiteConfigError(msg)
    return ContentPaths(
        blogs=Path(payload.get("blogs", base.blogs)),
        projects=Path(payload.get("projects", base.projects)),
        blog_markdown_dir=Path(payload.get("blog_markdown_dir", base.blog_markdown_dir)),
        project_markdown_dir=Path(
            payload.get("project_markdown_dir", base.project_markdown_dir)
        ),
    )


__all__ = [
    "_build_content_paths",
    "_build_site_metadata",
    "_optional_str",
    "_require_str",
]
