"""Navigation and hero configuration builders."""

from __future__ import annotations

import typing as typ

from .helpers import _optional_str
from .models import CTAButtonConfig, HeroConfig, NavLinkConfig, SiteConfigError


def _build_nav_links(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[NavLinkConfig]:
    """Build navigation link configurations for the page header."""
    links: list[NavLinkConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return links
    for entry in iterable:
        match entry:
            case {"label": label, "href": href, **rest}:
                pass
            case _:
                continue
        if not label or not href:
            msg = "Navigation links require 'label' and 'href'."
            raise SiteConfigError(msg)
        links.append(
            NavLinkConfig(
                label=str(label),
                href=str(href),
                variant=_optional_str(rest.get("variant")),
            )
        )
    return links


def _build_hero_config(payload: typ.Mapping[str, object] | None) -> HeroConfig | None:
    """Build the homepage hero, or None when the block is absent."""
    if payload is None:
        return None
    match payload:
        case {"eyebrow": eyebrow, "title": title, "description": description, **rest}:
            pass
        case _:
            msg = "Homepage hero requires 'eyebrow', 'title', and 'description'."
            raise SiteConfigError(msg)
    for key, value in {
        "eyebrow": eyebrow,
        "title": title,
        "description": description,
    }.items():
        if not value:
            msg = f"Homepage hero is missing '{key}'."
            raise SiteConfigError(msg)
    return HeroConfig(
        eyebrow=str(eyebrow),
        title=str(title),
        description=str(description),
        ctas=_build_ctas(rest.get("ctas")),
    )


def _build_ctas(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[CTAButtonConfig]:
    """Build call-to-action button configurations for the hero section."""
    buttons: list[CTAButtonConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return buttons
    for entry in iterable:
        match entry:
            case {"label": label, "href": href, **rest}:
                pass
            case _:
                continue
        if not label or not href:
            msg = "Hero CTAs require 'label' and 'href'."
            raise SiteConfigError(msg)
        buttons.append(
            CTAButtonConfig(
                label=str(label),
                href=str(href),
                variant=_optional_str(rest.get("variant")) or "primary",
            )
        )
    return buttons


__all__ = ["_build_ctas", "_build_hero_config", "_build_nav_links"]
