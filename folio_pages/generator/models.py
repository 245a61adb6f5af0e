"""Shared dataclasses used by the article page pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from folio_pages.content import BlogPost, Project
    from folio_pages.seo import PageMetadata
    from folio_pages.toc import TocContext


@dc.dataclass(slots=True)
class ArticleModel:
    """Structured data passed to the article template.

    Attributes
    ----------
    kind : str
        Either ``"blog"`` or ``"project"``; selects header links and hero.
    slug : str
        Catalog id of the entry, also used as the output filename.
    title : str
        Entry title shown in the hero.
    body_html : str
        Rendered markdown body with callouts and heading anchors applied.
    toc : TocContext
        Sidebar entries and visibility for the "On this page" navigation.
    meta : PageMetadata
        Head metadata for the page.
    post : BlogPost | None
        Catalog entry when ``kind`` is ``"blog"``.
    project : Project | None
        Catalog entry when ``kind`` is ``"project"``.
    """

    kind: str
    slug: str
    title: str
    body_html: str
    toc: TocContext
    meta: PageMetadata
    post: BlogPost | None = None
    project: Project | None = None


__all__ = ["ArticleModel"]
