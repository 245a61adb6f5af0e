r"""Scan Markdown write-ups for table-of-contents headings.

This module powers the "On this page" sidebar by pulling level-two and
level-three ATX headings out of raw Markdown, deriving anchor slugs for them,
and returning dataclasses the templates consume. The renderer assigns heading
ids with the same :func:`slugify_heading`, so sidebar links and rendered
anchors always agree.

Example
-------
>>> from folio_pages.markdown_parser import extract_headings
>>> headings = extract_headings("## Intro\nBody text\n\n### Details\nMore")
>>> [(h.id, h.level) for h in headings]
[('intro', 2), ('details', 3)]
"""

from __future__ import annotations

import dataclasses as dc
import re

from ._constants import TOC_MIN_HEADINGS

HEADING_PATTERN = re.compile(
    r"^(#{2,3})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$", re.MULTILINE
)
LEADING_TITLE_PATTERN = re.compile(r"^#\s+.+\n+")

BLOG_SECTION_ACCENTS: dict[str, str] = {
    "why": "amber",
    "problem": "amber",
    "fail": "amber",
    "challenge": "amber",
    "how": "blue",
    "architecture": "blue",
    "approach": "blue",
    "build": "blue",
    "decision": "purple",
    "routing": "blue",
    "layer": "indigo",
    "permission": "purple",
    "autonomy": "purple",
    "human": "teal",
    "monitor": "cyan",
    "observ": "cyan",
    "lesson": "green",
    "result": "green",
    "impact": "green",
    "learn": "green",
    "come": "green",
    "next": "green",
    "what": "amber",
}
PROJECT_SECTION_ACCENTS: dict[str, str] = {
    "challenge": "amber",
    "approach": "blue",
    "solution": "blue",
    "architecture": "blue",
    "impact": "green",
    "results": "green",
    "learned": "green",
    "decision": "purple",
}
DEFAULT_ACCENT = "neutral"


@dc.dataclass(slots=True, frozen=True)
class HeadingEntry:
    """A single table-of-contents entry.

    Attributes
    ----------
    id : str
        Anchor slug shared with the rendered heading element. Not guaranteed
        to be unique: repeated heading text yields repeated ids.
    text : str
        Heading text with surrounding whitespace removed.
    level : int
        Heading depth, either 2 or 3.
    """

    id: str
    text: str
    level: int


def slugify_heading(text: str) -> str:
    """Return the anchor slug for a heading.

    Lowercases ``text``, drops every character outside ``[a-z0-9\\s-]`` and
    collapses each whitespace run into one hyphen.

    >>> slugify_heading("Step 1: Build & Deploy!")
    'step-1-build-deploy'
    """
    lowered = re.sub(r"[^a-z0-9\s-]", "", text.lower())
    return re.sub(r"\s+", "-", lowered)


def extract_headings(markdown_text: str) -> list[HeadingEntry]:
    """Return the level-two and level-three headings of ``markdown_text``.

    Parameters
    ----------
    markdown_text : str
        Raw markdown for a single post or project.

    Returns
    -------
    list[HeadingEntry]
        Entries in document order. Level-one and level-four-plus headings are
        skipped, and duplicate headings are kept as separate entries. A closing
        run of hashes (``## Intro ##``) is not part of the text.
    """
    headings: list[HeadingEntry] = []
    for match in HEADING_PATTERN.finditer(markdown_text):
        hashes, raw_text = match.groups()
        text = raw_text.strip()
        headings.append(
            HeadingEntry(id=slugify_heading(text), text=text, level=len(hashes))
        )
    return headings


def should_render_toc(headings: list[HeadingEntry]) -> bool:
    """Return ``True`` when there are enough headings for a useful TOC."""
    return len(headings) >= TOC_MIN_HEADINGS


def strip_leading_title(markdown_text: str) -> str:
    """Drop a leading ``# Title`` line and the blank lines that follow it."""
    return LEADING_TITLE_PATTERN.sub("", markdown_text, count=1)


def section_accent(text: str, accents: dict[str, str] | None = None) -> str:
    """Return the accent colour for a section heading.

    The first keyword (in table order) contained in the lowercased heading
    wins; headings with no keyword get :data:`DEFAULT_ACCENT`.
    """
    table = BLOG_SECTION_ACCENTS if accents is None else accents
    lower = text.lower()
    for keyword, accent in table.items():
        if keyword in lower:
            return accent
    return DEFAULT_ACCENT


__all__ = [
    "BLOG_SECTION_ACCENTS",
    "DEFAULT_ACCENT",
    "HEADING_PATTERN",
    "PROJECT_SECTION_ACCENTS",
    "HeadingEntry",
    "extract_headings",
    "section_accent",
    "should_render_toc",
    "slugify_heading",
    "strip_leading_title",
]
