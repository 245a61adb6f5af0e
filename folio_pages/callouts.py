r"""Rewrite typed blockquote callouts into inline markers for the renderer.

Long-form posts flag insights, challenges, decisions, metrics, and notes with
a two-line blockquote::

    > [!insight] Key Insight
    > Latency dropped after caching.

Markdown has no notion of typed callout boxes, so :func:`annotate_callouts`
collapses each pair into a single paragraph that starts with an inline marker,
``[CALLOUT:insight:Key Insight] Latency dropped after caching.``. The renderer
later spots the marker with :func:`parse_callout_marker` and swaps the
paragraph for a styled box.

Example
-------
>>> from folio_pages.callouts import annotate_callouts
>>> annotate_callouts("> [!note] A | B\n> Body")
'[CALLOUT:note:A \\| B] Body'
"""

from __future__ import annotations

import dataclasses as dc
import re

from ._constants import CALLOUT_KINDS

_KIND_ALTERNATION = "|".join(CALLOUT_KINDS)

CALLOUT_BLOCK_PATTERN = re.compile(
    rf"^> \[!({_KIND_ALTERNATION})\][ \t]*(.+)\n> (.+)$",
    re.MULTILINE | re.IGNORECASE,
)
CALLOUT_MARKER_PATTERN = re.compile(
    rf"^\[CALLOUT:({_KIND_ALTERNATION}):(.*?)(?<!\\)\]\s*(.*)",
    re.DOTALL,
)


@dc.dataclass(slots=True, frozen=True)
class CalloutStyle:
    """Visual treatment for one callout kind.

    Attributes
    ----------
    icon : str
        Icon name used by the template (lucide naming).
    accent : str
        Accent colour token applied to the border and icon.
    title : str
        Heading shown when the author supplied no title.
    """

    icon: str
    accent: str
    title: str


@dc.dataclass(slots=True, frozen=True)
class CalloutMarker:
    """A callout recovered from the leading text of a paragraph."""

    kind: str
    title: str
    body: str


CALLOUT_STYLES: dict[str, CalloutStyle] = {
    "insight": CalloutStyle(icon="lightbulb", accent="blue", title="Key Insight"),
    "challenge": CalloutStyle(
        icon="alert-triangle", accent="amber", title="Challenge"
    ),
    "decision": CalloutStyle(icon="zap", accent="purple", title="Decision"),
    "metric": CalloutStyle(icon="trending-up", accent="green", title="Key Metric"),
    "note": CalloutStyle(icon="info", accent="muted", title="Note"),
}


def escape_title(title: str) -> str:
    """Escape pipes so the title survives embedding in a marker."""
    return title.replace("|", r"\|")


def unescape_title(title: str) -> str:
    """Reverse :func:`escape_title`."""
    return title.replace(r"\|", "|")


def callout_style(kind: str) -> CalloutStyle:
    """Return the style for ``kind``, using the note style for unknown kinds."""
    return CALLOUT_STYLES.get(kind.lower(), CALLOUT_STYLES["note"])


def annotate_callouts(markdown_text: str) -> str:
    """Replace every two-line callout block with an inline callout marker.

    Parameters
    ----------
    markdown_text : str
        Raw markdown for a post or project write-up.

    Returns
    -------
    str
        Markdown with each ``> [!kind] Title`` / ``> body`` pair collapsed into
        ``[CALLOUT:kind:Title] body``. Ordinary blockquotes and callouts with
        unrecognised kinds are returned untouched.
    """

    def _replace(match: re.Match[str]) -> str:
        kind, title, body = match.groups()
        return f"[CALLOUT:{kind.lower()}:{escape_title(title.strip())}] {body.strip()}"

    return CALLOUT_BLOCK_PATTERN.sub(_replace, markdown_text)


def parse_callout_marker(text: str) -> CalloutMarker | None:
    """Return the callout encoded at the start of ``text``, if any.

    The title is unescaped and trimmed; an empty title falls back to the
    default title for the kind. The body keeps everything after the marker,
    stripped of surrounding whitespace.
    """
    match = CALLOUT_MARKER_PATTERN.match(text)
    if match is None:
        return None
    kind, raw_title, rest = match.groups()
    title = unescape_title(raw_title).strip() or callout_style(kind).title
    return CalloutMarker(kind=kind, title=title, body=rest.strip())


__all__ = [
    "CALLOUT_BLOCK_PATTERN",
    "CALLOUT_MARKER_PATTERN",
    "CALLOUT_STYLES",
    "CalloutMarker",
    "CalloutStyle",
    "annotate_callouts",
    "callout_style",
    "escape_title",
    "parse_callout_marker",
    "unescape_title",
]
