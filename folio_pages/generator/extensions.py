"""Markdown extension mapping article nodes onto the site's components.

:class:`ArticleExtension` registers a preprocessor that reads the sidebar TOC
entries from the source with
:func:`~folio_pages.markdown_parser.extract_headings`, and a treeprocessor that
runs after inline parsing and:

* gives ``h2``/``h3`` headings the ids of those TOC entries, in document
  order, and tags ``h2`` with a section accent;
* turns paragraphs that begin with a ``[CALLOUT:kind:title]`` marker into
  callout boxes;
* styles the remaining blockquotes as pull-quotes;
* opens external links in a new tab.

When the rendered headings and the TOC entries disagree in number (setext
headings, headings nested in quotes), each heading is slugged from its own
text instead, with raw HTML and entities restored from the stash first.
"""

from __future__ import annotations

import re
import typing as typ
import xml.etree.ElementTree as etree

from markdown import util
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor

from folio_pages.callouts import (
    CALLOUT_MARKER_PATTERN,
    callout_style,
    parse_callout_marker,
)
from folio_pages.markdown_parser import (
    HeadingEntry,
    extract_headings,
    section_accent,
    slugify_heading,
)

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

ESCAPED_CHAR_PATTERN = re.compile(f"{util.STX}([0-9]+){util.ETX}")
HEADING_TAGS = frozenset({"h2", "h3"})


def _unescape(text: str) -> str:
    """Resolve backslash-escape placeholders left by the inline parser."""
    return ESCAPED_CHAR_PATTERN.sub(lambda match: chr(int(match.group(1))), text)


class ArticleExtension(Extension):
    """Render headings, callouts, pull-quotes, and links for article bodies."""

    def __init__(self, accents: dict[str, str] | None = None) -> None:
        super().__init__()
        self.accents = accents

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the heading collector and the article treeprocessor."""
        processor = ArticleTreeprocessor(md, self.accents)
        # after whitespace normalisation (30), before fenced code is stashed (25)
        md.preprocessors.register(
            HeadingCollector(md, processor), "folio_headings", 28
        )
        md.treeprocessors.register(processor, "folio_article", 15)


class HeadingCollector(Preprocessor):
    """Hand the source's TOC entries to the article treeprocessor."""

    def __init__(self, md: Markdown, processor: ArticleTreeprocessor) -> None:
        super().__init__(md)
        self.processor = processor

    def run(self, lines: list[str]) -> list[str]:
        self.processor.headings = extract_headings("\n".join(lines))
        return lines


class ArticleTreeprocessor(Treeprocessor):
    """Rewrite the parsed article tree in place."""

    def __init__(self, md: Markdown, accents: dict[str, str] | None) -> None:
        super().__init__(md)
        self.accents = accents
        self.headings: list[HeadingEntry] = []

    def run(self, root: Element) -> Element:
        """Apply heading ids, callouts, pull-quotes, and link targets."""
        elements = list(root.iter())
        heading_elements = [el for el in elements if el.tag in HEADING_TAGS]
        entries: list[HeadingEntry | None] = [None] * len(heading_elements)
        if len(self.headings) == len(heading_elements):
            entries = list(self.headings)
        for element, entry in zip(heading_elements, entries, strict=True):
            self._decorate_heading(element, entry)

        for element in elements:
            if element.tag == "p":
                self._convert_callout(element)
            elif element.tag == "blockquote":
                element.set("class", "pull-quote")
            elif element.tag == "a":
                self._decorate_link(element)
        return root

    def _element_text(self, element: Element) -> str:
        """Return the heading text with stashed HTML and escapes restored."""
        stash = self.md.htmlStash.rawHtmlBlocks

        def _restore(match: re.Match[str]) -> str:
            index = int(match.group(1))
            if index >= len(stash):
                return ""
            block = stash[index]
            return block if isinstance(block, str) else "".join(block.itertext())

        text = util.HTML_PLACEHOLDER_RE.sub(_restore, "".join(element.itertext()))
        return _unescape(text).strip()

    def _decorate_heading(self, element: Element, entry: HeadingEntry | None) -> None:
        text = self._element_text(element)
        element.set("id", entry.id if entry else slugify_heading(text))
        if element.tag == "h2":
            element.set("data-accent", section_accent(text, self.accents))

    def _convert_callout(self, element: Element) -> None:
        """Swap a marker paragraph for a callout box; leave others alone."""
        text = _unescape(element.text or "")
        marker = parse_callout_marker(text)
        if marker is None:
            return
        style = callout_style(marker.kind)
        children = list(element)
        lead = marker.body
        if children:
            # inline children follow, so keep the spacing before them
            lead = CALLOUT_MARKER_PATTERN.match(text).group(3).lstrip()
        for child in children:
            element.remove(child)

        element.tag = "aside"
        element.text = None
        element.set("class", f"callout callout--{marker.kind}")
        element.set("data-icon", style.icon)
        element.set("data-accent", style.accent)

        title = etree.SubElement(element, "p")
        title.set("class", "callout__title")
        title.text = marker.title
        body = etree.SubElement(element, "div")
        body.set("class", "callout__body")
        body.text = lead
        for child in children:
            body.append(child)

    @staticmethod
    def _decorate_link(element: Element) -> None:
        href = element.get("href") or ""
        if href.startswith("#"):
            return
        element.set("target", "_blank")
        element.set("rel", "noopener noreferrer")


__all__ = ["ArticleExtension", "ArticleTreeprocessor", "HeadingCollector"]
