"""Tests for article rendering through the Markdown article extension.

Each test renders a small write-up with :class:`HtmlContentRenderer` and the
:class:`ArticleExtension`, then inspects the resulting HTML with
BeautifulSoup. The checks focus on the seams between the TOC and the body
(heading ids), callout boxes, pull-quotes, and external links.
"""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from folio_pages.generator import ArticleExtension, HtmlContentRenderer
from folio_pages.markdown_parser import (
    PROJECT_SECTION_ACCENTS,
    extract_headings,
)


@pytest.fixture
def renderer() -> HtmlContentRenderer:
    """Return a renderer configured like blog detail pages."""
    return HtmlContentRenderer(article_extension=ArticleExtension())


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_heading_ids_match_toc_entries(renderer: HtmlContentRenderer) -> None:
    """Rendered heading ids equal the ids extracted for the TOC."""
    markdown = (
        "## Why it failed\n\ntext\n\n"
        "### Step 1: Build & Deploy!\n\ntext\n\n"
        "## What's next?\n"
    )
    soup = _soup(renderer.article(markdown))
    rendered = [heading["id"] for heading in soup.select("h2, h3")]
    assert rendered == [entry.id for entry in extract_headings(markdown)]


def test_h2_headings_carry_section_accent(renderer: HtmlContentRenderer) -> None:
    """Level-two headings get an accent; level-three headings do not."""
    soup = _soup(renderer.article("## The Problem\n\n### Detail\n"))
    assert soup.h2["data-accent"] == "amber"
    assert soup.h3.get("data-accent") is None


def test_project_accents_use_project_table() -> None:
    """Project renderers consult the project keyword table."""
    renderer = HtmlContentRenderer(
        article_extension=ArticleExtension(PROJECT_SECTION_ACCENTS)
    )
    soup = _soup(renderer.article("## Impact\n"))
    assert soup.h2["data-accent"] == "green"


def test_callout_renders_as_aside(renderer: HtmlContentRenderer) -> None:
    """A callout blockquote becomes a styled aside with title and body."""
    soup = _soup(
        renderer.article("> [!insight] Key Insight\n> Latency dropped after caching.")
    )
    aside = soup.select_one("aside.callout")
    assert aside is not None, "expected the callout to render as an aside"
    assert "callout--insight" in aside["class"]
    assert aside["data-icon"] == "lightbulb"
    assert aside.select_one(".callout__title").get_text() == "Key Insight"
    assert aside.select_one(".callout__body").get_text() == (
        "Latency dropped after caching."
    )
    assert "CALLOUT" not in soup.get_text()
    assert soup.blockquote is None


def test_callout_title_keeps_pipes(renderer: HtmlContentRenderer) -> None:
    """Pipes in a callout title survive the trip through the marker."""
    soup = _soup(renderer.article("> [!metric] Recall | top 5\n> Went up."))
    assert soup.select_one(".callout__title").get_text() == "Recall | top 5"


def test_callout_body_keeps_inline_markup(renderer: HtmlContentRenderer) -> None:
    """Emphasis and code in the body stay inside the callout body."""
    soup = _soup(
        renderer.article("> [!note] Heads up\n> Use `uv sync` before **every** run.")
    )
    body = soup.select_one(".callout__body")
    assert body.get_text() == "Use uv sync before every run."
    assert body.code.get_text() == "uv sync"
    assert body.strong.get_text() == "every"


def test_plain_blockquote_becomes_pull_quote(renderer: HtmlContentRenderer) -> None:
    """Blockquotes that are not callouts render as pull-quotes."""
    soup = _soup(renderer.article("> Measure before you tune.\n"))
    assert soup.blockquote["class"] == ["pull-quote"]
    assert soup.select("aside") == []


def test_unknown_callout_kind_stays_a_blockquote(
    renderer: HtmlContentRenderer,
) -> None:
    """Unsupported kinds are rendered as ordinary quotes."""
    soup = _soup(renderer.article("> [!warning] Careful\n> Body\n"))
    assert soup.select("aside") == []
    assert soup.blockquote is not None


def test_external_links_open_in_new_tab(renderer: HtmlContentRenderer) -> None:
    """External links get a new-tab target; in-page anchors do not."""
    soup = _soup(
        renderer.article("See [notes](https://example.com) and [below](#results).\n")
    )
    external, anchor = soup.find_all("a")
    assert external["target"] == "_blank"
    assert external["rel"] == ["noopener", "noreferrer"]
    assert anchor.get("target") is None


def test_code_blocks_are_highlighted(renderer: HtmlContentRenderer) -> None:
    """Fenced code is highlighted and labelled with its language."""
    soup = _soup(renderer.article("```python\nprint('hi')\n```\n"))
    block = soup.select_one("div.codehilite")
    assert block is not None, "expected a highlighted code block"
    assert block["data-language"] == "python"


def test_empty_markdown_renders_nothing(renderer: HtmlContentRenderer) -> None:
    """Whitespace-only input produces an empty body."""
    assert renderer.article("  \n\n") == ""


def test_heading_ids_match_toc_for_inline_html_and_closing_hashes(
    renderer: HtmlContentRenderer,
) -> None:
    """Closing hashes, entities, and inline HTML do not split the two id sources."""
    markdown = (
        "## Intro ##\n\ntext\n\n"
        "## Foo &mdash; Bar\n\ntext\n\n"
        "## A <em>x</em> B\n"
    )
    soup = _soup(renderer.article(markdown))
    rendered = [heading["id"] for heading in soup.select("h2, h3")]
    toc = [entry.id for entry in extract_headings(markdown)]
    assert toc == ["intro", "foo-mdash-bar", "a-emxem-b"]
    assert rendered == toc


def test_unmatched_headings_are_slugged_from_restored_text(
    renderer: HtmlContentRenderer,
) -> None:
    """Setext headings have no TOC entry, so every id comes from heading text."""
    markdown = "Intro\n-----\n\n## Foo &mdash; Bar\n\n### A <em>x</em> B\n"
    soup = _soup(renderer.article(markdown))
    rendered = [heading["id"] for heading in soup.select("h2, h3")]
    assert rendered == ["intro", "foo-mdash-bar", "a-emxem-b"]


def test_blank_callout_title_uses_default(renderer: HtmlContentRenderer) -> None:
    """A callout written without a title renders with the kind's default title."""
    soup = _soup(renderer.article("> [!note]  \n> body\n"))
    aside = soup.select_one("aside.callout--note")
    assert aside is not None, "expected the untitled callout to render as an aside"
    assert aside.select_one(".callout__title").get_text() == "Note"
    assert aside.select_one(".callout__body").get_text() == "body"
    assert "CALLOUT" not in soup.get_text()
