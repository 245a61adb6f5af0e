"""End-to-end tests for the ``folio generate`` pipeline.

These tests copy a miniature content tree into a temporary directory, point a
``site.yaml`` at it, and run the ``generate`` command. The written pages are
parsed with BeautifulSoup to check the pieces that must line up across
modules: sidebar TOC links resolve to rendered heading ids, callouts render as
boxes, listings carry their filter values, and the homepage shows the latest
posts. The ``toc`` and ``callouts`` inspection commands are covered as well.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
import pytest
from bs4 import BeautifulSoup

from folio_pages import cli

POST_MARKDOWN = """# Shipping RAG

Intro paragraph.

## The Problem

> [!challenge] Stale index | weekly
> Half of the docs had changed.

## Our Approach

### Retrieval

Chunks keep their heading path.

## Lessons Learned

> Measure retrieval before you tune prompts.
"""


@pytest.fixture
def site_tree(tmp_path: Path) -> Path:
    """Write a config, catalogs, and write-ups under ``tmp_path``."""
    content = tmp_path / "content"
    (content / "blogs").mkdir(parents=True)
    (content / "projects").mkdir()
    (content / "blogs.json").write_text(
        json.dumps(
            {
                "posts": [
                    {
                        "id": "shipping-rag",
                        "title": "Shipping RAG",
                        "description": "From notebook to production.",
                        "date": "2024-05-12",
                        "tags": ["AI", "RAG"],
                        "readTime": 8,
                    },
                    {
                        "id": "older",
                        "title": "Older Post",
                        "description": "An earlier note.",
                        "date": "2023-01-01",
                        "tags": ["Data"],
                    },
                ]
            }
        ),
        encoding="utf-8",
    )
    (content / "projects.json").write_text(
        json.dumps(
            {
                "projects": [
                    {
                        "id": "copilot",
                        "title": "Support Copilot",
                        "description": "Drafts replies for agents.",
                        "category": "AI",
                        "status": "In Production",
                        "featured": True,
                        "technologies": ["Python"],
                        "stats": [{"value": "42%", "label": "Faster replies"}],
                    }
                ]
            }
        ),
        encoding="utf-8",
    )
    (content / "blogs" / "shipping-rag.md").write_text(POST_MARKDOWN, encoding="utf-8")
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        f"""
site:
  name: Ada Lovelace
  base_url: https://ada.dev
  author: Ada Lovelace
  description: Notes and projects.
content:
  blogs: {content / "blogs.json"}
  projects: {content / "projects.json"}
  blog_markdown_dir: {content / "blogs"}
  project_markdown_dir: {content / "projects"}
output_dir: {tmp_path / "public"}
navigation:
  links:
    - label: Blog
      href: /blogs
hero:
  eyebrow: Engineer
  title: Hello there
  description: I build things.
""",
        encoding="utf-8",
    )
    return config_path


@pytest.fixture
def generated(site_tree: Path) -> Path:
    """Run ``generate`` and return the output directory."""
    cli.generate(config=site_tree)
    return site_tree.parent / "public"


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_generate_writes_every_page(generated: Path) -> None:
    """Detail, listing, home, and SEO artefacts are all written."""
    expected = [
        "blogs/shipping-rag.html",
        "blogs/older.html",
        "projects/copilot.html",
        "blogs/index.html",
        "projects/index.html",
        "index.html",
        "sitemap.xml",
        "robots.txt",
    ]
    missing = [name for name in expected if not (generated / name).exists()]
    assert not missing, f"expected generated files to exist: {missing}"


def test_generate_reports_written_paths(
    site_tree: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Every written file is echoed to stdout."""
    cli.generate(config=site_tree)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 8
    assert all(line.startswith("wrote ") for line in lines)


def test_output_dir_override(site_tree: Path, tmp_path: Path) -> None:
    """``--output-dir`` takes precedence over the configured folder."""
    override = tmp_path / "dist"
    cli.generate(config=site_tree, output_dir=override)
    assert (override / "index.html").exists()


def test_toc_links_resolve_to_heading_ids(generated: Path) -> None:
    """Each sidebar link targets an element id present in the body."""
    soup = _soup(generated / "blogs" / "shipping-rag.html")
    toc = soup.select_one("[data-toc]")
    assert toc is not None, "expected the TOC sidebar for a long post"
    assert toc["data-root-margin"] == "-80px 0px -70% 0px"
    targets = [link["href"].removeprefix("#") for link in toc.select("a")]
    assert targets == ["the-problem", "our-approach", "retrieval", "lessons-learned"]
    body_ids = {heading["id"] for heading in soup.select("article h2, article h3")}
    assert set(targets) <= body_ids


def test_post_body_drops_leading_title(generated: Path) -> None:
    """The hero shows the title, so the body must not repeat it."""
    soup = _soup(generated / "blogs" / "shipping-rag.html")
    assert soup.select("article h1") == []
    assert soup.select_one(".article-hero h1").get_text() == "Shipping RAG"
    assert "8 min read" in soup.get_text()


def test_post_renders_callout_and_pull_quote(generated: Path) -> None:
    """Callouts and plain quotes become their styled components."""
    soup = _soup(generated / "blogs" / "shipping-rag.html")
    callout = soup.select_one("aside.callout--challenge")
    assert callout is not None, "expected a challenge callout"
    assert callout.select_one(".callout__title").get_text() == "Stale index | weekly"
    assert soup.select_one("blockquote.pull-quote") is not None


def test_short_fallback_post_hides_toc(generated: Path) -> None:
    """Posts without a write-up render the placeholder without a sidebar."""
    soup = _soup(generated / "blogs" / "older.html")
    assert soup.select_one("[data-toc]") is None
    assert "An earlier note." in soup.select_one("article").get_text()


def test_project_page_shows_stats_and_fallback(generated: Path) -> None:
    """Projects without a write-up show the overview placeholder."""
    soup = _soup(generated / "projects" / "copilot.html")
    assert soup.select_one("article h2#overview") is not None
    assert "Detailed write-up coming soon." in soup.get_text()
    assert soup.select_one(".stats-bar dd").get_text() == "42%"


def test_blog_listing_orders_and_filters(generated: Path) -> None:
    """The listing shows newest first with an All filter followed by tags."""
    soup = _soup(generated / "blogs" / "index.html")
    titles = [card.h2.get_text() for card in soup.select(".post-card")]
    assert titles == ["Shipping RAG", "Older Post"]
    filters = [button["data-filter"] for button in soup.select("[data-filter]")]
    assert filters == ["All", "AI", "RAG", "Data"]
    counts = [int(button["data-count"]) for button in soup.select("[data-filter]")]
    assert counts == [2, 1, 1, 1]
    assert soup.title.get_text() == "Blog | Ada Lovelace"


def test_homepage_lists_latest_posts(generated: Path) -> None:
    """The homepage renders the hero and recent posts."""
    soup = _soup(generated / "index.html")
    assert soup.select_one(".hero h1").get_text() == "Hello there"
    latest = [card.h3.get_text() for card in soup.select("#writing .post-card")]
    assert latest == ["Shipping RAG", "Older Post"]


def test_toc_command_prints_json(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``folio toc`` prints the extracted headings as JSON."""
    path = tmp_path / "post.md"
    path.write_text(POST_MARKDOWN, encoding="utf-8")
    cli.toc(path)
    entries = typ.cast(
        "list[dict[str, object]]", msgspec_json.decode(capsys.readouterr().out)
    )
    assert entries[0] == {"id": "the-problem", "text": "The Problem", "level": 2}
    assert [entry["level"] for entry in entries] == [2, 2, 3, 2]


def test_callouts_command_prints_annotated_markdown(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``folio callouts`` prints the write-up with markers substituted."""
    path = tmp_path / "post.md"
    path.write_text(POST_MARKDOWN, encoding="utf-8")
    cli.callouts(path)
    out = capsys.readouterr().out
    assert r"[CALLOUT:challenge:Stale index \| weekly] Half of the docs had changed." in out
    assert "> Measure retrieval" in out


def test_project_listing_counts_categories(generated: Path) -> None:
    """Category buttons report how many projects each one shows."""
    soup = _soup(generated / "projects" / "index.html")
    options = [
        (button["data-filter"], button["data-count"])
        for button in soup.select("[data-filter]")
    ]
    assert options == [("All", "1"), ("AI", "1")]
