"""Utilities for rendering article markdown with syntax-highlighted code."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from folio_pages.callouts import annotate_callouts

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class HtmlContentRenderer:
    """Render article markdown with callouts and consistent code styling."""

    def __init__(
        self,
        pygments_style: str = "github-dark",
        article_extension: Extension | None = None,
    ) -> None:
        """Initialize a renderer with a pygments style and article extension.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"github-dark"``.
        article_extension : Extension, optional
            Markdown extension that maps headings, callouts, and quotes onto
            site components; pass ``None`` for plain markdown output.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._article_extension = article_extension

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
        ]
        if self._article_extension:
            extensions.append(self._article_extension)
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(normalized)
        return self._annotate_codehilite(html, normalized)

    def article(self, text: str) -> str:
        """Annotate callouts in ``text`` and render it as an article body."""
        return self.markdown(annotate_callouts(text))

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["CODE_BLOCK_PATTERN", "HtmlContentRenderer"]
