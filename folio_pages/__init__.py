"""Static site generator for a personal portfolio and blog.

This package renders the homepage, project and blog listings, and project and
blog detail pages from JSON content catalogs and Markdown write-ups. Detail
pages get typed callout boxes and a scroll-synced table of contents.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from folio_pages import main
>>> main(["generate"])  # doctest: +SKIP
>>> main(["toc", "content/blogs/hello.md"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
