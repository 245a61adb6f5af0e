"""Cyclopts CLI entrypoint for generating the portfolio site.

The ``folio`` console script defined here renders the static site from the
content catalogs and Markdown write-ups, and offers two inspection commands
for authors: ``folio toc`` prints the table of contents a write-up will get,
and ``folio callouts`` prints the write-up with callouts annotated the way the
renderer sees them.

Examples
--------
Generate the whole site for the default configuration:

>>> from folio_pages.cli import main
>>> main()  # doctest: +SKIP

Render into a custom directory:

>>> from folio_pages.cli import app
>>> app(["generate", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
import msgspec
from cyclopts import App, Parameter

from .callouts import annotate_callouts
from .config import load_site_config
from .content import load_blog_catalog, load_project_catalog
from .generator import ArticlePageGenerator
from .homepage import HomePageBuilder
from .listing import ListingPageBuilder
from .markdown_parser import extract_headings
from .seo import SeoBuilder

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="folio", config=cyclopts.config.Env("FOLIO_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate the static portfolio site from content catalogs.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="FOLIO_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="FOLIO_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Generate every page of the site.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``FOLIO_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.

    Raises
    ------
    FileNotFoundError
        If the configuration file or a content catalog is missing.
    SiteConfigError
        If the configuration is invalid.
    ContentError
        If a content catalog is malformed.
    """
    site_config = load_site_config(config)
    if output_dir is not None:
        site_config = dc.replace(site_config, output_dir=output_dir)

    posts = list(load_blog_catalog(site_config.content.blogs).posts)
    projects = list(load_project_catalog(site_config.content.projects).projects)

    written: list[Path] = []
    written.extend(ArticlePageGenerator(site_config).run(posts, projects))
    written.extend(ListingPageBuilder(site_config).run(posts, projects))
    written.append(HomePageBuilder(site_config).run(posts, projects))
    written.extend(SeoBuilder(site_config).run(posts, projects))
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the table of contents of a Markdown write-up as JSON.")
def toc(path: Path, /) -> None:
    """Print the level-two and level-three headings of ``path``.

    Each entry carries the ``id`` the renderer assigns to the heading, the
    heading ``text``, and its ``level``.
    """
    headings = extract_headings(path.read_text(encoding="utf-8"))
    print(msgspec.json.format(msgspec.json.encode(headings), indent=2).decode())


@app.command(help="Print a Markdown write-up with callouts annotated.")
def callouts(path: Path, /) -> None:
    """Print ``path`` after callout annotation."""
    print(annotate_callouts(path.read_text(encoding="utf-8")), end="")


def main(argv: list[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the `folio` console command.

    Parameters
    ----------
    argv : list[str] or None, optional
        Arguments to parse instead of ``sys.argv``.

    Examples
    --------
    >>> main(["toc", "post.md"])  # doctest: +SKIP
    """
    app(argv)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
