"""High-level orchestration for blog and project detail pages.

This module turns catalog entries and their Markdown write-ups into themed
HTML. :class:`ArticlePageGenerator` extracts the table of contents from the
raw write-up, annotates callouts, renders the body with
:class:`~folio_pages.generator.renderer.HtmlContentRenderer`, and writes
``blogs/<id>.html`` and ``projects/<id>.html`` under the configured output
directory.

Example
-------
>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> from folio_pages.generator import ArticlePageGenerator
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> generator = ArticlePageGenerator(site)  # doctest: +SKIP
>>> generator.run(posts, projects)  # doctest: +SKIP
[PosixPath('public/blogs/hello.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from folio_pages.content import load_post_markdown, load_project_markdown
from folio_pages.generator.extensions import ArticleExtension
from folio_pages.generator.models import ArticleModel
from folio_pages.generator.renderer import HtmlContentRenderer
from folio_pages.markdown_parser import (
    BLOG_SECTION_ACCENTS,
    PROJECT_SECTION_ACCENTS,
    strip_leading_title,
)
from folio_pages.seo import build_post_metadata, build_project_metadata
from folio_pages.toc import build_toc_context

if typ.TYPE_CHECKING:
    from folio_pages.config import SiteConfig
    from folio_pages.content import BlogPost, Project


class ArticlePageGenerator:
    """Render blog posts and project write-ups into themed HTML pages."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        site_config : SiteConfig
            Site configuration describing content paths, theming, and output.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output_dir : Path, optional
            Override for the HTML output directory; defaults to the site config output.
        """
        self.site = site_config
        self.output_dir = output_dir or site_config.output_dir
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.blog_renderer = HtmlContentRenderer(
            site_config.pygments_style,
            article_extension=ArticleExtension(BLOG_SECTION_ACCENTS),
        )
        self.project_renderer = HtmlContentRenderer(
            site_config.pygments_style,
            article_extension=ArticleExtension(PROJECT_SECTION_ACCENTS),
        )
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("article_page.jinja")

    def build_post(self, post: BlogPost, markdown_text: str) -> ArticleModel:
        """Return the article model for a blog post and its raw write-up.

        The TOC is taken from the full write-up; the rendered body drops the
        leading ``# Title`` line because the hero already shows the title.
        """
        return ArticleModel(
            kind="blog",
            slug=post.id,
            title=post.title,
            body_html=self.blog_renderer.article(strip_leading_title(markdown_text)),
            toc=build_toc_context(markdown_text),
            meta=build_post_metadata(self.site, post),
            post=post,
        )

    def build_project(self, project: Project, markdown_text: str) -> ArticleModel:
        """Return the article model for a project and its raw write-up."""
        return ArticleModel(
            kind="project",
            slug=project.id,
            title=project.title,
            body_html=self.project_renderer.article(markdown_text),
            toc=build_toc_context(markdown_text),
            meta=build_project_metadata(self.site, project),
            project=project,
        )

    def render(self, article: ArticleModel) -> str:
        """Render ``article`` through the article template."""
        context = {
            "article": article,
            "site": self.site,
            "nav_links": self.site.nav_links,
            "meta": article.meta,
            "pygments_css": self.blog_renderer.stylesheet,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def write(self, article: ArticleModel) -> Path:
        """Render ``article`` and write it under its section directory."""
        section = "blogs" if article.kind == "blog" else "projects"
        out_dir = self.output_dir / section
        out_dir.mkdir(parents=True, exist_ok=True)
        output_path = out_dir / f"{article.slug}.html"
        output_path.write_text(self.render(article), encoding="utf-8")
        return output_path

    def run(self, posts: list[BlogPost], projects: list[Project]) -> list[Path]:
        """Render every post and project detail page to disk.

        Returns
        -------
        list[Path]
            Paths to the generated HTML documents, posts first, each group in
            catalog order.
        """
        content = self.site.content
        written: list[Path] = []
        for post in posts:
            markdown_text = load_post_markdown(post, content.blog_markdown_dir)
            written.append(self.write(self.build_post(post, markdown_text)))
        for project in projects:
            markdown_text = load_project_markdown(project, content.project_markdown_dir)
            written.append(self.write(self.build_project(project, markdown_text)))
        return written


__all__ = ["ArticlePageGenerator"]
