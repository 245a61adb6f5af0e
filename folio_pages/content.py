"""Load blog and project catalogs and their Markdown write-ups.

The site's content lives in two JSON catalogs (``blogs.json`` with a
``posts`` array and ``projects.json`` with a ``projects`` array) plus one
Markdown file per entry named after the entry id. This module decodes the
catalogs with msgspec into typed structs, reads the write-ups (substituting a
short placeholder document when a file is missing), and provides the small
sorting and filtering helpers the listing pages use.

Example
-------
>>> import datetime as dt
>>> from folio_pages.content import BlogPost, filter_by_tag
>>> post = BlogPost(
...     id="hello", title="Hello", description="d", date=dt.date(2024, 1, 1),
...     tags=["ai"],
... )
>>> [p.id for p in filter_by_tag([post], "ai")]
['hello']
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

import msgspec

from ._constants import DEFAULT_READ_TIME

ALL_FILTER = "All"
_FilterItem = typ.TypeVar("_FilterItem")


class ContentError(ValueError):
    """Raised when a content catalog cannot be decoded or is inconsistent."""


class BlogPost(msgspec.Struct, rename="camel", frozen=True):
    """A blog catalog entry."""

    id: str
    title: str
    description: str
    date: dt.date
    tags: list[str] = msgspec.field(default_factory=list)
    read_time: int | None = None

    @property
    def reading_minutes(self) -> int:
        """Return the declared reading time, defaulting to five minutes."""
        return self.read_time if self.read_time is not None else DEFAULT_READ_TIME


class Stat(msgspec.Struct, frozen=True):
    """A headline figure shown in a project's stats bar."""

    value: str
    label: str


class Project(msgspec.Struct, rename="camel", frozen=True):
    """A project catalog entry."""

    id: str
    title: str
    description: str
    category: str = ""
    year: str | int | None = None
    status: str = ""
    image: str | None = None
    client: str | None = None
    role: str | None = None
    github: str | None = None
    featured: bool = False
    technologies: list[str] = msgspec.field(default_factory=list)
    stats: list[Stat] = msgspec.field(default_factory=list)

    @property
    def in_production(self) -> bool:
        """Return whether the status marks the project as shipped."""
        return self.status in {"In Production", "Production"}


class BlogCatalog(msgspec.Struct, frozen=True):
    """Top-level shape of ``blogs.json``."""

    posts: list[BlogPost]


class ProjectCatalog(msgspec.Struct, frozen=True):
    """Top-level shape of ``projects.json``."""

    projects: list[Project]


def _decode(path: Path, kind: type[typ.Any]) -> typ.Any:
    """Decode ``path`` into ``kind``, wrapping failures in ContentError."""
    if not path.exists():
        msg = f"Content catalog '{path}' not found."
        raise FileNotFoundError(msg)
    try:
        return msgspec.json.decode(path.read_bytes(), type=kind)
    except msgspec.DecodeError as exc:
        msg = f"Invalid content catalog '{path}': {exc}"
        raise ContentError(msg) from exc


def _ensure_unique_ids(ids: list[str], path: Path) -> None:
    seen: set[str] = set()
    for entry_id in ids:
        if entry_id in seen:
            msg = f"Duplicate id '{entry_id}' in content catalog '{path}'."
            raise ContentError(msg)
        seen.add(entry_id)


def load_blog_catalog(path: Path) -> BlogCatalog:
    """Load ``blogs.json`` into a :class:`BlogCatalog`.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ContentError
        If the JSON is malformed, does not match the schema, or repeats an id.
    """
    catalog = typ.cast("BlogCatalog", _decode(path, BlogCatalog))
    _ensure_unique_ids([post.id for post in catalog.posts], path)
    return catalog


def load_project_catalog(path: Path) -> ProjectCatalog:
    """Load ``projects.json`` into a :class:`ProjectCatalog`."""
    catalog = typ.cast("ProjectCatalog", _decode(path, ProjectCatalog))
    _ensure_unique_ids([project.id for project in catalog.projects], path)
    return catalog


def load_post_markdown(post: BlogPost, directory: Path) -> str:
    """Return the write-up for ``post`` or a title-and-summary placeholder."""
    path = directory / f"{post.id}.md"
    if path.exists():
        return path.read_text(encoding="utf-8")
    return f"# {post.title}\n\n{post.description}"


def load_project_markdown(project: Project, directory: Path) -> str:
    """Return the write-up for ``project`` or an overview placeholder."""
    path = directory / f"{project.id}.md"
    if path.exists():
        return path.read_text(encoding="utf-8")
    return (
        f"## Overview\n\n{project.description}\n\n*Detailed write-up coming soon.*"
    )


def sort_posts(posts: list[BlogPost]) -> list[BlogPost]:
    """Return posts ordered newest first; ties keep catalog order."""
    return sorted(posts, key=lambda post: post.date, reverse=True)


def _matches_all(value: str | None) -> bool:
    return value is None or value == ALL_FILTER


def filter_by_tag(posts: list[BlogPost], tag: str | None) -> list[BlogPost]:
    """Return posts carrying ``tag``; ``None`` or ``"All"`` keeps every post."""
    if _matches_all(tag):
        return list(posts)
    return [post for post in posts if tag in post.tags]


def filter_by_category(
    projects: list[Project], category: str | None
) -> list[Project]:
    """Return projects in ``category``; ``None`` or ``"All"`` keeps them all."""
    if _matches_all(category):
        return list(projects)
    return [project for project in projects if project.category == category]


def _unique(values: typ.Iterable[_FilterItem]) -> list[_FilterItem]:
    return list(dict.fromkeys(values))


def collect_tags(posts: list[BlogPost]) -> list[str]:
    """Return every tag used by ``posts`` in first-seen order."""
    return _unique(tag for post in posts for tag in post.tags)


def collect_categories(projects: list[Project]) -> list[str]:
    """Return every non-empty project category in first-seen order."""
    return _unique(project.category for project in projects if project.category)


__all__ = [
    "ALL_FILTER",
    "BlogCatalog",
    "BlogPost",
    "ContentError",
    "Project",
    "ProjectCatalog",
    "Stat",
    "collect_categories",
    "collect_tags",
    "filter_by_category",
    "filter_by_tag",
    "load_blog_catalog",
    "load_post_markdown",
    "load_project_catalog",
    "load_project_markdown",
    "sort_posts",
]
