"""Track the heading a reader is currently looking at.

The sidebar table of contents highlights the section being read near the top
of the viewport. :class:`TocTracker` owns that state for a single page view:
it is mounted against a document, watches each heading element through an
intersection observer, and is unmounted when the view goes away. Consumers
only ever read :attr:`TocTracker.active_id`.

The document is abstracted behind :class:`DocumentView` so the rules can be
exercised without a browser. Generated pages do not import this class: the
inline script in ``templates/article_page.jinja`` mirrors it (observe every
heading present, last intersecting entry wins, smooth scroll on click,
disconnect on ``pagehide``). Change both together.

Example
-------
>>> from folio_pages.markdown_parser import extract_headings
>>> from folio_pages.toc import TocTracker
>>> tracker = TocTracker(extract_headings("## Intro\\n## Usage\\n## FAQ"))
>>> tracker.active_id is None
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import TOC_ROOT_MARGIN
from .markdown_parser import HeadingEntry, extract_headings, should_render_toc

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class HeadingElement(typ.Protocol):
    """Rendered heading element with an ``id`` attribute."""

    id: str


class IntersectionEntry(typ.Protocol):
    """One visibility change delivered by the observer."""

    target: HeadingElement
    is_intersecting: bool


class IntersectionObserver(typ.Protocol):
    """Observer handed out by the document."""

    def observe(self, element: HeadingElement) -> None: ...

    def disconnect(self) -> None: ...


class DocumentView(typ.Protocol):
    """Subset of the document API the tracker relies on."""

    def get_element_by_id(self, element_id: str) -> HeadingElement | None: ...

    def create_observer(
        self,
        callback: cabc.Callable[[list[IntersectionEntry]], None],
        *,
        root_margin: str,
    ) -> IntersectionObserver: ...

    def scroll_into_view(self, element: HeadingElement, *, behavior: str) -> None: ...


class TocTracker:
    """Component-scoped active-heading state for one rendered document."""

    def __init__(
        self, headings: list[HeadingEntry], *, root_margin: str = TOC_ROOT_MARGIN
    ) -> None:
        self.headings = list(headings)
        self.root_margin = root_margin
        self._active_id: str | None = None
        self._document: DocumentView | None = None
        self._observer: IntersectionObserver | None = None

    @classmethod
    def from_markdown(cls, markdown_text: str) -> TocTracker:
        """Build a tracker for the headings found in ``markdown_text``."""
        return cls(extract_headings(markdown_text))

    @property
    def active_id(self) -> str | None:
        """Return the id of the heading currently being read, if any."""
        return self._active_id

    @property
    def mounted(self) -> bool:
        """Return whether the tracker is attached to a document."""
        return self._observer is not None

    def mount(self, document: DocumentView) -> list[str]:
        """Start observing every heading element present in ``document``.

        Parameters
        ----------
        document : DocumentView
            Document that owns the rendered heading elements.

        Returns
        -------
        list[str]
            Ids that were found and are now observed, in TOC order. Entries
            whose element is missing are skipped without error.
        """
        if self._observer is not None:
            self.unmount()
        self._document = document
        self._observer = document.create_observer(
            self.handle_intersections, root_margin=self.root_margin
        )
        observed: list[str] = []
        for heading in self.headings:
            element = document.get_element_by_id(heading.id)
            if element is None:
                continue
            self._observer.observe(element)
            observed.append(heading.id)
        return observed

    def handle_intersections(self, entries: list[IntersectionEntry]) -> None:
        """Apply a batch of visibility changes; the last intersecting entry wins."""
        if self._observer is None:
            return
        for entry in entries:
            if entry.is_intersecting:
                self._active_id = entry.target.id

    def activate(self, heading_id: str) -> bool:
        """Smooth-scroll to ``heading_id`` as a TOC click would.

        Returns
        -------
        bool
            ``True`` when the default anchor jump should be prevented. This is
            always the case for a mounted tracker, even when the element is
            missing and the scroll silently does nothing.
        """
        if self._document is None:
            return False
        element = self._document.get_element_by_id(heading_id)
        if element is not None:
            self._document.scroll_into_view(element, behavior="smooth")
        return True

    def unmount(self) -> None:
        """Stop observing and detach from the document."""
        if self._observer is not None:
            self._observer.disconnect()
        self._observer = None
        self._document = None


@dc.dataclass(slots=True)
class TocContext:
    """Template data for the table-of-contents sidebar.

    Attributes
    ----------
    entries : list[HeadingEntry]
        Extracted headings in document order.
    visible : bool
        ``False`` when too few headings exist and the sidebar is suppressed.
    root_margin : str
        Observer root margin used by the page script.
    """

    entries: list[HeadingEntry]
    visible: bool
    root_margin: str = TOC_ROOT_MARGIN


def build_toc_context(markdown_text: str) -> TocContext:
    """Return the sidebar context for ``markdown_text``."""
    entries = extract_headings(markdown_text)
    return TocContext(entries=entries, visible=should_render_toc(entries))


__all__ = [
    "DocumentView",
    "HeadingElement",
    "IntersectionEntry",
    "IntersectionObserver",
    "TocContext",
    "TocTracker",
    "build_toc_context",
]
