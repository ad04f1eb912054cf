"""Typed, immutable dataclasses describing a SiteXML site tree."""

from __future__ import annotations

import dataclasses as dc

from .._constants import DEFAULT_FLAG, START_PAGE_TYPE, TRUTHY_FLAGS


@dc.dataclass(slots=True, frozen=True)
class Content:
    """A content block owned by exactly one page or theme.

    Attributes
    ----------
    id : int | None
        Numeric content id, or ``None`` when the attribute is missing or not
        numeric.
    name : str | None
        Content name used for page-scoped lookups.
    type : str | None
        Opaque content type (for example ``html`` or ``text``).
    content : str
        Raw inner markup of the ``content`` element.
    """

    id: int | None
    name: str | None = None
    type: str | None = None
    content: str = ""


@dc.dataclass(slots=True, frozen=True)
class Meta:
    """Metadata record analogous to an HTML ``<meta>`` element.

    ``content_attr`` holds the ``content`` attribute while ``content`` holds the
    element's inner markup; documents may use either or both.
    """

    name: str | None = None
    charset: str | None = None
    http_equiv: str | None = None
    scheme: str | None = None
    content_attr: str | None = None
    content: str = ""


@dc.dataclass(slots=True, frozen=True)
class Page:
    """One node of the site tree.

    ``pages`` is ``None`` when the page has no child pages; it is never an
    empty tuple.
    """

    id: int | None
    name: str | None = None
    alias: str | None = None
    theme_ref: int | None = None
    no_navi: str | None = None
    start_page: str | None = None
    content: tuple[Content, ...] = ()
    metas: tuple[Meta, ...] = ()
    pages: tuple[Page, ...] | None = None

    @property
    def has_subpages(self) -> bool:
        """Return True when the page owns at least one child page."""
        return self.pages is not None

    @property
    def hidden_from_navigation(self) -> bool:
        """Return True when ``nonavi`` carries a truthy flag."""
        if self.no_navi is None:
            return False
        return self.no_navi.strip().lower() in TRUTHY_FLAGS

    @property
    def is_start_page(self) -> bool:
        """Return True when the raw ``type`` attribute marks the start page."""
        if self.start_page is None:
            return False
        return self.start_page.strip().lower() == START_PAGE_TYPE


@dc.dataclass(slots=True, frozen=True)
class Theme:
    """Site-level visual theme definition."""

    id: int | None
    dir: str | None = None
    file: str | None = None
    name: str | None = None
    default: str | None = None
    ajax_browsing: str | None = None
    content: tuple[Content, ...] = ()

    @property
    def is_default(self) -> bool:
        """Return True when the ``default`` attribute equals ``yes``."""
        if self.default is None:
            return False
        return self.default.lower() == DEFAULT_FLAG


@dc.dataclass(slots=True, frozen=True)
class SiteModel:
    """Root aggregate produced by a single successful tree load."""

    name: str | None = None
    metas: tuple[Meta, ...] = ()
    themes: tuple[Theme, ...] = ()
    pages: tuple[Page, ...] = ()

    def iter_pages(self) -> list[Page]:
        """Return every page in the tree in pre-order document order."""
        ordered: list[Page] = []
        stack = list(reversed(self.pages))
        while stack:
            page = stack.pop()
            ordered.append(page)
            if page.pages:
                stack.extend(reversed(page.pages))
        return ordered


__all__ = ["Content", "Meta", "Page", "SiteModel", "Theme"]
