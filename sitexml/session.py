"""Orchestrate SiteXML loads, saves, and queries over a swappable snapshot.

A :class:`SiteXMLSession` owns the current :class:`~sitexml.model.SiteModel`,
the :class:`~sitexml.cache.ContentCache`, a transport, and an event bus. Loads
and saves report their outcome twice: as a return value and as a notification
on the bus. Transport and parse failures never escape as exceptions.

The model reference is replaced in a single assignment once a new tree is fully
built, so a snapshot taken before a reload keeps answering queries
consistently.

Example
-------
>>> from sitexml.session import SiteXMLSession
>>> from sitexml.transport import SiteXMLTransport
>>> session = SiteXMLSession(SiteXMLTransport("https://example.invalid"))
>>> session.load_tree()  # doctest: +SKIP
>>> session.theme_for_page(1).name  # doctest: +SKIP
'Default'
"""

from __future__ import annotations

import logging
import typing as typ
from concurrent.futures import Future, ThreadPoolExecutor

from . import resolution
from .cache import ContentCache, cache_key
from .errors import (
    SiteXMLParseError,
    SiteXMLTransportError,
    SiteXMLUnauthorizedError,
)
from .events import EventBus, SiteXMLEvent
from .model import build_site_model, coerce_id
from .xml_adapter import is_site_document, parse_sitexml

if typ.TYPE_CHECKING:
    import types

    from .model import Content, Page, SiteModel, Theme
    from .transport import SiteXMLTransport

logger = logging.getLogger(__name__)

_T = typ.TypeVar("_T")


class SiteXMLSession:
    """Client-side state for one SiteXML site."""

    def __init__(
        self,
        transport: SiteXMLTransport,
        *,
        bus: EventBus | None = None,
        cache: ContentCache | None = None,
    ) -> None:
        self.transport = transport
        self.bus = bus or EventBus()
        self.cache = cache or ContentCache()
        self.raw_tree: bytes | None = None
        self._model: SiteModel | None = None
        self._executor: ThreadPoolExecutor | None = None

    @property
    def model(self) -> SiteModel | None:
        """Return the current snapshot, or None before the first successful load."""
        return self._model

    def load_tree(self) -> SiteModel | None:
        """Fetch, parse, and build the site tree.

        Returns
        -------
        SiteModel | None
            The new snapshot, or ``None`` when the fetch failed or the document
            is not a SiteXML document. The previous snapshot is kept in both
            failure cases.
        """
        try:
            raw = self.transport.fetch_tree()
        except SiteXMLTransportError as exc:
            logger.warning("site tree load failed: %s", exc)
            self.bus.emit(
                SiteXMLEvent.TREE_LOAD_FAILED,
                failure=exc.failure,
                status_code=exc.status_code,
            )
            return None

        try:
            root = parse_sitexml(raw)
        except SiteXMLParseError as exc:
            logger.warning("site tree is not valid XML: %s", exc)
            self.bus.emit(SiteXMLEvent.TREE_INVALID, reason=str(exc))
            return None
        if not is_site_document(root):
            logger.warning("site tree root is <%s>, expected <site>", root.tag)
            self.bus.emit(
                SiteXMLEvent.TREE_INVALID, reason=f"unexpected root element {root.tag!r}"
            )
            return None

        model = build_site_model(root)
        self.raw_tree = raw
        self._model = model
        logger.info("loaded site %r (%d pages)", model.name, len(model.iter_pages()))
        self.bus.emit(SiteXMLEvent.TREE_LOADED, name=model.name)
        return model

    def load_content(self, key: int | str) -> str | None:
        """Fetch content by id or path and cache it under the normalized key."""
        normalized = cache_key(key)
        try:
            body = self.transport.fetch_content(key)
        except SiteXMLTransportError as exc:
            logger.warning("content %s load failed: %s", normalized, exc)
            self.bus.emit(
                SiteXMLEvent.CONTENT_LOAD_FAILED,
                key=normalized,
                failure=exc.failure,
                status_code=exc.status_code,
            )
            return None
        self.cache.put(key, body)
        logger.info("loaded content %s (%d chars)", normalized, len(body))
        self.bus.emit(SiteXMLEvent.CONTENT_LOADED, key=normalized, cid=coerce_id(key))
        return body

    def save_content(self, content_id: int | str, content: str) -> bool:
        """Submit ``content`` for ``content_id`` and report whether it was saved.

        Raises
        ------
        ValueError
            If ``content_id`` is not a non-zero integer id; no request is made.
        """
        try:
            self.transport.save_content(content_id, content)
        except SiteXMLUnauthorizedError:
            logger.info("content %s save was not authorized", content_id)
            self.bus.emit(
                SiteXMLEvent.CONTENT_SAVE_UNAUTHORIZED, cid=coerce_id(content_id)
            )
            return False
        except SiteXMLTransportError as exc:
            logger.warning("content %s save failed: %s", content_id, exc)
            self.bus.emit(
                SiteXMLEvent.CONTENT_SAVE_FAILED,
                cid=coerce_id(content_id),
                failure=exc.failure,
                status_code=exc.status_code,
            )
            return False
        logger.info("saved content %s", content_id)
        self.bus.emit(SiteXMLEvent.CONTENT_SAVED, cid=coerce_id(content_id))
        return True

    def save_tree(self, xml: str) -> bool:
        """Submit a complete SiteXML document and report whether it was saved."""
        try:
            self.transport.save_tree(xml)
        except SiteXMLUnauthorizedError:
            logger.info("site tree save was not authorized")
            self.bus.emit(SiteXMLEvent.TREE_SAVE_UNAUTHORIZED)
            return False
        except SiteXMLTransportError as exc:
            logger.warning("site tree save failed: %s", exc)
            self.bus.emit(
                SiteXMLEvent.TREE_SAVE_FAILED,
                failure=exc.failure,
                status_code=exc.status_code,
            )
            return False
        logger.info("saved site tree (%d chars)", len(xml))
        self.bus.emit(SiteXMLEvent.TREE_SAVED)
        return True

    def submit(
        self, operation: typ.Callable[..., _T], *args: typ.Any
    ) -> Future[_T]:
        """Run a load or save in the background and return its future.

        Submissions run one at a time in submission order. Each future
        completes exactly once and nothing is retried; a caller that no longer
        wants a result simply ignores it.
        """
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="sitexml"
            )
        return self._executor.submit(operation, *args)

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> SiteXMLSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        self.close()

    def page(self, page_id: int | str, parent: Page | None = None) -> Page | None:
        model = self._model
        if model is None:
            return None
        return resolution.find_page_by_id(model, page_id, parent)

    def content(
        self, content_id: int | str, parent: Page | None = None
    ) -> Content | None:
        model = self._model
        if model is None:
            return None
        return resolution.find_content_by_id(model, content_id, parent)

    def content_id(self, page_id: int | str, name: str) -> int | None:
        model = self._model
        if model is None:
            return None
        return resolution.find_content_id_by_page_and_name(model, page_id, name)

    def theme(self, theme_id: int | str) -> Theme | None:
        model = self._model
        if model is None:
            return None
        return resolution.find_theme_by_id(model, theme_id)

    def theme_for_page(self, page_id: int | str) -> Theme | None:
        model = self._model
        if model is None:
            return None
        return resolution.resolve_theme_for_page(model, page_id)

    def default_theme(self) -> Theme | None:
        model = self._model
        if model is None:
            return None
        return resolution.default_theme(model)


__all__ = ["SiteXMLSession"]
