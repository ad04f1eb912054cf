"""In-process notifications emitted when loads and saves complete."""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import types
import typing as typ

logger = logging.getLogger(__name__)


class SiteXMLEvent(enum.StrEnum):
    """Names of the notifications a session emits."""

    TREE_LOADED = "sitexml.is.loaded"
    TREE_INVALID = "sitexml.is.not.valid"
    TREE_LOAD_FAILED = "sitexml.load.failed"
    CONTENT_LOADED = "content.is.loaded"
    CONTENT_LOAD_FAILED = "content.load.failed"
    CONTENT_SAVED = "content.is.saved"
    CONTENT_SAVE_UNAUTHORIZED = "content.not.saved.401"
    CONTENT_SAVE_FAILED = "content.not.saved"
    TREE_SAVED = "xml.is.saved"
    TREE_SAVE_UNAUTHORIZED = "xml.not.saved.401"
    TREE_SAVE_FAILED = "xml.not.saved"


@dc.dataclass(slots=True, frozen=True)
class Notification:
    """A single delivered event and its payload."""

    event: SiteXMLEvent
    data: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=lambda: types.MappingProxyType({})
    )


Subscriber = typ.Callable[[Notification], None]


class EventBus:
    """Deliver notifications to subscribed callables in subscription order.

    A subscriber may listen to one event or, with ``event=None``, to all of
    them. A failing subscriber is logged and skipped so the remaining
    subscribers still receive the notification.
    """

    def __init__(self) -> None:
        self._subscribers: list[tuple[SiteXMLEvent | None, Subscriber]] = []

    def subscribe(
        self, callback: Subscriber, event: SiteXMLEvent | None = None
    ) -> typ.Callable[[], None]:
        """Register ``callback`` and return a function that removes it."""
        entry = (event, callback)
        self._subscribers.append(entry)

        def _unsubscribe() -> None:
            if entry in self._subscribers:
                self._subscribers.remove(entry)

        return _unsubscribe

    def emit(self, event: SiteXMLEvent, **data: typ.Any) -> Notification:
        notification = Notification(event, types.MappingProxyType(dict(data)))
        logger.debug("emit %s %s", event.value, data)
        for wanted, callback in list(self._subscribers):
            if wanted is not None and wanted is not event:
                continue
            try:
                callback(notification)
            except Exception:
                logger.exception("subscriber %r failed handling %s", callback, event.value)
        return notification


__all__ = ["EventBus", "Notification", "SiteXMLEvent", "Subscriber"]
