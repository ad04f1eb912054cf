"""Client-side model builder and query layer for SiteXML sites.

SiteXML describes a website as nested ``page`` elements carrying ``meta`` and
``content`` blocks, plus a flat list of ``theme`` definitions. This package
fetches that description, turns it into an immutable :class:`SiteModel`, and
answers lookup questions against it: pages and content by id, content ids by
page and name, and the effective theme of a page.

Exports
-------
- ``SiteXMLSession``: owns the current model snapshot, the content cache, the
  transport, and the event bus.
- ``SiteXMLTransport``: ``requests``-backed access to the SiteXML endpoints.
- ``build_site_model`` / ``parse_sitexml``: offline tree construction.
- ``resolve_theme_for_page`` and the other lookup functions.

Examples
--------
>>> from sitexml import build_site_model, parse_sitexml, resolve_theme_for_page
>>> model = build_site_model(parse_sitexml(
...     '<site><theme id="3" name="Plain"/><page id="1"/></site>'
... ))
>>> resolve_theme_for_page(model, 1).name
'Plain'
"""

from __future__ import annotations

from .cache import ContentCache, cache_key
from .errors import (
    FailureKind,
    SiteXMLConfigError,
    SiteXMLError,
    SiteXMLParseError,
    SiteXMLTransportError,
    SiteXMLUnauthorizedError,
)
from .events import EventBus, Notification, SiteXMLEvent
from .model import Content, Meta, Page, SiteModel, Theme, build_site_model, coerce_id
from .resolution import (
    default_theme,
    find_content_by_id,
    find_content_id_by_page_and_name,
    find_page_by_id,
    find_theme_by_id,
    resolve_theme_for_page,
)
from .session import SiteXMLSession
from .transport import SiteXMLTransport
from .xml_adapter import is_site_document, parse_sitexml

__all__ = [
    "Content",
    "ContentCache",
    "EventBus",
    "FailureKind",
    "Meta",
    "Notification",
    "Page",
    "SiteModel",
    "SiteXMLConfigError",
    "SiteXMLError",
    "SiteXMLEvent",
    "SiteXMLParseError",
    "SiteXMLSession",
    "SiteXMLTransport",
    "SiteXMLTransportError",
    "SiteXMLUnauthorizedError",
    "Theme",
    "build_site_model",
    "cache_key",
    "coerce_id",
    "default_theme",
    "find_content_by_id",
    "find_content_id_by_page_and_name",
    "find_page_by_id",
    "find_theme_by_id",
    "is_site_document",
    "parse_sitexml",
    "resolve_theme_for_page",
]
