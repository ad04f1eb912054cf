"""Build an immutable :class:`SiteModel` from a parsed SiteXML document."""

from __future__ import annotations

import logging
import typing as typ

from lxml import etree

from .._constants import TAG_CONTENT, TAG_META, TAG_PAGE, TAG_SITE, TAG_THEME
from .helpers import (
    _direct_children,
    _inner_markup,
    _optional_strip,
    coerce_id,
    local_name,
)
from .models import Content, Meta, Page, SiteModel, Theme

if typ.TYPE_CHECKING:
    from lxml.etree import _Element, _ElementTree

logger = logging.getLogger(__name__)


def build_site_model(document: _Element | _ElementTree) -> SiteModel:
    """Convert a parsed SiteXML document into a :class:`SiteModel`.

    Parameters
    ----------
    document : lxml element or element tree
        Parsed document. The first ``site`` element in document order (the
        root included) becomes the model root. SiteXML tags match regardless
        of case and namespace.

    Returns
    -------
    SiteModel
        Fully built model. When the document holds no ``site`` element an
        empty model is returned; deciding whether such a document is valid is
        left to the caller.

    Examples
    --------
    >>> from lxml import etree
    >>> root = etree.fromstring(
    ...     '<site name="Demo"><page id="1" name="Home"/></site>'
    ... )
    >>> model = build_site_model(root)
    >>> model.name, model.pages[0].name, model.pages[0].pages
    ('Demo', 'Home', None)
    """
    root = document.getroot() if isinstance(document, etree._ElementTree) else document
    site = next(
        (element for element in root.iter() if local_name(element) == TAG_SITE), None
    )
    if site is None:
        logger.debug("document has no <%s> element; returning empty model", TAG_SITE)
        return SiteModel()

    model = SiteModel(
        name=site.get("name"),
        metas=_build_metas(site),
        themes=_build_themes(site),
        pages=_build_pages(site) or (),
    )
    logger.debug(
        "built site model %r with %d top-level pages and %d themes",
        model.name,
        len(model.pages),
        len(model.themes),
    )
    return model


def _build_pages(parent: _Element) -> tuple[Page, ...] | None:
    """Return the pages directly under ``parent``, or None when there are none."""
    pages = tuple(_build_page(element) for element in _direct_children(parent, TAG_PAGE))
    return pages or None


def _build_page(element: _Element) -> Page:
    return Page(
        id=coerce_id(element.get("id")),
        name=element.get("name"),
        alias=element.get("alias"),
        theme_ref=coerce_id(element.get("theme")),
        no_navi=element.get("nonavi"),
        start_page=element.get("type"),
        content=_build_content(element),
        metas=_build_metas(element),
        pages=_build_pages(element),
    )


def _build_metas(parent: _Element) -> tuple[Meta, ...]:
    return tuple(
        Meta(
            name=element.get("name"),
            charset=element.get("charset"),
            http_equiv=element.get("http-equiv"),
            scheme=element.get("scheme"),
            content_attr=element.get("content"),
            content=_inner_markup(element),
        )
        for element in _direct_children(parent, TAG_META)
    )


def _build_content(parent: _Element) -> tuple[Content, ...]:
    return tuple(
        Content(
            id=coerce_id(element.get("id")),
            name=element.get("name"),
            type=element.get("type"),
            content=_inner_markup(element),
        )
        for element in _direct_children(parent, TAG_CONTENT)
    )


def _build_themes(site: _Element) -> tuple[Theme, ...]:
    return tuple(
        Theme(
            id=coerce_id(element.get("id")),
            dir=element.get("dir"),
            file=element.get("file"),
            name=element.get("name"),
            default=element.get("default"),
            ajax_browsing=_optional_strip(element.get("ajaxbrowsing")),
            content=_build_content(element),
        )
        for element in _direct_children(site, TAG_THEME)
    )


__all__ = ["build_site_model"]
