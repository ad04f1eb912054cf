"""Parse SiteXML text into lxml elements.

The tree builder only needs tag names, attribute lookup, descendant iteration,
and parent linkage, all of which ``lxml.etree`` elements provide. The parser is
configured so that a document fetched from a server can neither expand external
entities nor trigger network access.

Example
-------
>>> from sitexml.xml_adapter import is_site_document, parse_sitexml
>>> root = parse_sitexml("<site name='Demo'/>")
>>> is_site_document(root)
True
"""

from __future__ import annotations

import typing as typ

from lxml import etree

from ._constants import TAG_SITE
from .errors import SiteXMLParseError
from .model.helpers import local_name

if typ.TYPE_CHECKING:
    from lxml.etree import _Element


def _build_parser(encoding: str | None = None) -> etree.XMLParser:
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        huge_tree=False,
    )


def parse_sitexml(text: str | bytes) -> _Element:
    """Parse ``text`` and return the document's root element.

    Bytes are decoded by lxml from the BOM or encoding declaration. Text that
    is already decoded is re-encoded as UTF-8 and parsed as such, whatever its
    declaration claims.

    Raises
    ------
    SiteXMLParseError
        If ``text`` is empty or not well-formed XML.
    """
    if isinstance(text, str):
        # lxml rejects str input that carries an encoding declaration.
        payload = text.encode("utf-8")
        encoding: str | None = "utf-8"
    else:
        payload = text
        encoding = None
    if not payload.strip():
        msg = "SiteXML document is empty"
        raise SiteXMLParseError(msg)
    try:
        return etree.fromstring(payload, parser=_build_parser(encoding))
    except etree.XMLSyntaxError as exc:
        msg = f"SiteXML document is not well-formed: {exc}"
        raise SiteXMLParseError(msg) from exc


def is_site_document(root: _Element) -> bool:
    """Return True when the root element is ``site``, ignoring case and namespace."""
    return local_name(root) == TAG_SITE


__all__ = ["is_site_document", "parse_sitexml"]
