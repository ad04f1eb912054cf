"""Utility helpers shared by the SiteXML tree builder and resolvers."""

from __future__ import annotations

import math
import typing as typ

from lxml import etree

if typ.TYPE_CHECKING:
    from lxml.etree import _Element


def coerce_id(value: object) -> int | None:
    """Return ``value`` as an integer id, or None when it is not numeric.

    Ids arrive as attribute text, so every id comparison in the package funnels
    through this function. Integral floats and numeric strings such as
    ``" 12 "`` or ``"12.0"`` are accepted; booleans, blanks, and fractional
    values are not.

    Examples
    --------
    >>> coerce_id("12")
    12
    >>> coerce_id(" 7.0 ")
    7
    >>> coerce_id("intro") is None
    True
    """
    match value:
        case bool():
            return None
        case int():
            return value
        case float():
            return int(value) if value.is_integer() else None
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            try:
                return int(sanitized)
            except ValueError:
                pass
            try:
                number = float(sanitized)
            except ValueError:
                return None
            if math.isfinite(number) and number.is_integer():
                return int(number)
            return None
        case _:
            return None


def local_name(element: _Element) -> str | None:
    """Return the lowercased tag of ``element`` without its namespace.

    Comments and processing instructions have no string tag and yield None.

    Examples
    --------
    >>> from lxml import etree
    >>> local_name(etree.fromstring('<Site xmlns="urn:x"/>'))
    'site'
    """
    tag = element.tag
    if not isinstance(tag, str):
        return None
    return etree.QName(tag).localname.lower()


def _direct_children(parent: _Element, tag: str) -> list[_Element]:
    """Return the children of ``parent`` whose local name is ``tag``.

    Tags compare case-insensitively and ignore namespaces, the same rule
    :func:`local_name` applies to the document root. Nested pages' elements
    belong to their own page and are not returned for an ancestor.
    """
    return [element for element in parent if local_name(element) == tag]


def _inner_markup(element: _Element) -> str:
    """Return the serialized inner markup of ``element``."""
    parts = [element.text or ""]
    parts.extend(
        etree.tostring(child, encoding="unicode", with_tail=True) for child in element
    )
    return "".join(parts)


def _optional_strip(value: str | None) -> str | None:
    """Return a stripped string value or None when absent."""
    if value is None:
        return None
    return value.strip()


__all__ = [
    "_direct_children",
    "_inner_markup",
    "_optional_strip",
    "coerce_id",
    "local_name",
]
