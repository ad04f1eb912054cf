"""Typed SiteXML site model and the tree builder that produces it.

This subpackage turns a parsed SiteXML document into frozen dataclasses
(:class:`SiteModel`, :class:`Page`, :class:`Content`, :class:`Meta`,
:class:`Theme`). Each page only owns the elements whose immediate parent is
that page's own element, so content nested under a child page never leaks into
its ancestors. The primary entry point is :func:`build_site_model`.

Examples
--------
>>> from sitexml.model import build_site_model
>>> from sitexml.xml_adapter import parse_sitexml
>>> root = parse_sitexml('<site><page id="1"><page id="2"/></page></site>')
>>> model = build_site_model(root)
>>> [page.id for page in model.iter_pages()]
[1, 2]
"""

from .builder import build_site_model
from .helpers import coerce_id
from .models import Content, Meta, Page, SiteModel, Theme

__all__ = [
    "Content",
    "Meta",
    "Page",
    "SiteModel",
    "Theme",
    "build_site_model",
    "coerce_id",
]
