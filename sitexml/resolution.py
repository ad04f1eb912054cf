r"""Lookup queries answered against a built :class:`SiteModel`.

Every function here is pure. It reads the snapshot it is handed, never mutates
it, and reports a miss by returning ``None``. Ids are compared numerically
after passing through :func:`sitexml.model.coerce_id`, so ``"7"``, ``7`` and
``"7.0"`` all address the same record. When duplicate ids exist the first
match in search order wins. No duplicate detection is attempted.

Theme resolution follows a three-tier cascade:

1. the page's explicit ``theme`` reference, if it names an existing theme;
2. otherwise the first theme whose ``default`` attribute is ``yes``;
3. otherwise the first theme in document order.

Example
-------
>>> from sitexml.model import build_site_model
>>> from sitexml.xml_adapter import parse_sitexml
>>> model = build_site_model(parse_sitexml(
...     '<site><theme id="1"/><theme id="2" default="YES"/>'
...     '<page id="5"><content id="9" name="intro"/></page></site>'
... ))
>>> resolve_theme_for_page(model, 5).id
2
>>> find_content_id_by_page_and_name(model, "5", "intro")
9
"""

from __future__ import annotations

import typing as typ

from .model import coerce_id

if typ.TYPE_CHECKING:
    from .model import Content, Page, SiteModel, Theme

IdLike = int | str


def find_page_by_id(
    model: SiteModel, page_id: IdLike | None, parent: Page | None = None
) -> Page | None:
    """Return the page with ``page_id`` anywhere below ``parent``.

    The walk is depth-first and pre-order: each sibling is compared, then its
    subpages are searched before moving on to the next sibling. ``parent``
    defaults to the model root.
    """
    target = coerce_id(page_id)
    if target is None:
        return None
    pages = model.pages if parent is None else parent.pages
    return _find_page(pages or (), target)


def _find_page(pages: typ.Sequence[Page], target: int) -> Page | None:
    for page in pages:
        if page.id == target:
            return page
        if page.pages:
            found = _find_page(page.pages, target)
            if found is not None:
                return found
    return None


def find_content_by_id(
    model: SiteModel, content_id: IdLike | None, parent: Page | None = None
) -> Content | None:
    """Return the content block with ``content_id`` anywhere below ``parent``.

    The walk is pre-order. A page's own content is checked before its subpages,
    and the next sibling is only visited once that subtree is exhausted.
    """
    target = coerce_id(content_id)
    if target is None:
        return None
    pages = model.pages if parent is None else parent.pages
    return _find_content(pages or (), target)


def _find_content(pages: typ.Sequence[Page], target: int) -> Content | None:
    for page in pages:
        for content in page.content:
            if content.id == target:
                return content
        if page.pages:
            found = _find_content(page.pages, target)
            if found is not None:
                return found
    return None


def find_content_id_by_page_and_name(
    model: SiteModel, page_id: IdLike | None, name: str
) -> int | None:
    """Return the id of the content named ``name`` owned by the given page.

    Only the page's own content is searched; descendants are ignored. Names are
    compared exactly.
    """
    page = find_page_by_id(model, page_id)
    if page is None:
        return None
    for content in page.content:
        if content.name == name:
            return content.id
    return None


def find_theme_by_id(model: SiteModel, theme_id: IdLike | None) -> Theme | None:
    """Return the first theme whose id equals ``theme_id``."""
    target = coerce_id(theme_id)
    if target is None:
        return None
    for theme in model.themes:
        if theme.id == target:
            return theme
    return None


def default_theme(model: SiteModel) -> Theme | None:
    """Return the first default-flagged theme, else the first theme, else None."""
    for theme in model.themes:
        if theme.is_default:
            return theme
    if model.themes:
        return model.themes[0]
    return None


def resolve_theme_for_page(
    model: SiteModel, page_id: IdLike | None
) -> Theme | None:
    """Return the effective theme for ``page_id`` using the theme cascade.

    Parameters
    ----------
    model : SiteModel
        Snapshot to query.
    page_id : int | str | None
        Page whose theme is requested. An unknown page skips straight to the
        default tiers.

    Returns
    -------
    Theme | None
        The resolved theme, or ``None`` when the site declares no themes.
    """
    page = find_page_by_id(model, page_id)
    if page is not None and page.theme_ref is not None:
        theme = find_theme_by_id(model, page.theme_ref)
        if theme is not None:
            return theme
    return default_theme(model)


__all__ = [
    "default_theme",
    "find_content_by_id",
    "find_content_id_by_page_and_name",
    "find_page_by_id",
    "find_theme_by_id",
    "resolve_theme_for_page",
]
