"""Cyclopts CLI entrypoint for inspecting and editing a SiteXML site.

The ``sitexml`` console script loads a site's ``?sitexml`` description, prints
the page tree, resolves pages and themes, fetches content blocks, and submits
edited content or a whole tree back to the server. Every option can also be
supplied through a ``SITEXML_``-prefixed environment variable.

Examples
--------
Print the page tree of a site:

>>> from sitexml.cli import app
>>> app(["tree", "--base-url", "https://example.com"])  # doctest: +SKIP

Show which theme page 4 renders with:

>>> app(["theme", "4", "--base-url", "https://example.com"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import ClientConfig, load_client_config
from .events import Notification, SiteXMLEvent
from .logging_config import setup_logging
from .session import SiteXMLSession
from .transport import SiteXMLTransport

if typ.TYPE_CHECKING:
    from .model import Page, SiteModel, Theme

DEFAULT_CONFIG = Path("sitexml.yaml")

app = App(name="sitexml", config=cyclopts.config.Env("SITEXML_", command=False))  # type: ignore[unknown-argument]

BaseUrlOption = typ.Annotated[
    str | None,
    Parameter(help="Site root URL (overrides the config file)", env_var="SITEXML_BASE_URL"),
]
ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to client config YAML", env_var="SITEXML_CONFIG"),
]


def _resolve_config(config: Path | None, base_url: str | None) -> ClientConfig:
    """Return the effective client configuration for a command."""
    if config is not None:
        resolved = load_client_config(config)
    elif DEFAULT_CONFIG.exists():
        resolved = load_client_config(DEFAULT_CONFIG)
    else:
        resolved = ClientConfig()
    if base_url is not None:
        resolved.base_url = base_url.rstrip("/")
    return resolved


def _build_session(config: Path | None, base_url: str | None) -> SiteXMLSession:
    client_config = _resolve_config(config, base_url)
    setup_logging(client_config.log_level, json=client_config.log_json)
    transport = SiteXMLTransport(
        client_config.base_url,
        timeout=client_config.timeout,
        user_agent=client_config.user_agent,
    )
    return SiteXMLSession(transport)


def _load_or_exit(session: SiteXMLSession) -> SiteModel:
    model = session.load_tree()
    if model is None:
        print("error: could not load a valid site tree")
        raise SystemExit(1)
    return model


def _format_page(page: Page, depth: int = 0) -> str:
    label = page.name or page.alias or "(unnamed)"
    details: list[str] = []
    if page.alias:
        details.append(f"alias={page.alias}")
    if page.theme_ref is not None:
        details.append(f"theme={page.theme_ref}")
    if page.hidden_from_navigation:
        details.append("nonavi")
    if page.is_start_page:
        details.append("start")
    suffix = f" ({', '.join(details)})" if details else ""
    return f"{'  ' * depth}[{page.id}] {label}{suffix}"


def _print_pages(pages: typ.Sequence[Page], depth: int = 0) -> None:
    for page in pages:
        print(_format_page(page, depth))
        if page.pages:
            _print_pages(page.pages, depth + 1)


def _exit_for_failed_save(label: str, *, unauthorized: bool) -> typ.NoReturn:
    if unauthorized:
        print(f"error: {label} was not saved: not authorized")
        raise SystemExit(2)
    print(f"error: {label} was not saved")
    raise SystemExit(1)


def _format_theme(theme: Theme) -> str:
    location = "/".join(part for part in (theme.dir, theme.file) if part)
    marker = " [default]" if theme.is_default else ""
    return f"[{theme.id}] {theme.name or '(unnamed)'} {location}{marker}".rstrip()


@app.command(help="Print the site's page tree.")
def tree(*, base_url: BaseUrlOption = None, config: ConfigOption = None) -> None:
    """Load the site tree and print every page, indented by depth."""
    with _build_session(config, base_url) as session:
        model = _load_or_exit(session)
        print(model.name or "(unnamed site)")
        _print_pages(model.pages, depth=1)
        for theme in model.themes:
            print(f"theme {_format_theme(theme)}")


@app.command(help="Show a page's attributes and content blocks.")
def page(
    page_id: int, *, base_url: BaseUrlOption = None, config: ConfigOption = None
) -> None:
    """Print a single page together with the content blocks it owns."""
    with _build_session(config, base_url) as session:
        _load_or_exit(session)
        found = session.page(page_id)
        if found is None:
            print(f"error: page {page_id} not found")
            raise SystemExit(1)
        print(_format_page(found))
        for meta in found.metas:
            label = meta.name or meta.http_equiv or meta.charset
            print(f"  meta {label}: {meta.content_attr or meta.content}")
        for block in found.content:
            print(f"  content [{block.id}] {block.name or '(unnamed)'} type={block.type}")


@app.command(help="Resolve the theme a page renders with.")
def theme(
    page_id: int, *, base_url: BaseUrlOption = None, config: ConfigOption = None
) -> None:
    """Print the theme chosen by the page/default/first-theme cascade."""
    with _build_session(config, base_url) as session:
        _load_or_exit(session)
        resolved = session.theme_for_page(page_id)
        if resolved is None:
            print("error: the site declares no themes")
            raise SystemExit(1)
        print(_format_theme(resolved))


@app.command(help="Fetch a content block by id or path.")
def content(
    key: str, *, base_url: BaseUrlOption = None, config: ConfigOption = None
) -> None:
    """Fetch content by numeric id or path and print it."""
    with _build_session(config, base_url) as session:
        body = session.load_content(key)
        if body is None:
            print(f"error: content {key} could not be loaded")
            raise SystemExit(1)
        print(body)


@app.command(name="save-content", help="Upload new markup for a content block.")
def save_content(
    cid: int,
    file: Path,
    *,
    base_url: BaseUrlOption = None,
    config: ConfigOption = None,
) -> None:
    """Submit the text of ``file`` as the new value of content ``cid``."""
    text = file.read_text(encoding="utf-8")
    with _build_session(config, base_url) as session:
        rejected: list[Notification] = []
        session.bus.subscribe(rejected.append, SiteXMLEvent.CONTENT_SAVE_UNAUTHORIZED)
        if not session.save_content(cid, text):
            _exit_for_failed_save(f"content {cid}", unauthorized=bool(rejected))
        print(f"saved content {cid}")


@app.command(name="save-tree", help="Upload a complete SiteXML document.")
def save_tree(
    file: Path, *, base_url: BaseUrlOption = None, config: ConfigOption = None
) -> None:
    """Submit the XML in ``file`` as the site's new tree."""
    text = file.read_text(encoding="utf-8")
    with _build_session(config, base_url) as session:
        rejected: list[Notification] = []
        session.bus.subscribe(rejected.append, SiteXMLEvent.TREE_SAVE_UNAUTHORIZED)
        if not session.save_tree(text):
            _exit_for_failed_save("site tree", unauthorized=bool(rejected))
        print("saved site tree")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``sitexml`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
