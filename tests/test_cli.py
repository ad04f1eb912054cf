"""Tests for the ``sitexml`` Cyclopts commands.

The commands are invoked as plain functions with ``_build_session`` patched to
return a session over a mocked transport, so no network or logging setup is
involved.
"""

from __future__ import annotations

import typing as typ

import pytest

from sitexml import cli
from sitexml.config import ClientConfig
from sitexml.errors import FailureKind, SiteXMLTransportError, SiteXMLUnauthorizedError
from sitexml.session import SiteXMLSession
from sitexml.transport import SiteXMLTransport

if typ.TYPE_CHECKING:
    from pathlib import Path
    from unittest.mock import Mock

    from pytest_mock import MockerFixture


@pytest.fixture
def transport(mocker: MockerFixture, sample_xml: str) -> Mock:
    mocked = mocker.Mock(spec=SiteXMLTransport)
    mocked.fetch_tree.return_value = sample_xml
    return mocked


@pytest.fixture(autouse=True)
def patched_session(monkeypatch: pytest.MonkeyPatch, transport: Mock) -> None:
    monkeypatch.setattr(
        cli, "_build_session", lambda config, base_url: SiteXMLSession(transport)
    )


def test_tree_prints_nested_pages(capsys: pytest.CaptureFixture[str]) -> None:
    cli.tree()

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Example Site"
    assert lines[1] == "  [1] Home (alias=home, start)"
    assert lines[2] == "    [2] About (alias=about, theme=1)"
    assert lines[3] == "      [3] Team (nonavi)"
    assert "  [5] Blog (theme=2)" in lines
    assert "theme [2] Fancy themes/fancy/main.html [default]" in lines


def test_load_or_exit_returns_the_loaded_model(transport: Mock) -> None:
    session = SiteXMLSession(transport)

    model = cli._load_or_exit(session)

    assert model is session.model, "the freshly loaded snapshot should be returned"
    assert model.name == "Example Site"


def test_tree_exits_when_the_load_fails(
    transport: Mock, capsys: pytest.CaptureFixture[str]
) -> None:
    transport.fetch_tree.return_value = "<html/>"

    with pytest.raises(SystemExit) as excinfo:
        cli.tree()

    assert excinfo.value.code == 1
    assert "could not load" in capsys.readouterr().out


def test_page_lists_its_content(capsys: pytest.CaptureFixture[str]) -> None:
    cli.page(3)

    out = capsys.readouterr().out
    assert "[3] Team (nonavi)" in out
    assert "meta robots: noindex" in out
    assert "content [30] intro type=None" in out


def test_unknown_page_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        cli.page(404)
    assert "page 404 not found" in capsys.readouterr().out


def test_theme_uses_the_cascade(capsys: pytest.CaptureFixture[str]) -> None:
    cli.theme(2)
    cli.theme(4)

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "[1] Plain themes/plain/index.html",
        "[2] Fancy themes/fancy/main.html [default]",
    ]


def test_content_prints_the_body(
    transport: Mock, capsys: pytest.CaptureFixture[str]
) -> None:
    transport.fetch_content.return_value = "<p>About us</p>"

    cli.content("20")

    assert capsys.readouterr().out == "<p>About us</p>\n"
    transport.fetch_content.assert_called_once_with("20")


def test_content_failure_exits(transport: Mock) -> None:
    transport.fetch_content.side_effect = SiteXMLTransportError(
        "missing", failure=FailureKind.CLIENT_ERROR, status_code=404
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.content("20")
    assert excinfo.value.code == 1


def test_save_content_reads_the_file(
    transport: Mock, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "intro.html"
    source.write_text("<p>New</p>", encoding="utf-8")

    cli.save_content(20, source)

    transport.save_content.assert_called_once_with(20, "<p>New</p>")
    assert capsys.readouterr().out == "saved content 20\n"


def test_save_content_unauthorized_exit_code(
    transport: Mock, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "intro.html"
    source.write_text("<p>New</p>", encoding="utf-8")
    transport.save_content.side_effect = SiteXMLUnauthorizedError("login")

    with pytest.raises(SystemExit) as excinfo:
        cli.save_content(20, source)

    assert excinfo.value.code == 2
    assert "not authorized" in capsys.readouterr().out


def test_save_tree_failure_exit_code(transport: Mock, tmp_path: Path) -> None:
    source = tmp_path / "site.xml"
    source.write_text("<site/>", encoding="utf-8")
    transport.save_tree.side_effect = SiteXMLTransportError("boom")

    with pytest.raises(SystemExit) as excinfo:
        cli.save_tree(source)

    assert excinfo.value.code == 1


def test_resolve_config_prefers_explicit_base_url(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    assert cli._resolve_config(None, None) == ClientConfig()

    (tmp_path / "sitexml.yaml").write_text(
        "base_url: https://from-file.example\ntimeout: 4\n", encoding="utf-8"
    )
    resolved = cli._resolve_config(None, "https://override.example/")
    assert resolved.base_url == "https://override.example"
    assert resolved.timeout == 4.0
