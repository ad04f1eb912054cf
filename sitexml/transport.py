r"""HTTP transport for the SiteXML endpoints.

This module wraps the four requests a SiteXML client makes: fetching the site
tree (``GET /?sitexml``), fetching content by id (``GET /?cid=<id>``) or by
path, saving a content block, and saving the whole tree (form-encoded
``POST /``). The tree comes back as raw bytes and other successful exchanges
return the decoded response body; every other outcome
raises :class:`~sitexml.errors.SiteXMLTransportError` tagged with a
:class:`~sitexml.errors.FailureKind`, or
:class:`~sitexml.errors.SiteXMLUnauthorizedError` when a save is rejected with
HTTP 401.

Example
-------
>>> from sitexml.transport import SiteXMLTransport
>>> transport = SiteXMLTransport("https://example.invalid", timeout=5)
>>> xml = transport.fetch_tree()  # doctest: +SKIP
>>> xml.startswith(b"<site")  # doctest: +SKIP
True
"""

from __future__ import annotations

import logging
from http import HTTPStatus

import requests

from ._constants import (
    CONTENT_QUERY_TEMPLATE,
    DEFAULT_USER_AGENT,
    FORM_CONTENT,
    FORM_CONTENT_ID,
    FORM_TREE,
    TREE_QUERY,
)
from .errors import FailureKind, SiteXMLTransportError, SiteXMLUnauthorizedError
from .model import coerce_id

logger = logging.getLogger(__name__)


class SiteXMLTransport:
    """Thin wrapper around the SiteXML GET and POST endpoints.

    The transport centralises the base path, timeouts, and status handling. It
    never retries; callers decide what to do with a failure.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        session: requests.Session | None = None,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """Initialise the transport.

        Parameters
        ----------
        base_url : str, optional
            Site root without a trailing slash, for example
            ``https://example.com/site``. Defaults to ``""``.
        session : requests.Session, optional
            Preconfigured session to reuse connections. Defaults to a new
            session per transport.
        timeout : float, optional
            Per-request timeout in seconds. Defaults to ``10.0``.
        user_agent : str, optional
            Value sent in the ``User-Agent`` header.
        """
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self.timeout = timeout
        self._headers = {"User-Agent": user_agent}

    def tree_url(self) -> str:
        return f"{self.base_url}/{TREE_QUERY}"

    def content_url(self, key: int | str) -> str:
        """Return the URL for a numeric content id or a content path."""
        content_id = coerce_id(key)
        if content_id is not None:
            return f"{self.base_url}/{CONTENT_QUERY_TEMPLATE.format(cid=content_id)}"
        path = str(key).strip().lstrip("/")
        return f"{self.base_url}/{path}"

    def fetch_tree(self) -> bytes:
        """Return the raw SiteXML document as undecoded bytes.

        The XML parser decodes the body itself from the document's BOM and
        encoding declaration, which a ``Content-Type`` charset guess could
        contradict.
        """
        return self._get(self.tree_url()).content

    def fetch_content(self, key: int | str) -> str:
        """Return the raw content stored under a content id or path."""
        return _decode_body(self._get(self.content_url(key)))

    def save_content(self, content_id: int | str, content: str) -> str:
        """Submit new markup for a content block.

        Raises
        ------
        ValueError
            If ``content_id`` is not a non-zero integer id.
        SiteXMLUnauthorizedError
            If the server rejects the save with HTTP 401.
        SiteXMLTransportError
            For any other failed exchange.
        """
        cid = coerce_id(content_id)
        if not cid:
            msg = f"Content id must be a non-zero integer, got {content_id!r}"
            raise ValueError(msg)
        return _decode_body(
            self._post({FORM_CONTENT_ID: str(cid), FORM_CONTENT: content})
        )

    def save_tree(self, xml: str) -> str:
        """Submit a complete SiteXML document."""
        return _decode_body(self._post({FORM_TREE: xml}))

    def _get(self, url: str) -> requests.Response:
        logger.debug("GET %s", url)
        try:
            response = self._session.get(
                url, headers=self._headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            msg = f"Failed to reach '{url}': {exc}"
            logger.warning(msg)
            raise SiteXMLTransportError(msg) from exc
        return _handle_response(response, url, allow_unauthorized=False)

    def _post(self, data: dict[str, str]) -> requests.Response:
        url = f"{self.base_url}/"
        logger.debug("POST %s fields=%s", url, sorted(data))
        try:
            response = self._session.post(
                url, data=data, headers=self._headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            msg = f"Failed to reach '{url}': {exc}"
            logger.warning(msg)
            raise SiteXMLTransportError(msg) from exc
        return _handle_response(response, url, allow_unauthorized=True)


def _handle_response(
    response: requests.Response, url: str, *, allow_unauthorized: bool
) -> requests.Response:
    status = response.status_code
    if status == HTTPStatus.OK:
        return response
    if allow_unauthorized and status == HTTPStatus.UNAUTHORIZED:
        msg = f"Request to '{url}' was not authorized"
        logger.warning(msg)
        raise SiteXMLUnauthorizedError(msg, status_code=status)
    failure = classify_status(status)
    snippet = (response.text or "")[:200]
    msg = f"Request to '{url}' failed with status {status}: {snippet}"
    logger.warning(msg)
    raise SiteXMLTransportError(msg, failure=failure, status_code=status)


def _decode_body(response: requests.Response) -> str:
    """Return the response body as text.

    Without a charset in ``Content-Type`` requests falls back to ISO-8859-1 for
    ``text/*`` bodies. UTF-8 is tried first instead, then the detected
    ``apparent_encoding``.
    """
    content_type = response.headers.get("Content-Type", "")
    if "charset=" not in content_type.lower():
        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError:
            response.encoding = response.apparent_encoding
    return response.text


def classify_status(status: int) -> FailureKind:
    """Map a non-200 HTTP status onto its failure category."""
    match status // 100:
        case 4:
            return FailureKind.CLIENT_ERROR
        case 5:
            return FailureKind.SERVER_ERROR
        case _:
            return FailureKind.OTHER


__all__ = ["SiteXMLTransport", "classify_status"]
