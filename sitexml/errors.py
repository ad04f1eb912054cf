"""Exception hierarchy shared by the sitexml client."""

from __future__ import annotations

import enum


class FailureKind(enum.StrEnum):
    """Categorized outcome of a failed HTTP exchange."""

    CLIENT_ERROR = "client-error"
    SERVER_ERROR = "server-error"
    UNAUTHORIZED = "unauthorized"
    OTHER = "other"


class SiteXMLError(Exception):
    """Base class for every error raised by sitexml."""


class SiteXMLParseError(SiteXMLError, ValueError):
    """Raised when SiteXML text is not well-formed XML."""


class SiteXMLConfigError(SiteXMLError, ValueError):
    """Raised when the client configuration is invalid or incomplete."""


class SiteXMLTransportError(SiteXMLError, RuntimeError):
    """Raised when the SiteXML endpoint cannot satisfy a request.

    Attributes
    ----------
    failure : FailureKind
        Status class of the failure.
    status_code : int | None
        HTTP status returned by the server, or ``None`` when the request never
        produced a response.
    """

    def __init__(
        self,
        message: str,
        *,
        failure: FailureKind = FailureKind.OTHER,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.failure = failure
        self.status_code = status_code


class SiteXMLUnauthorizedError(SiteXMLTransportError):
    """Raised when a save request is rejected with HTTP 401."""

    def __init__(self, message: str, *, status_code: int | None = 401) -> None:
        super().__init__(
            message, failure=FailureKind.UNAUTHORIZED, status_code=status_code
        )


__all__ = [
    "FailureKind",
    "SiteXMLConfigError",
    "SiteXMLError",
    "SiteXMLParseError",
    "SiteXMLTransportError",
    "SiteXMLUnauthorizedError",
]
