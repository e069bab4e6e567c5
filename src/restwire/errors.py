# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy for endpoint execution.

Every failure surfaced by restwire derives from :class:`ClientError`. Errors are
terminal: nothing in this package catches one stage's error to recover in another.
"""

from __future__ import annotations

import socket
import ssl
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx transport exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    # httpx wraps lower-level failures; classify by the original cause when present.
    cause = exc.__cause__ or exc.__context__
    if isinstance(cause, (ssl.SSLError, ssl.CertificateError)) or isinstance(exc, (ssl.SSLError, ssl.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(cause, socket.gaierror) or isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


class ClientError(Exception):
    """Base class for all restwire errors."""


class UrlParseError(ClientError):
    """The client's base URL could not be parsed."""

    def __init__(self, url: str, source: BaseException):
        super().__init__(f"Error parsing URL {url!r}: {source}")
        self.url = url
        self.source = source


class DataParseError(ClientError):
    """An endpoint could not be serialized into its request body format."""

    def __init__(self, source: BaseException):
        super().__init__(f"Error serializing endpoint data: {source}")
        self.source = source


class ResponseParseError(ClientError):
    """
    A response body could not be deserialized into the declared result type.

    ``content`` holds the body decoded as UTF-8, or ``None`` when the body is not
    valid UTF-8.
    """

    def __init__(self, source: BaseException, content: str | None):
        super().__init__(f"Error parsing server response: {source}")
        self.source = source
        self.content = content


class RequestError(ClientError):
    """The transport failed before a response was received."""

    def __init__(self, url: str, method: str, source: BaseException):
        super().__init__(f"Error executing {method} {url}: {source}")
        self.url = url
        self.method = method
        self.source = source
        self.category = categorize_exception(source)


class ServerResponseError(ClientError):
    """The server answered with a non-success status code."""

    def __init__(self, code: int, content: str | None):
        super().__init__(f"Server returned error status {code}")
        self.code = code
        self.content = content


def decode_content(body: bytes) -> str | None:
    """Best-effort strict UTF-8 decode used for diagnostics."""
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        return None


__all__ = [
    "ClientError",
    "DataParseError",
    "ErrorCategory",
    "RequestError",
    "ResponseParseError",
    "ServerResponseError",
    "UrlParseError",
    "categorize_exception",
    "decode_content",
]
