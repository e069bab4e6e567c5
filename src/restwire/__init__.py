# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
restwire package entrypoint.

Typed remote HTTP endpoints: an Endpoint dataclass describes how to build a
request and what its JSON response deserializes into, a Client supplies the
transport, and optional MiddleWare hooks see every request and response.
"""

from .config import ClientSettings, load_client_settings
from .endpoint import Endpoint, query_field, raw_field, skip_field
from .enums import RequestMethod, RequestType, ResponseType
from .errors import (
    ClientError,
    DataParseError,
    ErrorCategory,
    RequestError,
    ResponseParseError,
    ServerResponseError,
    UrlParseError,
)
from .execution import execute, execute_async
from .http import (
    AsyncClient,
    AsyncHttpxClient,
    AsyncStubClient,
    Client,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubClient,
    create_default_async_client,
    create_default_client,
)
from .log import setup_logging
from .middleware import HeaderMiddleware, MiddleWare, MiddlewareChain
from .version import __version__
from .wrapper import Wrapper

__all__ = [
    "AsyncClient",
    "AsyncHttpxClient",
    "AsyncStubClient",
    "Client",
    "ClientError",
    "ClientSettings",
    "DataParseError",
    "Endpoint",
    "ErrorCategory",
    "HeaderMiddleware",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "MiddleWare",
    "MiddlewareChain",
    "RequestError",
    "RequestMethod",
    "RequestType",
    "ResponseParseError",
    "ResponseType",
    "ServerResponseError",
    "StubClient",
    "UrlParseError",
    "Wrapper",
    "create_default_async_client",
    "create_default_client",
    "execute",
    "execute_async",
    "load_client_settings",
    "query_field",
    "raw_field",
    "setup_logging",
    "skip_field",
    "__version__",
]
