# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response plumbing and client exports."""

from .adapters import AsyncStubClient, StubClient
from .client import AsyncClient, Client, create_default_async_client, create_default_client
from .codec import (
    build_body,
    build_endpoint_request,
    build_request,
    parse,
    register_request_type,
    register_response_type,
)
from .headers import header_value, set_default_header, set_header
from .httpx_client import AsyncHttpxClient, HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import encode_query, join_url, parse_base_url

__all__ = [
    "AsyncClient",
    "AsyncHttpxClient",
    "AsyncStubClient",
    "Client",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "StubClient",
    "build_body",
    "build_endpoint_request",
    "build_request",
    "create_default_async_client",
    "create_default_client",
    "encode_query",
    "header_value",
    "join_url",
    "parse",
    "parse_base_url",
    "register_request_type",
    "register_response_type",
    "set_default_header",
    "set_header",
]
