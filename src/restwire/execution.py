# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Endpoint execution.

One orchestration path serves every entry point:

    build request -> [middleware.request] -> client.execute
        -> [middleware.response] -> parse (result or wrapper) | raw bytes

``execute`` drives a blocking Client and ``execute_async`` an AsyncClient; the
two differ only in how ``client.execute`` is called. Any failure aborts the call
and propagates unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .http.codec import build_endpoint_request, parse
from .wrapper import check_wrapper

if TYPE_CHECKING:
    from .endpoint import Endpoint
    from .http.client import AsyncClient, Client
    from .http.models import HttpRequest, HttpResponse
    from .middleware import MiddleWare

logger = logging.getLogger(__name__)


def _check_options(endpoint: Endpoint, wrapper: type | None, raw: bool) -> None:
    if wrapper is None:
        return
    if raw:
        raise ValueError("raw output cannot be combined with a wrapper")
    check_wrapper(wrapper, type(endpoint).Result)


def prepare(endpoint: Endpoint, base: str, middleware: MiddleWare | None = None) -> HttpRequest:
    """Build the request for ``endpoint`` and run the middleware request hook."""
    logger.info("Executing endpoint %s", type(endpoint).__name__)
    request = build_endpoint_request(base, endpoint)
    logger.debug("Built request %s %s (%d body bytes)", request.method, request.full_url, len(request.body))
    if middleware is not None:
        middleware.request(endpoint, request)
    return request


def finish(
    endpoint: Endpoint,
    response: HttpResponse,
    middleware: MiddleWare | None = None,
    *,
    wrapper: type | None = None,
    raw: bool = False,
) -> Any:
    """Run the middleware response hook, then return raw bytes or the parsed body."""
    logger.debug("Received status %s (%d body bytes)", response.status_code, len(response.content))
    if middleware is not None:
        middleware.response(endpoint, response)
    if raw:
        return response.content
    target = wrapper if wrapper is not None else type(endpoint).Result
    return parse(endpoint.RESPONSE_BODY_TYPE, response.content, target)


def execute(
    endpoint: Endpoint,
    client: Client,
    *,
    middleware: MiddleWare | None = None,
    wrapper: type | None = None,
    raw: bool = False,
) -> Any:
    """
    Execute ``endpoint`` with a blocking client.

    Returns the parsed ``Result`` (or ``wrapper`` instance) or ``None`` for an
    empty body; with ``raw=True`` returns the response bytes unparsed.
    """
    _check_options(endpoint, wrapper, raw)
    request = prepare(endpoint, client.base, middleware)
    response = client.execute(request)
    return finish(endpoint, response, middleware, wrapper=wrapper, raw=raw)


async def execute_async(
    endpoint: Endpoint,
    client: AsyncClient,
    *,
    middleware: MiddleWare | None = None,
    wrapper: type | None = None,
    raw: bool = False,
) -> Any:
    """Async counterpart of :func:`execute`; suspends only while the client executes."""
    _check_options(endpoint, wrapper, raw)
    request = prepare(endpoint, client.base, middleware)
    response = await client.execute(request)
    return finish(endpoint, response, middleware, wrapper=wrapper, raw=raw)


__all__ = ["execute", "execute_async", "finish", "prepare"]
