# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Client and AsyncClient implementations."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import ClientSettings, load_client_settings
from ..errors import RequestError, ServerResponseError, decode_content
from .headers import set_default_header
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


def _outgoing(request: HttpRequest, settings: ClientSettings) -> dict[str, Any]:
    headers = dict(request.headers)
    set_default_header(headers, "User-Agent", settings.user_agent)
    return {
        "method": request.method,
        "url": request.url,
        "params": request.query or None,
        "headers": headers,
        "content": request.body or None,
    }


def _incoming(resp: httpx.Response) -> HttpResponse:
    content = resp.content
    if not resp.is_success:
        raise ServerResponseError(resp.status_code, decode_content(content))
    return HttpResponse(
        status_code=resp.status_code,
        headers=dict(resp.headers),
        content=content,
        url=str(resp.url),
    )


class HttpxClient:
    """Blocking client wrapping ``httpx.Client``."""

    def __init__(self, base: str, settings: ClientSettings | None = None, client: httpx.Client | None = None):
        self._base = base
        self.settings = settings or load_client_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    @property
    def base(self) -> str:
        return self._base

    def execute(self, request: HttpRequest) -> HttpResponse:
        logger.debug("Sending %s %s", request.method, request.full_url)
        try:
            resp = self._client.request(**_outgoing(request, self.settings))
        except httpx.HTTPError as exc:
            raise RequestError(request.full_url, request.method, exc) from exc
        return _incoming(resp)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxClient:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


class AsyncHttpxClient:
    """Async client wrapping ``httpx.AsyncClient``."""

    def __init__(self, base: str, settings: ClientSettings | None = None, client: httpx.AsyncClient | None = None):
        self._base = base
        self.settings = settings or load_client_settings()
        self._client = client or httpx.AsyncClient(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    @property
    def base(self) -> str:
        return self._base

    async def execute(self, request: HttpRequest) -> HttpResponse:
        logger.debug("Sending %s %s", request.method, request.full_url)
        try:
            resp = await self._client.request(**_outgoing(request, self.settings))
        except httpx.HTTPError as exc:
            raise RequestError(request.full_url, request.method, exc) from exc
        return _incoming(resp)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AsyncHttpxClient:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.aclose()
