# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client protocols and default factories."""

from __future__ import annotations

from typing import Protocol

from ..config import ClientSettings
from .models import HttpRequest, HttpResponse


class Client(Protocol):
    """Blocking transport: a base URL plus a way to execute requests."""

    @property
    def base(self) -> str: ...

    def execute(self, request: HttpRequest) -> HttpResponse: ...


class AsyncClient(Protocol):
    """Non-blocking transport; ``execute`` is the only suspension point of an endpoint call."""

    @property
    def base(self) -> str: ...

    async def execute(self, request: HttpRequest) -> HttpResponse: ...


def create_default_client(base: str, settings: ClientSettings | None = None) -> Client:
    """Factory for the default httpx-backed blocking client."""
    from .httpx_client import HttpxClient

    return HttpxClient(base, settings)


def create_default_async_client(base: str, settings: ClientSettings | None = None) -> AsyncClient:
    """Factory for the default httpx-backed async client."""
    from .httpx_client import AsyncHttpxClient

    return AsyncHttpxClient(base, settings)
