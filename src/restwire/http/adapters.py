# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Deterministic, programmable clients for tests."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from ..errors import RequestError
from .models import HttpRequest, HttpResponse


class _StubResponses:
    def __init__(self, base: str, responses: Iterable[HttpResponse] | None = None):
        self.base = base
        self._queue: deque[HttpResponse] = deque(responses or [])
        self._by_url: dict[str, HttpResponse] = {}
        self.requests: list[HttpRequest] = []

    def add(self, url: str, response: HttpResponse) -> None:
        """Answer every request to ``url`` (with or without query string) with ``response``."""
        self._by_url[url] = response

    def enqueue(self, response: HttpResponse) -> None:
        """Answer the next request not matched by URL with ``response``."""
        self._queue.append(response)

    def _respond(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        for key in (request.full_url, request.url):
            if key in self._by_url:
                return self._by_url[key].copy()
        if self._queue:
            return self._queue.popleft()
        raise RequestError(request.full_url, request.method, LookupError("No stubbed response configured"))


class StubClient(_StubResponses):
    """Blocking stub client recording every executed request."""

    def execute(self, request: HttpRequest) -> HttpResponse:
        return self._respond(request)


class AsyncStubClient(_StubResponses):
    """Async stub client recording every executed request."""

    async def execute(self, request: HttpRequest) -> HttpResponse:
        return self._respond(request)
