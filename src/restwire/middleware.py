# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Hooks run around endpoint execution."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

from .http.headers import set_header
from .http.models import HttpRequest, HttpResponse

if TYPE_CHECKING:
    from .endpoint import Endpoint


class MiddleWare(Protocol):
    """
    Mutates outgoing requests and incoming responses in place.

    ``request`` runs once the request (body included) is fully built and before the
    client executes it. ``response`` runs after the client returns and before the body
    is parsed. Raising from either hook aborts the call with that exception.

    The same instance may serve many concurrent calls; implementations holding mutable
    state must synchronize it themselves.
    """

    def request(self, endpoint: Endpoint, request: HttpRequest) -> None: ...

    def response(self, endpoint: Endpoint, response: HttpResponse) -> None: ...


class MiddlewareChain:
    """Run several middlewares as one: requests in order, responses in reverse order."""

    def __init__(self, *middlewares: MiddleWare):
        self.middlewares = tuple(middlewares)

    def request(self, endpoint: Endpoint, request: HttpRequest) -> None:
        for middleware in self.middlewares:
            middleware.request(endpoint, request)

    def response(self, endpoint: Endpoint, response: HttpResponse) -> None:
        for middleware in reversed(self.middlewares):
            middleware.response(endpoint, response)


class HeaderMiddleware:
    """Set fixed headers (e.g. ``Authorization``) on every request."""

    def __init__(self, headers: Mapping[str, str]):
        self.headers = dict(headers)

    @classmethod
    def bearer(cls, token: str) -> HeaderMiddleware:
        return cls({"Authorization": f"Bearer {token}"})

    def request(self, endpoint: Endpoint, request: HttpRequest) -> None:  # noqa: ARG002
        for name, value in self.headers.items():
            set_header(request.headers, name, value)

    def response(self, endpoint: Endpoint, response: HttpResponse) -> None:  # noqa: ARG002
        return None


__all__ = ["HeaderMiddleware", "MiddleWare", "MiddlewareChain"]
