# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport-agnostic request/response values exchanged with Client implementations."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import httpx

from .headers import header_value

Headers = dict[str, str]
QueryParams = list[tuple[str, str]]


@dataclass
class HttpRequest:
    """Fully built request handed to a Client; headers and body stay mutable for middleware."""

    url: str
    method: str = "GET"
    query: QueryParams = field(default_factory=list)
    headers: Headers = field(default_factory=dict)
    body: bytes = b""

    @property
    def full_url(self) -> str:
        """The URL including the encoded query string."""
        if not self.query:
            return self.url
        return str(httpx.URL(self.url, params=self.query))

    def header(self, name: str, default: str = "") -> str:
        return header_value(self.headers, name, default)


@dataclass
class HttpResponse:
    """Normalized HTTP response produced by a Client."""

    status_code: int = 200
    headers: Headers = field(default_factory=dict)
    content: bytes = b""
    url: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, replacing undecodable bytes."""
        return self.content.decode("utf-8", errors="replace")

    def header(self, name: str, default: str = "") -> str:
        return header_value(self.headers, name, default)

    def copy(self) -> HttpResponse:
        """Return a copy whose headers can be mutated independently."""
        return replace(self, headers=dict(self.headers))


__all__ = ["Headers", "HttpRequest", "HttpResponse", "QueryParams"]
