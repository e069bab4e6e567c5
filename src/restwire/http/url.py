# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL composition for endpoint requests."""

from __future__ import annotations

from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx
import pydantic_core

from ..errors import UrlParseError

# RFC 3986 sub-delims plus ':' and '@' are legal inside a path segment; '%' keeps
# escapes the caller already applied.
_SEGMENT_SAFE = "!$&'()*+,;=:@%"


def parse_base_url(base: str) -> httpx.URL:
    """Parse an absolute base URL or raise UrlParseError."""
    try:
        url = httpx.URL(base)
    except (httpx.InvalidURL, TypeError) as exc:
        raise UrlParseError(str(base), exc) from exc
    if not url.scheme or not url.host:
        raise UrlParseError(str(base), ValueError("relative URL without a base"))
    return url


def _path_segments(url: httpx.URL) -> list[str]:
    raw = url.raw_path.split(b"?", 1)[0].decode("ascii")
    segments = raw.split("/")[1:]
    if segments and segments[-1] == "":
        segments.pop()
    return segments


def join_url(base: str, path: str) -> tuple[str, list[tuple[str, str]]]:
    """
    Append an endpoint path to a base URL.

    The base path is kept and the endpoint's segments are appended to it, so
    ``http://host/api`` + ``v1/items`` gives ``http://host/api/v1/items``. Returns
    the URL without query string plus any query pairs carried by the base URL.
    """
    url = parse_base_url(base)
    segments = _path_segments(url)

    relative = str(path or "").lstrip("/")
    if relative:
        for segment in relative.split("/"):
            if segment in (".", ".."):
                continue
            segments.append(quote(segment, safe=_SEGMENT_SAFE))

    base_query = [(str(k), str(v)) for k, v in url.params.multi_items()]
    joined = url.copy_with(raw_path=("/" + "/".join(segments)).encode("ascii"), fragment=None)
    return str(joined), base_query


def encode_query_value(value: Any) -> str:
    """Render a JSON-like query value the way a URL encoder would."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return pydantic_core.to_json(value).decode("utf-8")


def encode_query(query: list[tuple[str, Any]] | None) -> list[tuple[str, str]]:
    """Convert endpoint query pairs into string pairs, dropping ``None`` values."""
    pairs: list[tuple[str, str]] = []
    for key, value in query or []:
        if value is None:
            continue
        pairs.append((str(key), encode_query_value(value)))
    return pairs


__all__ = ["encode_query", "encode_query_value", "join_url", "parse_base_url"]
