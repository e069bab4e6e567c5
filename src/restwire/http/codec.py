# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Request building and response parsing.

Body formats are dispatched through two registries keyed by RequestType and
ResponseType. JSON is registered by default; other formats plug in through
``register_request_type`` / ``register_response_type``.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import pydantic_core
from pydantic import TypeAdapter

from ..enums import RequestMethod, RequestType, ResponseType
from ..errors import DataParseError, ResponseParseError, decode_content
from .headers import set_default_header
from .models import HttpRequest
from .url import encode_query, join_url

if TYPE_CHECKING:
    from ..endpoint import Endpoint

BodySerializer = Callable[[Any], bytes]
BodyParser = Callable[[bytes, Any], Any]

# Serialized forms that carry no information; sent as an empty body instead.
_EMPTY_JSON_BODIES = (b"{}", b"null")


def _serialize_json(payload: Any) -> bytes:
    try:
        body = pydantic_core.to_json(payload)
    except (pydantic_core.PydanticSerializationError, TypeError, ValueError) as exc:
        raise DataParseError(exc) from exc
    if body in _EMPTY_JSON_BODIES:
        return b""
    return body


@lru_cache(maxsize=512)
def _cached_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def type_adapter(target: Any) -> TypeAdapter:
    """Return a (cached where possible) pydantic TypeAdapter for ``target``."""
    try:
        return _cached_adapter(target)
    except TypeError:
        # Unhashable annotations (e.g. Annotated with dict metadata) skip the cache.
        return TypeAdapter(target)


def _parse_json(body: bytes, target: Any) -> Any:
    # Strict: a document whose shape differs from the target is an error, not a coercion.
    try:
        return type_adapter(target).validate_json(body, strict=True)
    except ValueError as exc:
        raise ResponseParseError(exc, decode_content(body)) from exc


_BODY_SERIALIZERS: dict[Any, BodySerializer] = {RequestType.JSON: _serialize_json}
_BODY_PARSERS: dict[Any, BodyParser] = {ResponseType.JSON: _parse_json}
_CONTENT_TYPES: dict[Any, str] = {RequestType.JSON: "application/json"}


def register_request_type(kind: Any, serializer: BodySerializer, content_type: str | None = None) -> None:
    """Register how endpoints declaring ``REQUEST_BODY_TYPE = kind`` serialize their payload."""
    _BODY_SERIALIZERS[kind] = serializer
    if content_type:
        _CONTENT_TYPES[kind] = content_type


def register_response_type(kind: Any, parser: BodyParser) -> None:
    """Register how bodies of ``RESPONSE_BODY_TYPE = kind`` are parsed into a target type."""
    _BODY_PARSERS[kind] = parser


def build_body(endpoint: Endpoint, request_type: Any, data: bytes | None) -> bytes:
    """
    Produce the request body for an endpoint.

    A ``data`` override is sent verbatim. Otherwise the endpoint's payload is
    serialized with the registered serializer for ``request_type``.
    """
    if data is not None:
        return bytes(data)
    serializer = _BODY_SERIALIZERS.get(request_type)
    if serializer is None:
        raise ValueError(f"Unsupported request body type: {request_type!r}")
    return serializer(endpoint.payload())


def content_type_for(request_type: Any) -> str | None:
    return _CONTENT_TYPES.get(request_type)


def _method_name(method: RequestMethod | str) -> str:
    if isinstance(method, Enum):
        return str(method.value)
    return str(method).upper()


def build_request(
    base: str,
    path: str,
    method: RequestMethod | str,
    query: list[tuple[str, Any]] | None,
    body: bytes,
) -> HttpRequest:
    """Compose a base URL, relative path, query parameters and body into an HttpRequest."""
    url, base_query = join_url(base, path)
    return HttpRequest(
        url=url,
        method=_method_name(method),
        query=base_query + encode_query(query),
        headers={},
        body=body,
    )


def build_endpoint_request(base: str, endpoint: Endpoint) -> HttpRequest:
    """Build the request for ``endpoint`` against ``base``, tagging non-empty bodies with a Content-Type."""
    request_type = endpoint.REQUEST_BODY_TYPE
    body = build_body(endpoint, request_type, endpoint.data())
    request = build_request(base, endpoint.path(), endpoint.method(), endpoint.query(), body)
    content_type = content_type_for(request_type)
    if body and content_type:
        set_default_header(request.headers, "Content-Type", content_type)
    return request


def parse(response_type: Any, body: bytes, target: Any) -> Any | None:
    """
    Parse a response body into ``target``.

    An empty body yields ``None`` without consulting the parser.
    """
    if not body:
        return None
    parser = _BODY_PARSERS.get(response_type)
    if parser is None:
        raise ValueError(f"Unsupported response body type: {response_type!r}")
    return parser(bytes(body), target)


__all__ = [
    "build_body",
    "build_endpoint_request",
    "build_request",
    "content_type_for",
    "parse",
    "register_request_type",
    "register_response_type",
    "type_adapter",
]
