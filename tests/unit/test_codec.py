# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, ClassVar

import pytest

from restwire.endpoint import Endpoint, query_field, raw_field, skip_field
from restwire.enums import RequestMethod, RequestType, ResponseType
from restwire.errors import DataParseError, ResponseParseError, UrlParseError
from restwire.http import codec
from restwire.http.codec import (
    build_body,
    build_endpoint_request,
    build_request,
    parse,
    register_request_type,
    register_response_type,
)


@dataclass
class Count:
    count: int


@dataclass
class Item:
    id: int
    name: str
    tags: list[str] = field(default_factory=list)


@dataclass
class EmptyEndpoint(Endpoint):
    PATH = "v1/items"


@dataclass
class NamedEndpoint(Endpoint):
    PATH = "v1/items"
    METHOD = RequestMethod.POST
    Result = Count

    name: str = "x"


@dataclass
class RawEndpoint(Endpoint):
    PATH = "upload"
    METHOD = RequestMethod.PUT

    name: str = "ignored"
    body: bytes | None = raw_field()


@dataclass
class NullPayloadEndpoint(Endpoint):
    def payload(self) -> Any:
        return None


@dataclass
class UnserializableEndpoint(Endpoint):
    value: Any = None


@dataclass
class ListItems(Endpoint):
    PATH = "projects/{project}/items"
    Result = list[Item]

    project: str = skip_field(default="p1")
    limit: int | None = query_field(default=None)
    archived: bool = query_field(default=False)


def test_structurally_empty_endpoint_builds_empty_body():
    assert build_body(EmptyEndpoint(), RequestType.JSON, None) == b""


def test_null_payload_builds_empty_body():
    assert build_body(NullPayloadEndpoint(), RequestType.JSON, None) == b""


def test_fields_serialize_to_compact_json():
    assert build_body(NamedEndpoint(name="x"), RequestType.JSON, None) == b'{"name":"x"}'


def test_nested_and_temporal_values_serialize():
    @dataclass
    class Nested(Endpoint):
        item: Item = field(default_factory=lambda: Item(id=1, name="a"))
        at: dt.date = dt.date(2024, 1, 2)

    body = build_body(Nested(), RequestType.JSON, None)
    assert body == b'{"item":{"id":1,"name":"a","tags":[]},"at":"2024-01-02"}'


def test_data_override_wins_over_fields():
    endpoint = RawEndpoint(body=b"\x00raw-bytes")
    assert build_body(endpoint, RequestType.JSON, endpoint.data()) == b"\x00raw-bytes"


def test_empty_data_override_is_sent_as_is():
    assert build_body(NamedEndpoint(), RequestType.JSON, b"") == b""


def test_skip_and_query_fields_are_not_serialized():
    endpoint = ListItems(project="p9", limit=5)
    assert build_body(endpoint, RequestType.JSON, None) == b""


def test_serialization_failure_raises_data_parse_error():
    with pytest.raises(DataParseError) as excinfo:
        build_body(UnserializableEndpoint(value=object()), RequestType.JSON, None)
    assert excinfo.value.source is not None


def test_unknown_request_type_is_rejected():
    with pytest.raises(ValueError):
        build_body(EmptyEndpoint(), "XML", None)


def test_build_request_scenario():
    request = build_endpoint_request("http://api.example.com", EmptyEndpoint())
    assert request.url == "http://api.example.com/v1/items"
    assert request.method == "GET"
    assert request.body == b""
    assert request.query == []
    assert request.headers == {}


def test_build_request_sets_json_content_type_for_bodies():
    request = build_endpoint_request("http://api.example.com", NamedEndpoint())
    assert request.method == "POST"
    assert request.body == b'{"name":"x"}'
    assert request.header("content-type") == "application/json"


def test_build_request_renders_path_and_query():
    request = build_endpoint_request("http://api.example.com/api", ListItems(project="p 1", limit=10))
    assert request.url == "http://api.example.com/api/projects/p%201/items"
    assert request.query == [("limit", "10"), ("archived", "false")]
    assert request.full_url == "http://api.example.com/api/projects/p%201/items?limit=10&archived=false"


def test_build_request_rejects_malformed_base():
    with pytest.raises(UrlParseError) as excinfo:
        build_request("not a url", "v1/items", RequestMethod.GET, [], b"")
    assert excinfo.value.url == "not a url"


def test_build_request_accepts_string_methods():
    request = build_request("http://h", "x", "patch", None, b"")
    assert request.method == "PATCH"


def test_parse_empty_body_returns_none():
    assert parse(ResponseType.JSON, b"", Count) is None
    assert parse("ANYTHING", b"", Count) is None


def test_parse_round_trip_is_idempotent():
    body = b'[{"id":1,"name":"a","tags":["x"]},{"id":2,"name":"b"}]'
    first = parse(ResponseType.JSON, body, list[Item])
    second = parse(ResponseType.JSON, body, list[Item])
    assert first == [Item(id=1, name="a", tags=["x"]), Item(id=2, name="b")]
    assert first == second


def test_parse_into_plain_types():
    assert parse(ResponseType.JSON, b'{"a":1}', dict[str, int]) == {"a": 1}
    assert parse(ResponseType.JSON, b"null", None) is None


def test_parse_failure_keeps_utf8_content():
    with pytest.raises(ResponseParseError) as excinfo:
        parse(ResponseType.JSON, b'{"count":"many"}', Count)
    assert excinfo.value.content == '{"count":"many"}'


def test_parse_failure_with_invalid_utf8_omits_content():
    with pytest.raises(ResponseParseError) as excinfo:
        parse(ResponseType.JSON, b"\xff\xfe\x00", Count)
    assert excinfo.value.content is None


def test_parse_failure_on_malformed_json():
    with pytest.raises(ResponseParseError) as excinfo:
        parse(ResponseType.JSON, b"{not json", Count)
    assert excinfo.value.content == "{not json"


def test_parse_rejects_string_for_int():
    with pytest.raises(ResponseParseError) as excinfo:
        parse(ResponseType.JSON, b'{"count":"3"}', Count)
    assert excinfo.value.content == '{"count":"3"}'


def test_parse_rejects_string_for_bool():
    with pytest.raises(ResponseParseError) as excinfo:
        parse(ResponseType.JSON, b'"off"', bool)
    assert excinfo.value.content == '"off"'


def test_registered_formats_are_dispatched(monkeypatch):
    for registry in ("_BODY_SERIALIZERS", "_BODY_PARSERS", "_CONTENT_TYPES"):
        monkeypatch.setattr(codec, registry, dict(getattr(codec, registry)))

    class Format:
        TEXT = "TEXT"

    register_request_type(Format.TEXT, lambda payload: repr(payload).encode(), content_type="text/plain")
    register_response_type(Format.TEXT, lambda body, target: target(body.decode()))

    @dataclass
    class TextEndpoint(Endpoint):
        REQUEST_BODY_TYPE: ClassVar = Format.TEXT
        RESPONSE_BODY_TYPE: ClassVar = Format.TEXT

        value: int = 1

    request = build_endpoint_request("http://h", TextEndpoint())
    assert request.body == b"{'value': 1}"
    assert request.header("Content-Type") == "text/plain"
    assert parse(Format.TEXT, b"42", int) == 42
