# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
The Endpoint base class and its field tagging helpers.

An endpoint is a dataclass describing one remote operation. Class attributes
configure the request and the expected result; instance fields hold the data:

    @dataclass
    class CreateItem(Endpoint):
        PATH = "projects/{project}/items"
        METHOD = RequestMethod.POST
        Result = Item

        project: str = skip_field()
        name: str = ""
        dry_run: bool = query_field(default=False)

    item = CreateItem(project="p1", name="x").exec(client)

Untagged fields are serialized as the request body (``{"name":"x"}`` above).
Fields tagged with ``skip_field`` are never sent, ``query_field`` values become
query parameters and a ``raw_field`` replaces the body with its bytes.
Field names must not shadow the methods below (``path``, ``method``, ``query``,
``data``, ``payload``).
"""

from __future__ import annotations

from dataclasses import MISSING, field, fields, is_dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from .enums import RequestMethod, RequestType, ResponseType
from .errors import DataParseError
from .execution import execute, execute_async

if TYPE_CHECKING:
    from .http.client import AsyncClient, Client
    from .middleware import MiddleWare

FIELD_ROLE = "restwire"
SKIP = "skip"
QUERY = "query"
RAW = "raw"


def _tagged(role: str, default: Any, default_factory: Any, kwargs: dict[str, Any]) -> Any:
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[FIELD_ROLE] = role
    return field(default=default, default_factory=default_factory, metadata=metadata, **kwargs)


def skip_field(*, default: Any = MISSING, default_factory: Any = MISSING, **kwargs: Any) -> Any:
    """A field excluded from the request body, e.g. a path parameter."""
    return _tagged(SKIP, default, default_factory, kwargs)


def query_field(*, default: Any = MISSING, default_factory: Any = MISSING, **kwargs: Any) -> Any:
    """A field sent as a query parameter instead of in the body."""
    return _tagged(QUERY, default, default_factory, kwargs)


def raw_field(*, default: Any = None, default_factory: Any = MISSING, **kwargs: Any) -> Any:
    """A bytes field sent verbatim as the request body when set."""
    if default_factory is not MISSING:
        default = MISSING
    return _tagged(RAW, default, default_factory, kwargs)


def _role(f: Any) -> str | None:
    return f.metadata.get(FIELD_ROLE)


class Endpoint:
    """
    Base class for remote HTTP endpoints.

    Subclasses must be dataclasses; one that holds instance state without being
    a dataclass (a pydantic model, say) raises TypeError. The defaults below cover most
    endpoints; override ``path``/``method``/``query``/``data``/``payload`` when a
    class attribute is not expressive enough.
    """

    PATH: ClassVar[str] = ""
    METHOD: ClassVar[RequestMethod] = RequestMethod.GET
    REQUEST_BODY_TYPE: ClassVar[RequestType] = RequestType.JSON
    RESPONSE_BODY_TYPE: ClassVar[ResponseType] = ResponseType.JSON
    # Deserialization target; None accepts only an empty body or JSON null.
    Result: ClassVar[Any] = None

    def _dataclass_fields(self) -> tuple[Any, ...]:
        if is_dataclass(self):
            return fields(self)
        if getattr(self, "__dict__", None):
            # Non-dataclass state carries no field roles to route it.
            raise TypeError(f"{type(self).__name__} carries fields but is not a dataclass; decorate it with @dataclass")
        return ()

    def _fields(self, *roles: str | None) -> list[tuple[str, Any]]:
        return [(f.name, getattr(self, f.name)) for f in self._dataclass_fields() if _role(f) in roles]

    def path(self) -> str:
        """Relative path, rendered from ``PATH`` with the instance's field values."""
        values = {f.name: getattr(self, f.name) for f in self._dataclass_fields()}
        return self.PATH.format_map(values)

    def method(self) -> RequestMethod:
        return self.METHOD

    def query(self) -> list[tuple[str, Any]]:
        return [(name, value) for name, value in self._fields(QUERY) if value is not None]

    def data(self) -> bytes | None:
        """Raw body override; wins over serializing ``payload()`` whenever not None."""
        for _, value in self._fields(RAW):
            if value is None:
                continue
            if isinstance(value, str):
                return value.encode("utf-8")
            try:
                return bytes(value)
            except (TypeError, ValueError) as exc:
                raise DataParseError(exc) from exc
        return None

    def payload(self) -> Any:
        """Object serialized as the request body when ``data()`` returns None."""
        return dict(self._fields(None))

    def exec(self, client: Client, *, middleware: MiddleWare | None = None) -> Any:
        """Execute with a blocking client and return the parsed Result (or None)."""
        return execute(self, client, middleware=middleware)

    def exec_wrap(self, client: Client, wrapper: type, *, middleware: MiddleWare | None = None) -> Any:
        """Execute and parse the body into ``wrapper``, which must enclose Result."""
        return execute(self, client, middleware=middleware, wrapper=wrapper)

    def exec_raw(self, client: Client, *, middleware: MiddleWare | None = None) -> bytes:
        """Execute and return the response body bytes unparsed."""
        return execute(self, client, middleware=middleware, raw=True)

    async def aexec(self, client: AsyncClient, *, middleware: MiddleWare | None = None) -> Any:
        return await execute_async(self, client, middleware=middleware)

    async def aexec_wrap(self, client: AsyncClient, wrapper: type, *, middleware: MiddleWare | None = None) -> Any:
        return await execute_async(self, client, middleware=middleware, wrapper=wrapper)

    async def aexec_raw(self, client: AsyncClient, *, middleware: MiddleWare | None = None) -> bytes:
        return await execute_async(self, client, middleware=middleware, raw=True)


__all__ = ["Endpoint", "query_field", "raw_field", "skip_field"]
