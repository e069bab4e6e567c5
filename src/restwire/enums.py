# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire-level tags for HTTP methods and body content types."""

from enum import Enum


class RequestMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class RequestType(str, Enum):
    """Serialization format of a request body."""

    JSON = "JSON"


class ResponseType(str, Enum):
    """Serialization format of a response body."""

    JSON = "JSON"


__all__ = ["RequestMethod", "RequestType", "ResponseType"]
