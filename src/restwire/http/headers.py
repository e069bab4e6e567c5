# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header utilities.

HTTP header field names are case-insensitive (RFC 9110) while requests and
responses carry headers as plain dicts, so lookups and updates go through these
helpers rather than direct indexing.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default

    if name in headers:
        value = headers[name]
        return default if value is None else str(value).strip()

    lower = name.lower()
    for key, value in headers.items():
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()
    return default


def set_header(headers: MutableMapping[str, str], name: str, value: str) -> None:
    """Set a header, replacing any existing entry regardless of its casing."""
    lower = name.lower()
    for key in [k for k in headers if str(k).lower() == lower]:
        del headers[key]
    headers[name] = value


def set_default_header(headers: MutableMapping[str, str], name: str, value: str) -> None:
    """Set a header only when no entry with the same name exists."""
    lower = name.lower()
    if any(str(key).lower() == lower for key in headers):
        return
    headers[name] = value


__all__ = ["header_value", "set_default_header", "set_header"]
