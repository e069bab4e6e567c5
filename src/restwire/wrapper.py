# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Envelope types enclosing an endpoint result.

Some APIs nest every payload inside a common shape such as
``{"data": ..., "meta": ...}``. A Wrapper subclass describes that shape and
names the result type it encloses through ``Value``:

    @dataclass
    class Envelope(Wrapper):
        Value: ClassVar = Item

        data: Item
        meta: dict[str, Any]

Executing an endpoint whose ``Result`` is ``Item`` with ``exec_wrap(client,
Envelope)`` deserializes the whole envelope. Extracting the enclosed value is
left to the wrapper's own fields or accessors.
"""

from __future__ import annotations

from typing import Any, ClassVar


class Wrapper:
    Value: ClassVar[Any]

    @classmethod
    def wraps(cls, result_type: Any) -> bool:
        """Return True when this wrapper declares ``Value`` equal to ``result_type``."""
        if not hasattr(cls, "Value"):
            return False
        return cls.Value == result_type


def check_wrapper(wrapper: type, result_type: Any) -> None:
    """Raise TypeError unless ``wrapper`` encloses ``result_type``."""
    wraps = getattr(wrapper, "wraps", None)
    if wraps is None or not wraps(result_type):
        raise TypeError(
            f"{getattr(wrapper, '__name__', wrapper)!s} does not wrap {result_type!r}; "
            "declare `Value` matching the endpoint's Result"
        )


__all__ = ["Wrapper", "check_wrapper"]
