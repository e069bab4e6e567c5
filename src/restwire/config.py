# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for the bundled httpx clients."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"restwire/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ClientSettings:
    """Transport defaults applied by HttpxClient and AsyncHttpxClient."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("RESTWIRE_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            timeout=timeout,
            user_agent=os.getenv("RESTWIRE_USER_AGENT") or cls.user_agent,
            allow_redirects=_bool_env("RESTWIRE_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("RESTWIRE_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_client_settings() -> ClientSettings:
    """Load client settings from environment with sensible defaults."""
    return ClientSettings.from_env()
