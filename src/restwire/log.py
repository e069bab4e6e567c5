# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for restwire.

The library only creates module loggers; handlers are left to the embedding
application unless it opts into :func:`setup_logging`.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "RESTWIRE_LOG_LEVEL"


def setup_logging(level: str | int | None = None) -> None:
    """Configure standard logging, defaulting to $RESTWIRE_LOG_LEVEL or WARNING."""
    if isinstance(level, int):
        effective_level = level
    else:
        name = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").upper()
        effective_level = getattr(logging, name, logging.WARNING)
    logging.basicConfig(
        level=effective_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["LOG_LEVEL_ENV", "setup_logging"]
