# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer

"""
Logging helpers for seer.
"""

from __future__ import annotations

from seer.logging.config import LoggingSettings
from seer.logging.logger import (
    ROOT_LOGGER_NAME,
    StructuredFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "LoggingSettings",
    "ROOT_LOGGER_NAME",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
]
