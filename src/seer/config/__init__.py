# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer

"""
Configuration for seer error construction.
"""

from __future__ import annotations

from seer.config.settings import (
    SeerSettings,
    get_settings,
    reset_settings,
    set_collect_provenance,
    set_default_code,
    set_default_message,
)

__all__ = [
    "SeerSettings",
    "get_settings",
    "reset_settings",
    "set_collect_provenance",
    "set_default_code",
    "set_default_message",
]
