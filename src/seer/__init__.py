# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer

"""
seer: annotate errors with the operation that failed, a user-facing message,
an optional code and the call site that created them.
"""

from __future__ import annotations

from seer.codes import DEFAULT_CODE, DEFAULT_MESSAGE, MAX_CODE, MIN_CODE
from seer.config import (
    SeerSettings,
    get_settings,
    reset_settings,
    set_collect_provenance,
    set_default_code,
    set_default_message,
)
from seer.errors import (
    Provenance,
    SeerError,
    iter_chain,
    new,
    root_cause,
    wrap,
    wrap_always,
    wrap_error,
)

__all__ = [
    # Constants
    "DEFAULT_CODE",
    "DEFAULT_MESSAGE",
    "MAX_CODE",
    "MIN_CODE",
    # Errors
    "Provenance",
    "SeerError",
    "new",
    "wrap",
    "wrap_always",
    "wrap_error",
    "iter_chain",
    "root_cause",
    # Configuration
    "SeerSettings",
    "get_settings",
    "reset_settings",
    "set_collect_provenance",
    "set_default_code",
    "set_default_message",
]
