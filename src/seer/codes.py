# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer
"""
Numeric error codes and built-in defaults for seer errors.

Codes follow the HTTP status range so they can be handed straight to a
response layer. Anything outside ``[MIN_CODE, MAX_CODE]`` is rejected.
"""

from __future__ import annotations

from typing import Any, Final

MIN_CODE: Final[int] = 100
MAX_CODE: Final[int] = 599

DEFAULT_CODE: Final[int] = 500
DEFAULT_MESSAGE: Final[str] = "an error occurred"

# Stored code meaning "not set, use the configured default"
UNSET_CODE: Final[int] = 0


def is_valid_code(code: Any) -> bool:
    """Check whether a value may be stored as an error code.

    Args:
        code: Candidate code

    Returns:
        True if ``code`` is an int (not a bool) inside the accepted range
    """
    if isinstance(code, bool) or not isinstance(code, int):
        return False
    return MIN_CODE <= code <= MAX_CODE
