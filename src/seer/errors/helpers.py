# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer
"""
Helpers for walking chains of wrapped errors.
"""

from __future__ import annotations

from collections.abc import Iterator

from seer.errors.base import SeerError


def iter_chain(error: BaseException) -> Iterator[BaseException]:
    """Yield ``error`` and then each wrapped predecessor, one hop at a time.

    Walking stops after the first error that is not a ``SeerError`` or when
    a ``SeerError`` wraps nothing.

    Args:
        error: Where to start

    Yields:
        The errors in the chain, outermost first
    """
    current: BaseException | None = error
    while current is not None:
        yield current
        if not isinstance(current, SeerError):
            return
        current, _ = current.unwrap()


def root_cause(error: BaseException) -> BaseException:
    """Return the innermost error reachable from ``error``."""
    last = error
    for last in iter_chain(error):
        pass
    return last
