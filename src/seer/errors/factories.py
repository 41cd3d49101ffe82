# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer
"""
Factory functions for creating seer errors.

Usage::

    try:
        config = load_config(path)
    except OSError as exc:
        raise seer.wrap("loadConfig", exc, "could not read the configuration")

Each factory captures provenance itself so that the reported call site is
the factory's caller.
"""

from __future__ import annotations

from seer.config.settings import SeerSettings, get_settings
from seer.errors.base import SeerError
from seer.errors.provenance import capture_provenance


def new(
    operation: str,
    message: str,
    code: int | None = None,
    *,
    settings: SeerSettings | None = None,
) -> SeerError:
    """Create an error that does not wrap another one.

    Args:
        operation: Label of the logical step that failed
        message: User-facing message
        code: Optional code in [100, 599]; invalid codes are logged and the
            default code is used
        settings: Settings to read defaults from (process-wide if None)

    Returns:
        The new error
    """
    if settings is None:
        settings = get_settings()
    provenance = capture_provenance() if settings.collect_provenance else None
    return SeerError(
        operation,
        message,
        code=code,
        provenance=provenance,
        settings=settings,
    )


def wrap(
    operation: str,
    original: BaseException,
    message: str | None = None,
    *,
    settings: SeerSettings | None = None,
) -> SeerError:
    """Wrap an existing error.

    Args:
        operation: Label of the logical step that failed
        original: The error being wrapped
        message: Optional user-facing message; the default message is used
            when omitted
        settings: Settings to read defaults from (process-wide if None)

    Returns:
        A new error whose predecessor is ``original``
    """
    if settings is None:
        settings = get_settings()
    provenance = capture_provenance() if settings.collect_provenance else None
    return SeerError(
        operation,
        message,
        original=original,
        provenance=provenance,
        settings=settings,
    )


def wrap_always(
    operation: str,
    original: BaseException,
    message: str | None = None,
    *,
    settings: SeerSettings | None = None,
) -> SeerError:
    """Wrap an existing error, capturing provenance even when collection is off."""
    return SeerError(
        operation,
        message,
        original=original,
        provenance=capture_provenance(),
        settings=settings if settings is not None else get_settings(),
    )


wrap_error = wrap
