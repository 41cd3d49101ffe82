# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer
"""
Defaults applied when seer errors are constructed.

A ``SeerSettings`` instance owns the default message, the default code and
the provenance switch. The process-wide instance returned by
``get_settings()`` is what the factories use unless a caller passes its own
instance. It is meant to be configured once at start-up; no locking is done.

Invalid values never raise. They are logged and ignored (setters) or
replaced by the built-in default (construction).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from seer.codes import DEFAULT_CODE, DEFAULT_MESSAGE, is_valid_code
from seer.logging import get_logger

logger = get_logger(__name__)


class SeerSettings(BaseModel):
    """Defaults read by every error construction."""

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    default_message: str = Field(
        default=DEFAULT_MESSAGE,
        description="Message used when a constructor is not given one",
    )
    default_code: int = Field(
        default=DEFAULT_CODE,
        description="Code reported by errors without a code of their own",
    )
    collect_provenance: bool = Field(
        default=True,
        description="Capture caller, file and line when errors are built",
    )

    @field_validator("default_message", mode="before")
    @classmethod
    def validate_default_message(cls, v: Any) -> str:
        """Fall back to the built-in message for blank values."""
        if not isinstance(v, str) or not v.strip():
            logger.warning(
                "Ignoring blank default message %r, using %r", v, DEFAULT_MESSAGE
            )
            return DEFAULT_MESSAGE
        return v

    @field_validator("default_code", mode="before")
    @classmethod
    def validate_default_code(cls, v: Any) -> int:
        """Fall back to the built-in code for out-of-range values."""
        if not is_valid_code(v):
            logger.warning(
                "Ignoring invalid default code %r, using %d", v, DEFAULT_CODE
            )
            return DEFAULT_CODE
        return v

    def set_default_message(self, message: str) -> None:
        """Replace the default message; blank text is ignored.

        Args:
            message: New default message
        """
        if not isinstance(message, str) or not message.strip():
            logger.warning("Ignoring blank default message %r", message)
            return
        self.default_message = message

    def set_default_code(self, code: int) -> None:
        """Replace the default code; values outside the accepted range are ignored.

        Args:
            code: New default code
        """
        if not is_valid_code(code):
            logger.warning(
                "Ignoring invalid default code %r, keeping %d", code, self.default_code
            )
            return
        self.default_code = code

    def set_collect_provenance(self, flag: bool) -> None:
        """Toggle provenance capture for errors built from now on."""
        self.collect_provenance = bool(flag)


_settings = SeerSettings()


def get_settings() -> SeerSettings:
    """Return the process-wide settings instance."""
    return _settings


def reset_settings() -> SeerSettings:
    """Restore the process-wide settings to the built-in defaults.

    The existing instance is updated in place so errors that already hold a
    reference to it see the reset values.

    Returns:
        The process-wide settings instance
    """
    defaults = SeerSettings()
    _settings.default_message = defaults.default_message
    _settings.default_code = defaults.default_code
    _settings.collect_provenance = defaults.collect_provenance
    return _settings


def set_default_message(message: str) -> None:
    """Set the process-wide default message. Blank text is ignored."""
    _settings.set_default_message(message)


def set_default_code(code: int) -> None:
    """Set the process-wide default code. Values outside [100, 599] are ignored."""
    _settings.set_default_code(code)


def set_collect_provenance(flag: bool) -> None:
    """Turn process-wide provenance capture on or off."""
    _settings.set_collect_provenance(flag)
