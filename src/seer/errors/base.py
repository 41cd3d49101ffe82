# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer
"""
The annotated error value at the heart of seer.

A ``SeerError`` records which operation failed, a message that is safe to
show to users, an optional numeric code, the error it wraps and, optionally,
where it was created. Renderings are provided for humans
(``detailed_string``), for log lines (``str``) and for structured sinks
(``to_dict``/``to_json``).
"""

from __future__ import annotations

import json
from typing import Any

from seer.codes import UNSET_CODE, is_valid_code
from seer.config.settings import SeerSettings, get_settings
from seer.errors.provenance import Provenance
from seer.logging import get_logger

logger = get_logger(__name__)


def render_error(error: BaseException | None) -> str:
    """Render an error the way it appears inside another error's output.

    Args:
        error: The error to render

    Returns:
        ``raw_error()`` for seer errors, ``str(error)`` for anything else and
        an empty string for ``None``
    """
    if error is None:
        return ""
    if isinstance(error, SeerError):
        return error.raw_error()
    return str(error)


class SeerError(Exception):
    """
    An error annotated with an operation, a message and optional provenance.

    Instances are normally built through ``seer.new``, ``seer.wrap`` or
    ``seer.wrap_always``. They are immutable once returned to callers;
    ``with_code`` is the only mutator and is meant for chaining at the
    construction site.
    """

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        *,
        original: BaseException | None = None,
        code: int | None = None,
        provenance: Provenance | None = None,
        settings: SeerSettings | None = None,
    ) -> None:
        """Initialize a new SeerError.

        Args:
            operation: Label of the logical step that failed
            message: User-facing message; blank or missing falls back to the
                default message
            original: The error being wrapped, if any
            code: Optional code in [100, 599]; invalid codes are logged and
                the default code is reported instead
            provenance: Call-site snapshot, if one was captured
            settings: Settings to read defaults from (process-wide if None)
        """
        self._settings = settings if settings is not None else get_settings()
        if not isinstance(message, str) or not message.strip():
            message = self._settings.default_message

        self._operation = operation
        self._message = message
        self._original = original
        self._provenance = provenance
        self._code = UNSET_CODE

        super().__init__(message)

        if original is not None:
            self.__cause__ = original
        if code is not None:
            self.with_code(code)

    # -------- builder --------

    def with_code(self, code: int) -> SeerError:
        """Attach a code, returning ``self`` so calls can be chained.

        Codes outside [100, 599] are logged and ignored; the current code is
        kept.

        Args:
            code: The code to attach

        Returns:
            This error
        """
        if not is_valid_code(code):
            logger.warning(
                "Ignoring invalid error code %r for operation %r", code, self._operation
            )
            return self
        self._code = code
        return self

    # -------- accessors --------

    @property
    def operation(self) -> str:
        return self._operation

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> int:
        """The attached code, or the configured default when none was set."""
        if self._code == UNSET_CODE:
            return self._settings.default_code
        return self._code

    @property
    def original(self) -> BaseException | None:
        return self._original

    @property
    def provenance(self) -> Provenance | None:
        return self._provenance

    @property
    def settings(self) -> SeerSettings:
        return self._settings

    def raw_error(self) -> str:
        """
        Return the most specific message available.

        The stored message is returned unless it is still the generic default
        and a wrapped error exists; then the wrapped error's text is more
        useful and is returned instead.
        """
        if self._original is not None and self._message == self._settings.default_message:
            return render_error(self._original)
        return self._message

    def unwrap(self) -> tuple[BaseException | None, bool]:
        """Step one link down the chain.

        Returns:
            The wrapped error (or None) and whether it is itself a SeerError
        """
        return self._original, isinstance(self._original, SeerError)

    # -------- renderings --------

    def _has_provenance(self) -> bool:
        return self._provenance is not None and not self._provenance.is_empty()

    def _prefix(self) -> str:
        if self._has_provenance():
            p = self._provenance
            return f"{p.file}:{p.line} ({p.caller}::{self._operation})"
        return self._operation

    def detailed_string(self) -> str:
        """Render a one-line diagnostic, including provenance when captured.

        Returns:
            ``"<file>:<line> (<caller>::<operation>): <message>, original_err=<text>"``
            with provenance, ``"<operation>: <message>"`` without
        """
        if self._has_provenance():
            return (
                f"{self._prefix()}: {self._message}, "
                f"original_err={render_error(self._original)}"
            )
        return f"{self._operation}: {self._message}"

    def __str__(self) -> str:
        # Log rendering: location prefix plus the wrapped error on its own line
        text = self._prefix()
        if self._original is not None:
            text += f"\n\tWrapped error: {render_error(self._original)}"
        return text

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(operation={self._operation!r}, "
            f"message={self._message!r}, code={self.code!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation for structured logs.

        Provenance keys appear only while provenance collection is enabled
        and something was captured. ``previous_error`` holds the wrapped
        error's rendered text; the chain is not nested.

        Returns:
            Dictionary with the error's fields
        """
        data: dict[str, Any] = {
            "operation": self._operation,
            "message": self._message,
        }
        if self._settings.collect_provenance and self._has_provenance():
            data["caller"] = self._provenance.caller
            data["file"] = self._provenance.file
            data["line"] = self._provenance.line
        if self._original is not None:
            data["previous_error"] = render_error(self._original)
        return data

    def to_json(self) -> str:
        """Serialize ``to_dict()`` as a JSON string.

        The format is write-only: it is meant for log sinks and there is no
        way to rebuild an error from it.
        """
        return json.dumps(self.to_dict())
