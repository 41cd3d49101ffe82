# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer
"""
Logger helpers for seer.

Every seer module logs through ``get_logger(__name__)`` so all output lives
under the ``seer`` namespace. ``StructuredFormatter`` renders records as text
or JSON lines and knows how to embed a seer error carried in ``exc_info``.
"""

from __future__ import annotations

import datetime
import enum
import json
import logging
import sys
import uuid
from logging import StreamHandler
from typing import Any

from seer.logging.config import LoggingSettings

ROOT_LOGGER_NAME = "seer"

# Attributes every LogRecord carries; anything else was passed via ``extra``
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a standard library logger.

    Args:
        name: Logger name, usually the calling module's ``__name__``

    Returns:
        The logger instance
    """
    return logging.getLogger(name)


def _seer_error(record: logging.LogRecord) -> Any:
    """Return the seer error attached to a record, if there is one."""
    if not record.exc_info:
        return None
    # Imported here: seer.errors logs through this module
    from seer.errors.base import SeerError

    exc = record.exc_info[1]
    return exc if isinstance(exc, SeerError) else None


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with structured data.

        Args:
            record: The log record to format

        Returns:
            Formatted log string
        """
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }

        if self.json_format:
            return self._format_json(record, extra)
        return self._format_text(record, extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "logger": record.name,
            **extra,
        }

        if self.include_level:
            log_data["level"] = record.levelname

        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)

        error = _seer_error(record)
        if error is not None:
            log_data["error"] = error.to_dict()
        elif record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])

        return json.dumps(log_data, default=str)

    def _format_text(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        error = _seer_error(record)
        if error is not None:
            extra["error"] = error.detailed_string()

        message = super().format(record)
        if not extra:
            return message

        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_value(self, value: Any) -> str:
        """Format a value for text output.

        Args:
            value: Value to format

        Returns:
            Formatted value string
        """
        if isinstance(value, str):
            # Quoted values are JSON strings so embedded quotes stay unambiguous
            if not value or any(c.isspace() or c in '"=' for c in value):
                return json.dumps(value)
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, uuid.UUID):
            return str(value)
        if isinstance(value, enum.Enum):
            return value.name
        try:
            return json.dumps(value)
        except TypeError:
            return str(value)


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """
    Install handlers on the ``seer`` logger.

    Existing handlers on that logger are closed and replaced, so calling this
    again reconfigures rather than duplicates output.

    Args:
        settings: Logging settings (loads from environment if None)

    Returns:
        The configured ``seer`` logger
    """
    if settings is None:
        settings = LoggingSettings()
    logger = get_logger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.stdlib_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = StructuredFormatter(
        json_format=settings.json_format,
        include_timestamp=settings.include_timestamp,
        include_level=settings.include_level,
    )

    if settings.console_enabled:
        console = StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        logger.addHandler(console)

    if settings.file_path:
        file_handler = logging.FileHandler(settings.file_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
