"""Domain record describing one log event and its rendered text.

Purpose
-------
Provide an immutable representation of a log event travelling through the
dispatcher. The human-readable ``formatted`` text is computed exactly once so
every channel presents the same line.

Contents
--------
* :func:`format_record` – pure formatter producing the single-line text.
* :class:`LogRecord` frozen dataclass with helper constructors.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Sits in the domain layer; the dispatcher constructs records and channels only
ever read ``record.formatted``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .levels import LogLevel

DEFAULT_LOGGER_NAME = "app"


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


def format_record(
    severity: LogLevel,
    message: str,
    timestamp: datetime,
    logger_name: str = DEFAULT_LOGGER_NAME,
) -> str:
    """Render a record as ``[timestamp] logger.LEVEL: message``.

    The function is deterministic and performs no I/O.

    Examples
    --------
    >>> ts = datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> format_record(LogLevel.ERROR, "disk full", ts)
    '[2025-09-30T12:00:00+00:00] app.ERROR: disk full'
    """

    return f"[{timestamp.isoformat()}] {logger_name}.{severity.name}: {message}"


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Immutable log record handed to every accepting channel.

    Attributes
    ----------
    severity:
        :class:`LogLevel` of the event.
    message:
        Raw text supplied by the caller.
    timestamp:
        Time of creation in timezone-aware UTC.
    logger_name:
        Name of the dispatcher that produced the record.
    formatted:
        Rendered line; channels consume this instead of the raw fields.
    """

    severity: LogLevel
    message: str
    timestamp: datetime
    formatted: str
    logger_name: str = DEFAULT_LOGGER_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))

    @classmethod
    def create(
        cls,
        severity: LogLevel,
        message: str,
        timestamp: datetime,
        logger_name: str = DEFAULT_LOGGER_NAME,
    ) -> "LogRecord":
        """Build a record, computing ``formatted`` from the normalised timestamp."""

        aware = _ensure_aware(timestamp)
        return cls(
            severity=severity,
            message=message,
            timestamp=aware,
            formatted=format_record(severity, message, aware, logger_name),
            logger_name=logger_name,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize the record to a dictionary with an ISO8601 timestamp."""

        return {
            "timestamp": self.timestamp.isoformat(),
            "logger_name": self.logger_name,
            "level": self.severity.severity,
            "message": self.message,
            "formatted": self.formatted,
        }


__all__ = ["DEFAULT_LOGGER_NAME", "LogRecord", "format_record"]
