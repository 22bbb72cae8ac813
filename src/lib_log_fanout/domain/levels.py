"""Ordered log level abstraction used for threshold filtering.

Purpose
-------
Offer a domain-specific representation of log severities that can be compared
against channel thresholds and converted to and from stdlib levels.

Contents
--------
* :class:`LogLevel` enum with ordering and conversion helpers.
* :func:`coerce_level` accepting names, numbers or members.

System Role
-----------
The dispatcher compares record severities against registration thresholds
using the ordering defined here.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Enumerated logging levels ordered DEBUG < INFO < WARNING < ERROR < CRITICAL."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value >= other.value

    @property
    def severity(self) -> str:
        """Return the lowercase severity name for structured payloads."""

        return self.name.lower()

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging level integer into :class:`LogLevel`."""
        return cls.from_numeric(level)

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` corresponding to ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


def coerce_level(level: str | int | LogLevel) -> LogLevel:
    """Normalise a level given as name, number or :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warn") is LogLevel.WARNING
    True
    >>> coerce_level(40) is LogLevel.ERROR
    True
    """

    if isinstance(level, LogLevel):
        return level
    if isinstance(level, int):
        return LogLevel.from_numeric(level)
    return LogLevel.from_name(level)


_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


__all__ = ["LogLevel", "coerce_level"]
