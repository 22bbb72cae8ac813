"""Use case fanning one log record out to every accepting channel.

Purpose
-------
Own the ordered list of ``(channel, threshold)`` registrations, build one
immutable :class:`LogRecord` per call, and deliver it to each channel whose
threshold the record's severity meets.

Contents
--------
* :class:`ChannelRegistration` – a channel paired with its minimum severity.
* :class:`Dispatcher` – ``register``/``log`` plus level-specific helpers.

System Role
-----------
Application-layer orchestrator. Channels are independent black boxes: a
failure raised by one is absorbed here, reported to the diagnostic side
channel, and never prevents delivery to the channels registered after it.
``log`` never raises to its caller.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lib_log_fanout.application.ports import ChannelPort, ClockPort
from lib_log_fanout.domain.levels import LogLevel, coerce_level
from lib_log_fanout.domain.records import DEFAULT_LOGGER_NAME, LogRecord

from ._diagnostics import build_diagnostic_emitter
from .shutdown import create_shutdown

DispatchResult = dict[str, Any]


@dataclass(slots=True, frozen=True)
class ChannelRegistration:
    """Channel registered with the minimum severity it accepts."""

    channel: ChannelPort
    threshold: LogLevel

    def accepts(self, severity: LogLevel) -> bool:
        """Return ``True`` when ``severity`` meets this registration's threshold.

        Examples
        --------
        >>> class Sink:
        ...     def deliver(self, record):
        ...         pass
        >>> registration = ChannelRegistration(Sink(), LogLevel.ERROR)
        >>> registration.accepts(LogLevel.WARNING), registration.accepts(LogLevel.CRITICAL)
        (False, True)
        """

        return severity >= self.threshold


class Dispatcher:
    """Severity-filtered fan-out of log records to registered channels.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class FixedClock:
    ...     def now(self):
    ...         return datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> class Recorder:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def deliver(self, record):
    ...         self.lines.append(record.formatted)
    >>> dispatcher = Dispatcher(clock=FixedClock())
    >>> recorder = Recorder()
    >>> _ = dispatcher.register(recorder, LogLevel.INFO)
    >>> dispatcher.log(LogLevel.DEBUG, "ignored")
    {'ok': True, 'delivered': 0, 'failed': 0}
    >>> dispatcher.log(LogLevel.ERROR, "boom")
    {'ok': True, 'delivered': 1, 'failed': 0}
    >>> recorder.lines
    ['[2025-09-30T12:00:00+00:00] app.ERROR: boom']
    """

    def __init__(
        self,
        *,
        name: str = DEFAULT_LOGGER_NAME,
        clock: ClockPort,
        diagnostic: Callable[[str, dict[str, Any]], None] | None = None,
    ) -> None:
        self._name = name
        self._clock = clock
        self._emit = build_diagnostic_emitter(diagnostic)
        self._registrations: tuple[ChannelRegistration, ...] = ()
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def registrations(self) -> tuple[ChannelRegistration, ...]:
        """Return the registrations in the order they are consulted."""

        return self._registrations

    def register(self, channel: ChannelPort, threshold: str | int | LogLevel = LogLevel.DEBUG) -> ChannelRegistration:
        """Append ``channel`` with ``threshold``; the same channel may appear twice."""

        registration = ChannelRegistration(channel=channel, threshold=coerce_level(threshold))
        with self._lock:
            self._registrations = (*self._registrations, registration)
        return registration

    def log(self, severity: str | int | LogLevel, message: Any) -> DispatchResult:
        """Build a record and deliver it to every accepting channel.

        Returns an informational summary; failures are reported to the
        diagnostic side channel and never raised.
        """

        try:
            record = self._build_record(severity, message)
        except Exception as exc:  # noqa: BLE001 - logging must not fail the caller
            self._emit("record_failed", {"error": type(exc).__name__, "description": str(exc)})
            return {"ok": False, "delivered": 0, "failed": 0}

        delivered = 0
        failed = 0
        for registration in self._registrations:
            if not registration.accepts(record.severity):
                continue
            try:
                registration.channel.deliver(record)
            except Exception as exc:  # noqa: BLE001 - channels are isolated from each other
                failed += 1
                self._emit(
                    "channel_failed",
                    {
                        "channel": type(registration.channel).__name__,
                        "level": record.severity.name,
                        "error": type(exc).__name__,
                        "description": str(exc),
                    },
                )
            else:
                delivered += 1
        return {"ok": failed == 0, "delivered": delivered, "failed": failed}

    def debug(self, message: Any) -> DispatchResult:
        return self.log(LogLevel.DEBUG, message)

    def info(self, message: Any) -> DispatchResult:
        return self.log(LogLevel.INFO, message)

    def warning(self, message: Any) -> DispatchResult:
        return self.log(LogLevel.WARNING, message)

    warn = warning

    def error(self, message: Any) -> DispatchResult:
        return self.log(LogLevel.ERROR, message)

    def critical(self, message: Any) -> DispatchResult:
        return self.log(LogLevel.CRITICAL, message)

    def close(self) -> None:
        """Release resources held by registered channels."""

        create_shutdown(
            channels=[registration.channel for registration in self._registrations],
            emit=self._emit,
        )()

    def _build_record(self, severity: str | int | LogLevel, message: Any) -> LogRecord:
        level = coerce_level(severity)
        text = message if isinstance(message, str) else str(message)
        return LogRecord.create(level, text, self._clock.now(), self._name)


__all__ = ["ChannelRegistration", "DispatchResult", "Dispatcher"]
