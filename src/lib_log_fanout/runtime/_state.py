"""Runtime container owned by the host application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lib_log_fanout.application.use_cases.dispatch import DispatchResult, Dispatcher
from lib_log_fanout.domain.levels import LogLevel

from ._settings import RuntimeSettings


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of the live dispatcher and the settings it was built from.

    The runtime is an ordinary object: hosts construct it at startup, pass the
    dispatcher to whatever needs to log, and call :meth:`close` on shutdown.
    """

    dispatcher: Dispatcher
    settings: RuntimeSettings

    def log(self, severity: str | int | LogLevel, message: Any) -> DispatchResult:
        return self.dispatcher.log(severity, message)

    def close(self) -> None:
        """Close every channel holding a resource."""

        self.dispatcher.close()

    def __enter__(self) -> "LoggingRuntime":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["LoggingRuntime"]
