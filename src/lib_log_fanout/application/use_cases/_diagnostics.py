"""Side-channel diagnostics for failures inside the pipeline.

Failures of a channel must never be reported through the dispatcher itself
(an alert failure would otherwise try to raise another alert). Diagnostics
therefore go to a dedicated stdlib logger and to an optional host callback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

DIAGNOSTIC_LOGGER_NAME = "lib_log_fanout.diagnostics"

DiagnosticEmitter = Callable[[str, dict[str, Any]], None]

_DIAGNOSTIC_LEVELS = {
    "channel_failed": logging.ERROR,
    "record_failed": logging.ERROR,
    "delivery_failed": logging.WARNING,
    "close_failed": logging.WARNING,
}


def build_diagnostic_emitter(
    diagnostic: Callable[[str, dict[str, Any]], None] | None,
    *,
    logger: logging.Logger | None = None,
) -> DiagnosticEmitter:
    """Return ``emit(name, payload)`` writing to the diagnostic logger and hook.

    Exceptions raised by the hook are swallowed; a broken observer must not
    turn into a logging failure.

    Examples
    --------
    >>> seen = []
    >>> emit = build_diagnostic_emitter(lambda name, payload: seen.append(name))
    >>> emit("delivered", {"channel": "console"})
    >>> seen
    ['delivered']
    """

    sink = logger or logging.getLogger(DIAGNOSTIC_LOGGER_NAME)

    def emit(name: str, payload: dict[str, Any]) -> None:
        level = _DIAGNOSTIC_LEVELS.get(name, logging.DEBUG)
        if sink.isEnabledFor(level):
            details = " ".join(f"{key}={value}" for key, value in payload.items())
            sink.log(level, "%s %s", name, details)
        if diagnostic is None:
            return
        try:
            diagnostic(name, dict(payload))
        except Exception:  # noqa: BLE001 - observers must not break logging
            sink.debug("diagnostic hook raised for %s", name, exc_info=True)

    return emit


__all__ = ["DIAGNOSTIC_LOGGER_NAME", "DiagnosticEmitter", "build_diagnostic_emitter"]
