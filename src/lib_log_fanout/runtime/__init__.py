"""Runtime façade that composes the fan-out pipeline.

Purpose
-------
Expose a stable entry point (:func:`create_runtime`) that host applications
call once at startup. Unlike a global logger container, the returned
:class:`LoggingRuntime` is owned by the caller and passed explicitly to the
components that log.

Contents
--------
* :func:`create_runtime` – resolve settings and build the runtime.
* :func:`build_runtime_settings` / :func:`build_runtime` – the two steps,
  exposed for hosts that need to inspect or adjust settings in between.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from lib_log_fanout.application.ports import ChannelPort, ClockPort, NotifierPort
from lib_log_fanout.domain.levels import LogLevel
from lib_log_fanout.domain.records import DEFAULT_LOGGER_NAME

from ._composition import build_runtime
from ._settings import DiagnosticHook, RuntimeSettings, build_runtime_settings
from ._state import LoggingRuntime


def create_runtime(
    *,
    name: str = DEFAULT_LOGGER_NAME,
    console_level: str | LogLevel = LogLevel.DEBUG,
    file_path: str | Path | None = None,
    file_level: str | LogLevel = LogLevel.INFO,
    enable_alerts: bool = False,
    alert_options: Mapping[str, Any] | None = None,
    alert_level: str | LogLevel = LogLevel.ERROR,
    force_color: bool = False,
    no_color: bool = False,
    diagnostic_hook: DiagnosticHook = None,
    console: ChannelPort | None = None,
    notifier: NotifierPort | None = None,
    clock: ClockPort | None = None,
) -> LoggingRuntime:
    """Compose the logging runtime according to configuration inputs.

    Inputs
    ------
    name:
        Logger name rendered into every formatted line (``LOG_NAME``).
    console_level, file_level, alert_level:
        Minimum severities per channel (``LOG_CONSOLE_LEVEL``,
        ``LOG_FILE_LEVEL``, ``LOG_ALERT_LEVEL``).
    file_path:
        Enables the file channel when set (``LOG_FILE_PATH``).
    enable_alerts, alert_options:
        Enable the SMS alert channel (``LOG_ENABLE_ALERTS``). Credentials come
        from ``alert_options`` and the ``MESSAGEBIRD_*`` variables.
    force_color, no_color:
        Console colour overrides (``LOG_FORCE_COLOR``, ``LOG_NO_COLOR``).
    diagnostic_hook:
        Callback receiving internal diagnostics such as ``channel_failed`` and
        ``delivery_failed``.
    console, notifier, clock:
        Adapter overrides for hosts and tests.

    Raises
    ------
    ConfigurationError
        When a level name is unknown or alerts are enabled with incomplete
        credentials.

    Examples
    --------
    >>> runtime = create_runtime(console_level="info")  # doctest: +SKIP
    >>> runtime.dispatcher.error("payment service unreachable")  # doctest: +SKIP
    >>> runtime.close()  # doctest: +SKIP
    """

    settings = build_runtime_settings(
        name=name,
        console_level=console_level,
        file_path=file_path,
        file_level=file_level,
        enable_alerts=enable_alerts,
        alert_options=alert_options,
        alert_level=alert_level,
        force_color=force_color,
        no_color=no_color,
        diagnostic_hook=diagnostic_hook,
    )
    return build_runtime(settings, console=console, notifier=notifier, clock=clock)


__all__ = [
    "LoggingRuntime",
    "RuntimeSettings",
    "build_runtime",
    "build_runtime_settings",
    "create_runtime",
]
