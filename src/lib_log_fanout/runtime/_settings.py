"""Runtime settings resolved from call arguments and the environment.

Environment variables take precedence over call arguments so deployments can
reconfigure channels without code changes. Invalid values raise
:class:`ConfigurationError` before any channel is built.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lib_log_fanout.application.ports import DiagnosticHook
from lib_log_fanout.domain.alerts import AlertConfig
from lib_log_fanout.domain.errors import ConfigurationError
from lib_log_fanout.domain.levels import LogLevel, coerce_level
from lib_log_fanout.domain.records import DEFAULT_LOGGER_NAME

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

ENV_API_KEY = "MESSAGEBIRD_API_KEY"
ENV_ORIGINATOR = "MESSAGEBIRD_ORIGINATOR"
ENV_RECIPIENTS = "MESSAGEBIRD_RECIPIENTS"


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Resolved configuration consumed by :func:`build_runtime`."""

    name: str
    console_level: LogLevel
    file_path: Path | None
    file_level: LogLevel
    alert: AlertConfig | None
    alert_level: LogLevel
    force_color: bool
    no_color: bool
    diagnostic_hook: DiagnosticHook = None


def build_runtime_settings(
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
) -> RuntimeSettings:
    """Merge arguments with ``LOG_*`` / ``MESSAGEBIRD_*`` environment overrides."""

    name = os.getenv("LOG_NAME", name)
    console_threshold = _level_from_env("LOG_CONSOLE_LEVEL", console_level)
    file_threshold = _level_from_env("LOG_FILE_LEVEL", file_level)
    alert_threshold = _level_from_env("LOG_ALERT_LEVEL", alert_level)
    raw_path = os.getenv("LOG_FILE_PATH")
    resolved_path = Path(raw_path) if raw_path else (Path(file_path) if file_path is not None else None)

    alerts_enabled = _env_bool("LOG_ENABLE_ALERTS", enable_alerts)
    alert = _resolve_alert_config(alert_options) if alerts_enabled else None

    return RuntimeSettings(
        name=name,
        console_level=console_threshold,
        file_path=resolved_path,
        file_level=file_threshold,
        alert=alert,
        alert_level=alert_threshold,
        force_color=_env_bool("LOG_FORCE_COLOR", force_color),
        no_color=_env_bool("LOG_NO_COLOR", no_color),
        diagnostic_hook=diagnostic_hook,
    )


def _resolve_alert_config(options: Mapping[str, Any] | None) -> AlertConfig:
    """Build the alert config; environment values override ``options``."""

    merged: dict[str, Any] = dict(options or {})
    env_values = {
        "api_key": _str_from_env(ENV_API_KEY),
        "originator": _str_from_env(ENV_ORIGINATOR),
        "recipients": _str_from_env(ENV_RECIPIENTS),
        "max_body_chars": _int_from_env("LOG_ALERT_MAX_CHARS"),
        "timeout": _float_from_env("LOG_ALERT_TIMEOUT"),
    }
    for key, value in env_values.items():
        if value is not None:
            merged[key] = value
    return AlertConfig.from_options(merged)


def _level_from_env(variable: str, default: str | LogLevel) -> LogLevel:
    candidate = os.getenv(variable, default)
    try:
        return coerce_level(candidate)
    except ValueError as exc:
        raise ConfigurationError(f"{variable}: {exc}") from exc


def _env_bool(variable: str, default: bool) -> bool:
    raw = os.getenv(variable)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY or value == "":
        return False
    raise ConfigurationError(f"{variable} must be a boolean flag, got {raw!r}")


def _str_from_env(variable: str) -> str | None:
    raw = os.getenv(variable)
    if raw is None or not raw.strip():
        return None
    return raw


def _int_from_env(variable: str) -> int | None:
    raw = os.getenv(variable)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{variable} must be an integer") from exc


def _float_from_env(variable: str) -> float | None:
    raw = os.getenv(variable)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{variable} must be a number") from exc


__all__ = ["DiagnosticHook", "RuntimeSettings", "build_runtime_settings"]
