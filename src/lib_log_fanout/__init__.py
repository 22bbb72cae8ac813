"""Public package surface for the severity-filtered log fan-out pipeline.

Hosts typically call :func:`create_runtime` once at startup and pass
``runtime.dispatcher`` to the components that log. The building blocks
(:class:`Dispatcher`, channels, :class:`AlertChannel`) are exported for hosts
that compose the pipeline by hand.
"""

from __future__ import annotations

from .adapters import AlertChannel, FileChannel, MessageBirdNotifier, MonotonicClock, RichConsoleChannel
from .application.use_cases.dispatch import ChannelRegistration, Dispatcher
from .domain import (
    AlertConfig,
    ConfigurationError,
    DeliveryError,
    DeliveryResult,
    LogFanoutError,
    LogLevel,
    LogRecord,
    OutgoingAlert,
    format_record,
    truncate_body,
)
from .runtime import LoggingRuntime, RuntimeSettings, build_runtime, build_runtime_settings, create_runtime

__all__ = [
    "AlertChannel",
    "AlertConfig",
    "ChannelRegistration",
    "ConfigurationError",
    "DeliveryError",
    "DeliveryResult",
    "Dispatcher",
    "FileChannel",
    "LogFanoutError",
    "LogLevel",
    "LogRecord",
    "LoggingRuntime",
    "MessageBirdNotifier",
    "MonotonicClock",
    "OutgoingAlert",
    "RichConsoleChannel",
    "RuntimeSettings",
    "build_runtime",
    "build_runtime_settings",
    "create_runtime",
    "format_record",
    "truncate_body",
]
