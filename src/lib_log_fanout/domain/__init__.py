"""Domain entities and value objects used by the fan-out pipeline."""

from __future__ import annotations

from .alerts import AlertConfig, DeliveryResult, OutgoingAlert, truncate_body
from .errors import ConfigurationError, DeliveryError, LogFanoutError
from .levels import LogLevel, coerce_level
from .records import LogRecord, format_record

__all__ = [
    "AlertConfig",
    "ConfigurationError",
    "DeliveryError",
    "DeliveryResult",
    "LogFanoutError",
    "LogLevel",
    "LogRecord",
    "OutgoingAlert",
    "coerce_level",
    "format_record",
    "truncate_body",
]
