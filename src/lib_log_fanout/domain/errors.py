"""Exception taxonomy shared by every layer of the pipeline."""

from __future__ import annotations


class LogFanoutError(Exception):
    """Base class for errors raised by :mod:`lib_log_fanout`."""


class ConfigurationError(LogFanoutError, ValueError):
    """Raised when a channel or runtime cannot be built from its settings.

    Configuration errors are fatal at construction time; they are never
    deferred to the first delivery and never retried.
    """


class DeliveryError(LogFanoutError):
    """Raised by notifiers that signal a failed hand-off by exception.

    The alert channel absorbs these; they never reach the dispatcher's caller.
    """

    def __init__(self, kind: str, description: str) -> None:
        super().__init__(f"{kind}: {description}")
        self.kind = kind
        self.description = description


__all__ = ["ConfigurationError", "DeliveryError", "LogFanoutError"]
