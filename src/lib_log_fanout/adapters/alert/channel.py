"""Size-constrained alert channel forwarding records to an SMS medium.

Purpose
-------
Turn a :class:`LogRecord` into a short text message, enforce the medium's
payload-length limit, and hand it to a :class:`NotifierPort`.

Contents
--------
* :class:`AlertChannel` - channel registered for high severities.

System Role
-----------
The only channel with non-trivial delivery rules. Its configuration is
validated eagerly at construction (``ConfigurationError``); delivery failures
are absorbed and reported to the diagnostic side channel so they never reach
the dispatcher or its caller.

Alignment Notes
---------------
The side channel is the ``lib_log_fanout.diagnostics`` logger (plus an
optional hook), never the dispatcher, so a failing alert cannot trigger
another alert.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from lib_log_fanout.application.ports.channel import ClosableChannel
from lib_log_fanout.application.ports.notifier import NotifierPort
from lib_log_fanout.application.use_cases._diagnostics import build_diagnostic_emitter
from lib_log_fanout.domain.alerts import AlertConfig, DeliveryResult, OutgoingAlert, truncate_body
from lib_log_fanout.domain.errors import DeliveryError
from lib_log_fanout.domain.records import LogRecord


class AlertChannel(ClosableChannel):
    """Deliver records as truncated SMS alerts with failure isolation.

    Parameters
    ----------
    config:
        Validated :class:`AlertConfig`.
    notifier:
        Medium client; defaults to a :class:`MessageBirdNotifier` built from
        ``config`` and shared by every delivery.
    diagnostic:
        Optional callback receiving ``("delivery_failed", payload)``.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_fanout.domain.levels import LogLevel
    >>> class Outbox:
    ...     def __init__(self):
    ...         self.sent = []
    ...     def send(self, message):
    ...         self.sent.append(message)
    ...         return DeliveryResult.success()
    >>> outbox = Outbox()
    >>> channel = AlertChannel(AlertConfig("key", "Ops", ("31600000000",)), notifier=outbox)
    >>> record = LogRecord.create(LogLevel.ERROR, "x" * 500, datetime(2025, 9, 30, tzinfo=timezone.utc))
    >>> channel.deliver(record).ok
    True
    >>> len(outbox.sent[0].body), outbox.sent[0].body[-4:]
    (144, ' ...')
    """

    def __init__(
        self,
        config: AlertConfig,
        *,
        notifier: NotifierPort | None = None,
        diagnostic: Callable[[str, dict[str, Any]], None] | None = None,
    ) -> None:
        self._config = config
        self._owns_notifier = notifier is None
        if notifier is None:
            from .messagebird import MessageBirdNotifier

            notifier = MessageBirdNotifier(config.api_key, timeout=config.timeout)
        self._notifier = notifier
        self._emit = build_diagnostic_emitter(diagnostic)
        self._message: OutgoingAlert | None = None

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, Any],
        *,
        notifier: NotifierPort | None = None,
        diagnostic: Callable[[str, dict[str, Any]], None] | None = None,
    ) -> "AlertChannel":
        """Validate ``options`` (``apiKey``, ``originator``, ``recipients``) and build the channel."""

        return cls(AlertConfig.from_options(options), notifier=notifier, diagnostic=diagnostic)

    @property
    def config(self) -> AlertConfig:
        return self._config

    @property
    def last_message(self) -> OutgoingAlert | None:
        """Return the message built by the most recent :meth:`deliver` call."""

        return self._message

    def deliver(self, record: LogRecord) -> DeliveryResult:
        """Send ``record.formatted`` (truncated when too long); never raises."""
        body = truncate_body(record.formatted, self._config.max_body_chars, self._config.truncation_marker)
        message = OutgoingAlert(
            originator=self._config.originator,
            recipients=self._config.recipients,
            body=body,
        )
        self._message = message
        try:
            result = self._notifier.send(message)
        except DeliveryError as exc:
            result = DeliveryResult.failure(exc.kind, exc.description)
        except Exception as exc:  # noqa: BLE001 - delivery failures stay inside the channel
            result = DeliveryResult.failure(type(exc).__name__, str(exc))

        if not result.ok:
            self._emit(
                "delivery_failed",
                {
                    "error": f"{result.error_kind}: {result.description}",
                    "level": record.severity.name,
                    "recipients": len(self._config.recipients),
                },
            )
        return result

    def close(self) -> None:
        close = getattr(self._notifier, "close", None)
        if self._owns_notifier and callable(close):
            close()

    def __repr__(self) -> str:
        return f"AlertChannel(originator={self._config.originator!r}, recipients={len(self._config.recipients)})"


__all__ = ["AlertChannel"]
