"""Port for the external notification medium used by the alert channel."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_fanout.domain.alerts import DeliveryResult, OutgoingAlert


@runtime_checkable
class NotifierPort(Protocol):
    """Send one alert and report the outcome as a value.

    Implementations return :class:`DeliveryResult` instead of raising so the
    alert channel can route failures to diagnostics without unwinding.
    """

    def send(self, message: OutgoingAlert) -> DeliveryResult:
        """Hand ``message`` to the medium and describe what happened."""


__all__ = ["NotifierPort"]
