"""Channel port describing independent delivery targets.

Purpose
-------
Define the narrow contract every output channel (console, file, SMS alert)
implements so the dispatcher can fan records out without knowing the medium.

Contents
--------
* :class:`ChannelPort` – runtime-checkable protocol with a single ``deliver``
  method.
* :class:`ClosableChannel` – optional extension for channels holding
  resources.

System Role
-----------
Threshold evaluation is owned by the dispatcher's registrations, so channels
carry no filtering logic and need no shared base class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_fanout.domain.records import LogRecord


@runtime_checkable
class ChannelPort(Protocol):
    """Deliver a record to one output medium."""

    def deliver(self, record: LogRecord) -> None:
        """Hand ``record`` to the medium; implementations should not raise."""


@runtime_checkable
class ClosableChannel(ChannelPort, Protocol):
    """Channel that owns a resource released at shutdown."""

    def close(self) -> None:
        """Release file handles, HTTP clients or similar resources."""


__all__ = ["ChannelPort", "ClosableChannel"]
