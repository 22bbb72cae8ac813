"""Protocols describing the boundaries between the dispatcher and adapters."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from .channel import ChannelPort, ClosableChannel
from .notifier import NotifierPort
from .time import ClockPort

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]

__all__ = ["ChannelPort", "ClockPort", "ClosableChannel", "DiagnosticHook", "NotifierPort"]
