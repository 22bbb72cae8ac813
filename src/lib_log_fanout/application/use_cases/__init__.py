"""Application use cases: record dispatch and shutdown."""

from __future__ import annotations

from .dispatch import ChannelRegistration, Dispatcher
from .shutdown import create_shutdown

__all__ = ["ChannelRegistration", "Dispatcher", "create_shutdown"]
