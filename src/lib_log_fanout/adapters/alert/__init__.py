"""Alert channel and its MessageBird notification client."""

from __future__ import annotations

from .channel import AlertChannel
from .messagebird import MessageBirdNotifier

__all__ = ["AlertChannel", "MessageBirdNotifier"]
