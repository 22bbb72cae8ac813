"""Concrete channels, notifier and clock adapters.

The web middleware lives in :mod:`lib_log_fanout.adapters.web` and is not
re-exported here so that importing the core channels does not import
starlette.
"""

from __future__ import annotations

from .alert import AlertChannel, MessageBirdNotifier
from .clock import MonotonicClock
from .console import RichConsoleChannel
from .file import FileChannel

__all__ = [
    "AlertChannel",
    "FileChannel",
    "MessageBirdNotifier",
    "MonotonicClock",
    "RichConsoleChannel",
]
