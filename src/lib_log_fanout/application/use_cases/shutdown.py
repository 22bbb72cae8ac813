"""Shutdown orchestration for registered channels.

Purpose
-------
Provide a unified shutdown routine that closes every distinct channel holding
a resource (file handles, HTTP clients) exactly once.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from lib_log_fanout.application.ports.channel import ChannelPort


def create_shutdown(
    *,
    channels: Iterable[ChannelPort],
    emit: Callable[[str, dict[str, Any]], None],
) -> Callable[[], None]:
    """Return a callable closing ``channels``; close failures go to ``emit``."""

    def shutdown() -> None:
        """Close each distinct channel that exposes ``close``."""
        seen: set[int] = set()
        for channel in channels:
            if id(channel) in seen:
                continue
            seen.add(id(channel))
            close = getattr(channel, "close", None)
            if not callable(close):
                continue
            try:
                close()
            except Exception as exc:  # noqa: BLE001 - shutdown continues for other channels
                emit(
                    "close_failed",
                    {"channel": type(channel).__name__, "error": type(exc).__name__, "description": str(exc)},
                )

    return shutdown


__all__ = ["create_shutdown"]
