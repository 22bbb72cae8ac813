"""Clock adapter producing non-decreasing UTC timestamps."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime, timezone

from lib_log_fanout.application.ports.time import ClockPort


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MonotonicClock(ClockPort):
    """Return wall-clock UTC time, never earlier than the previous reading.

    Examples
    --------
    >>> readings = iter([
    ...     datetime(2025, 1, 1, 12, 0, 5, tzinfo=timezone.utc),
    ...     datetime(2025, 1, 1, 12, 0, 1, tzinfo=timezone.utc),
    ... ])
    >>> clock = MonotonicClock(source=lambda: next(readings))
    >>> first, second = clock.now(), clock.now()
    >>> second == first
    True
    """

    def __init__(self, *, source: Callable[[], datetime] | None = None) -> None:
        self._source = source or _utc_now
        self._last: datetime | None = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        current = self._source()
        with self._lock:
            if self._last is not None and current < self._last:
                current = self._last
            self._last = current
        return current


__all__ = ["MonotonicClock"]
