"""Append-only text file channel.

Writes one ``record.formatted`` line per delivery, mirroring the ``app.log``
stream sink of a typical web deployment. The file is opened lazily so a
runtime can be composed before the log directory exists.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TextIO

from lib_log_fanout.application.ports.channel import ClosableChannel
from lib_log_fanout.domain.records import LogRecord


class FileChannel(ClosableChannel):
    """Append formatted records to ``path``."""

    def __init__(self, path: str | Path, *, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding
        self._handle: TextIO | None = None
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def deliver(self, record: LogRecord) -> None:
        with self._lock:
            handle = self._ensure_open()
            handle.write(record.formatted + "\n")
            handle.flush()

    def close(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.close()
                self._handle = None

    def _ensure_open(self) -> TextIO:
        if self._handle is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self._path.open("a", encoding=self._encoding)
        return self._handle

    def __repr__(self) -> str:
        return f"FileChannel(path={str(self._path)!r})"


__all__ = ["FileChannel"]
