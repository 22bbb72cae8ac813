"""Rich-powered console channel implementing :class:`ChannelPort`.

Purpose
-------
Render formatted records on the terminal with a per-level style. Writes to
stderr by default so records land in the server error log.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleChannel` - stream channel registered by the runtime.

System Role
-----------
Primary human-facing sink; a plain byte-stream target that only ever prints
``record.formatted``.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping

from rich.console import Console

from lib_log_fanout.application.ports.channel import ChannelPort
from lib_log_fanout.domain.levels import LogLevel
from lib_log_fanout.domain.records import LogRecord


#: Default Rich styles keyed by :class:`LogLevel` severity.
_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
}


class RichConsoleChannel(ChannelPort):
    """Print records using Rich formatting with style overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        stderr: bool = True,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogLevel | str, str] | None = None,
    ) -> None:
        """Configure the channel with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=stderr, force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    def deliver(self, record: LogRecord) -> None:
        """Print ``record.formatted`` with the style of its level.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> from io import StringIO
        >>> record = LogRecord.create(LogLevel.INFO, 'msg', datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc))
        >>> console = Console(file=StringIO(), record=True)
        >>> RichConsoleChannel(console=console).deliver(record)
        >>> 'app.INFO: msg' in console.export_text()
        True
        """
        style = "" if self._no_color else self._style_map.get(record.severity, "")
        self._console.print(record.formatted, style=style, highlight=False, markup=False, soft_wrap=True)


__all__ = ["RichConsoleChannel"]
