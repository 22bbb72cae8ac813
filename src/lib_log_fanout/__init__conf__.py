"""Static package metadata surfaced by the CLI banner.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from collections.abc import Callable

name = "lib_log_fanout"
title = "Severity-filtered log fan-out with SMS alerting"
version = "0.1.0"
shell_command = "lib_log_fanout"

LAYOUT_WIDTH = 13


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner line by line.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_fanout:\\n'
    """

    fields = [("name", name), ("title", title), ("version", version), ("shell_command", shell_command)]
    emit = writer or (lambda text: print(text, end=""))
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{LAYOUT_WIDTH}} = {value}\n")


__all__ = ["name", "print_info", "shell_command", "title", "version"]
