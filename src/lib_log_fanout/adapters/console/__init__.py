"""Console channels."""

from __future__ import annotations

from .rich_console import RichConsoleChannel

__all__ = ["RichConsoleChannel"]
