"""Console-facing sink adapters."""

from __future__ import annotations

from .rich_console import RichConsoleSink, SystemClock

__all__ = ["RichConsoleSink", "SystemClock"]
