"""Concrete sinks plugged into prefixed loggers."""

from __future__ import annotations

from .console import RichConsoleSink, SystemClock
from .null import NullSink
from .stdlib import StdlibLoggerSink

__all__ = ["NullSink", "RichConsoleSink", "StdlibLoggerSink", "SystemClock"]
