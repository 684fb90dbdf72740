"""Protocols describing the downstream sink boundary."""

from __future__ import annotations

from .sink import LevelQuery, RawSink
from .time import ClockPort

__all__ = ["ClockPort", "LevelQuery", "RawSink"]
