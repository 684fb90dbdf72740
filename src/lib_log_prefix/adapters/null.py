"""Sink that discards every line."""

from __future__ import annotations

from lib_log_prefix.application.ports.sink import LevelQuery, RawSink
from lib_log_prefix.domain.levels import LogLevel


class NullSink(RawSink, LevelQuery):
    """Swallow output and advertise ``FATAL`` so wrappers skip formatting."""

    def output(self, calldepth: int, text: str) -> None:
        return None

    def get_log_level(self) -> LogLevel:
        return LogLevel.FATAL


__all__ = ["NullSink"]
