from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_log_prefix.application.ports.sink import LevelQuery, RawSink
from lib_log_prefix.domain.levels import LogLevel


class RecordingSink(RawSink):
    """Collect written lines and the call depth each arrived with."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.calldepths: list[int] = []

    def output(self, calldepth: int, text: str) -> None:
        self.lines.append(text)
        self.calldepths.append(calldepth)


class LeveledRecordingSink(RecordingSink, LevelQuery):
    def __init__(self, level: LogLevel) -> None:
        super().__init__()
        self.level = level

    def get_log_level(self) -> LogLevel:
        return self.level


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def leveled_sink():
    """Factory fixture building sinks that report a threshold."""

    return LeveledRecordingSink


@pytest.fixture
def buffered_console() -> Console:
    return Console(file=StringIO(), markup=False, emoji=False, highlight=False, width=200)
