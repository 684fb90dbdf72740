from __future__ import annotations

import logging
import sys

import pytest

from lib_log_prefix.adapters.null import NullSink
from lib_log_prefix.adapters.stdlib import StdlibLoggerSink
from lib_log_prefix.domain.levels import LogLevel
from lib_log_prefix.logger import PrefixedLogger, new_log_wrapper


def test_lines_reach_the_stdlib_logger_with_call_site(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="tests.stdlib")
    sink = StdlibLoggerSink("tests.stdlib", LogLevel.WARNING)
    logger = PrefixedLogger(sink, "svc", LogLevel.DEBUG)

    lineno = sys._getframe().f_lineno + 1
    logger.fork("db").debug("connected")

    [record] = caplog.records
    assert record.name == "tests.stdlib"
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "svc: db: connected"
    assert record.filename == "test_stdlib_adapter.py"
    assert record.lineno == lineno


def test_trailing_newline_is_stripped(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="tests.stdlib.newline")
    StdlibLoggerSink(logging.getLogger("tests.stdlib.newline")).output(1, "line\n")

    assert caplog.records[0].getMessage() == "line"


@pytest.mark.parametrize(
    "python_level, expected",
    [
        (logging.ERROR, LogLevel.ERROR),
        (logging.INFO, LogLevel.INFO),
        (5, LogLevel.TRACE),
    ],
)
def test_sink_level_follows_effective_logger_level(python_level: int, expected: LogLevel) -> None:
    stdlib_logger = logging.getLogger(f"tests.stdlib.level.{python_level}")
    stdlib_logger.setLevel(python_level)
    sink = StdlibLoggerSink(stdlib_logger)

    assert sink.logger is stdlib_logger
    assert sink.get_log_level() is expected
    assert new_log_wrapper(sink, "x", LogLevel.TRACE).get_log_level() is expected


def test_trace_level_name_is_registered() -> None:
    assert logging.getLevelName(5) == "TRACE"


def test_null_sink_discards_and_reports_fatal() -> None:
    sink = NullSink()
    sink.output(1, "gone")

    assert sink.get_log_level() is LogLevel.FATAL
    assert new_log_wrapper(sink, "", LogLevel.TRACE).get_log_level() is LogLevel.FATAL
