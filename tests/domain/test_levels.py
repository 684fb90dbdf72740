from __future__ import annotations

import logging

import pytest

from lib_log_prefix.domain.errors import UnknownLogLevelError
from lib_log_prefix.domain.levels import (
    LogLevel,
    coerce_level,
    level_to_name,
    name_to_level,
    parse_level,
)

OPERATIONAL_LEVELS = [level for level in LogLevel if level is not LogLevel.UNKNOWN]


def test_levels_are_ordered_from_most_to_least_severe() -> None:
    assert LogLevel.PANIC < LogLevel.FATAL < LogLevel.ERROR < LogLevel.WARNING < LogLevel.INFO < LogLevel.DEBUG < LogLevel.TRACE
    assert LogLevel.UNKNOWN < LogLevel.PANIC


@pytest.mark.parametrize(
    "name, expected",
    [
        ("panic", LogLevel.PANIC),
        ("FATAL", LogLevel.FATAL),
        ("Error", LogLevel.ERROR),
        ("warning", LogLevel.WARNING),
        ("INFO", LogLevel.INFO),
        ("debug", LogLevel.DEBUG),
        ("TrAcE", LogLevel.TRACE),
        ("unknown", LogLevel.UNKNOWN),
    ],
)
def test_name_to_level_is_case_insensitive(name: str, expected: LogLevel) -> None:
    assert name_to_level(name) is expected


@pytest.mark.parametrize("name", ["BOGUS", "", "warn", "critical", " debug ", "info\n", None, 3])
def test_name_to_level_maps_unrecognised_input_to_unknown(name: object) -> None:
    assert name_to_level(name) is LogLevel.UNKNOWN  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.UNKNOWN, "unknown"),
        (LogLevel.PANIC, "panic"),
        (LogLevel.WARNING, "warning"),
        (LogLevel.TRACE, "trace"),
        (4, "warning"),
        (-1, "unknown"),
        (8, "unknown"),
        (1000, "unknown"),
    ],
)
def test_level_to_name_clamps_out_of_range_values(level: int, expected: str) -> None:
    assert level_to_name(level) == expected


def test_parse_level_rejects_unknown_names_with_the_offending_string() -> None:
    with pytest.raises(UnknownLogLevelError, match="BOGUS") as excinfo:
        parse_level("BOGUS")

    assert excinfo.value.name == "BOGUS"
    assert isinstance(excinfo.value, ValueError)


def test_parse_level_rejects_the_unknown_sentinel_name() -> None:
    with pytest.raises(UnknownLogLevelError):
        parse_level("unknown")


@pytest.mark.parametrize("level", OPERATIONAL_LEVELS)
def test_parse_level_round_trips_canonical_names(level: LogLevel) -> None:
    assert parse_level(level_to_name(level)) is level
    assert LogLevel.from_name(level.severity.upper()) is level


@pytest.mark.parametrize(
    "value, expected",
    [
        (LogLevel.DEBUG, LogLevel.DEBUG),
        ("Info", LogLevel.INFO),
        (3, LogLevel.ERROR),
    ],
)
def test_coerce_level_accepts_names_numbers_and_members(value: object, expected: LogLevel) -> None:
    assert coerce_level(value) is expected  # type: ignore[arg-type]


@pytest.mark.parametrize("value", ["loud", 99, -3])
def test_coerce_level_rejects_unknown_values(value: object) -> None:
    with pytest.raises(UnknownLogLevelError):
        coerce_level(value)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "level, python_level",
    [
        (LogLevel.PANIC, logging.CRITICAL),
        (LogLevel.FATAL, logging.CRITICAL),
        (LogLevel.ERROR, logging.ERROR),
        (LogLevel.WARNING, logging.WARNING),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.TRACE, 5),
    ],
)
def test_to_python_level_matches_logging_constants(level: LogLevel, python_level: int) -> None:
    assert level.to_python_level() == python_level


@pytest.mark.parametrize(
    "python_level, expected",
    [
        (logging.CRITICAL, LogLevel.FATAL),
        (logging.ERROR, LogLevel.ERROR),
        (logging.WARNING, LogLevel.WARNING),
        (25, LogLevel.INFO),
        (logging.DEBUG, LogLevel.DEBUG),
        (5, LogLevel.TRACE),
        (logging.NOTSET, LogLevel.TRACE),
    ],
)
def test_from_python_level_picks_the_nearest_level(python_level: int, expected: LogLevel) -> None:
    assert LogLevel.from_python_level(python_level) is expected
