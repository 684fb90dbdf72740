from __future__ import annotations

from io import StringIO

import pytest

from lib_log_prefix.adapters.null import NullSink
from lib_log_prefix.domain.config import DEFAULT_FLAGS, LogFlags, LoggerConfig
from lib_log_prefix.domain.errors import UnknownLogLevelError
from lib_log_prefix.domain.levels import LogLevel


def test_defaults_match_documented_options() -> None:
    config = LoggerConfig()

    assert config.prefix == ""
    assert config.log_level is LogLevel.WARNING
    assert config.flags == LogFlags.DATE | LogFlags.TIME == DEFAULT_FLAGS
    assert config.sink is None
    assert config.stream is None


def test_log_level_names_are_coerced() -> None:
    assert LoggerConfig(log_level="TRACE").log_level is LogLevel.TRACE


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(UnknownLogLevelError):
        LoggerConfig(log_level="chatty")


def test_sink_and_stream_cannot_both_be_set_directly() -> None:
    with pytest.raises(ValueError, match="mutually exclusive"):
        LoggerConfig(sink=NullSink(), stream=StringIO())


def test_refine_keeps_the_last_destination() -> None:
    sink = NullSink()
    stream = StringIO()

    stream_last = LoggerConfig().refine(sink=sink, stream=stream)
    sink_last = LoggerConfig().refine(stream=stream, sink=sink)

    assert stream_last.stream is stream and stream_last.sink is None
    assert sink_last.sink is sink and sink_last.stream is None


def test_refine_returns_a_new_object() -> None:
    base = LoggerConfig()
    refined = base.refine(prefix="svc")

    assert refined.prefix == "svc"
    assert base.prefix == ""


def test_flag_helpers_add_remove_replace_and_clear() -> None:
    config = LoggerConfig()

    assert config.with_flags(LogFlags.UTC).flags == DEFAULT_FLAGS | LogFlags.UTC
    assert config.without_flags(LogFlags.DATE).flags == LogFlags.TIME
    assert config.replace_flags(LogFlags.SHORTFILE).flags == LogFlags.SHORTFILE
    assert config.clear_flags().flags == LogFlags.NONE
