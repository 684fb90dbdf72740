"""Leveled logging façade with forkable, composable component prefixes.

Typical use::

    import lib_log_prefix as logp

    log = logp.new(prefix="server", log_level="info")
    conn = log.forkf("conn %d", 3)
    conn.info("accepted")            # "... server: conn 3: accepted"
    raise conn.error_exc("handshake failed")

The public surface re-exports the logger core, construction helpers, level
lookups and the error types.
"""

from __future__ import annotations

from .adapters import NullSink, RichConsoleSink, StdlibLoggerSink
from .application.ports import LevelQuery, RawSink
from .domain import (
    LogError,
    LogFlags,
    LogLevel,
    LogPanic,
    LoggerConfig,
    UnknownLogLevelError,
    level_to_name,
    name_to_level,
    parse_level,
)
from .lib_log_prefix import summary_info
from .logger import PrefixedLogger
from .runtime import new, new_log_wrapper, new_with_config, nil_logger

__all__ = [
    "LevelQuery",
    "LogError",
    "LogFlags",
    "LogLevel",
    "LogPanic",
    "LoggerConfig",
    "NullSink",
    "PrefixedLogger",
    "RawSink",
    "RichConsoleSink",
    "StdlibLoggerSink",
    "UnknownLogLevelError",
    "level_to_name",
    "name_to_level",
    "new",
    "new_log_wrapper",
    "new_with_config",
    "nil_logger",
    "parse_level",
    "summary_info",
]
