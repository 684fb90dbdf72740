"""Domain value objects: severities, errors and construction options."""

from __future__ import annotations

from .config import DEFAULT_FLAGS, DEFAULT_LOG_LEVEL, LogFlags, LoggerConfig
from .errors import LogError, LogPanic, UnknownLogLevelError
from .levels import LogLevel, coerce_level, level_to_name, name_to_level, parse_level

__all__ = [
    "DEFAULT_FLAGS",
    "DEFAULT_LOG_LEVEL",
    "LogError",
    "LogFlags",
    "LogLevel",
    "LogPanic",
    "LoggerConfig",
    "UnknownLogLevelError",
    "coerce_level",
    "level_to_name",
    "name_to_level",
    "parse_level",
]
