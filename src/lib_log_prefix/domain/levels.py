"""Severity levels with name lookup and stdlib bridging.

Purpose
-------
Provide the closed, totally ordered set of severities used by every prefixed
logger. Lower values are more severe, so a threshold admits a level when
``level <= threshold``.

Contents
--------
* :class:`LogLevel` enum with conversion helpers.
* :func:`name_to_level`, :func:`level_to_name`, :func:`parse_level` and
  :func:`coerce_level` – the lookup functions used by configuration and CLI
  parsing.

System Role
-----------
Pure domain table; shared by the logger core, the sink adapters and the
configuration layer.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from .errors import UnknownLogLevelError


class LogLevel(IntEnum):
    """Enumerated logging levels ordered from most to least severe."""

    UNKNOWN = 0
    PANIC = 1
    FATAL = 2
    ERROR = 3
    WARNING = 4
    INFO = 5
    DEBUG = 6
    TRACE = 7

    @property
    def severity(self) -> str:
        """Return the canonical lowercase level name."""

        return self.name.lower()

    def to_python_level(self) -> int:
        """Return the :mod:`logging` number matching this level."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Return the level called ``name`` or raise :class:`UnknownLogLevelError`."""

        return parse_level(name)

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging number into the nearest :class:`LogLevel`.

        Examples
        --------
        >>> LogLevel.from_python_level(logging.WARNING) is LogLevel.WARNING
        True
        >>> LogLevel.from_python_level(logging.NOTSET) is LogLevel.TRACE
        True
        """
        if level >= logging.CRITICAL:
            return cls.FATAL
        if level >= logging.ERROR:
            return cls.ERROR
        if level >= logging.WARNING:
            return cls.WARNING
        if level >= logging.INFO:
            return cls.INFO
        if level >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


TRACE_PYTHON_LEVEL = 5
"""Numeric :mod:`logging` level used for :attr:`LogLevel.TRACE`."""

_PYTHON_LEVELS = {
    LogLevel.UNKNOWN: logging.NOTSET,
    LogLevel.PANIC: logging.CRITICAL,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: TRACE_PYTHON_LEVEL,
}

_NAME_TO_LEVEL = {level.severity: level for level in LogLevel}


def name_to_level(name: str) -> LogLevel:
    """Return the level called ``name``; unrecognised input yields ``UNKNOWN``.

    Examples
    --------
    >>> name_to_level("Debug") is LogLevel.DEBUG
    True
    >>> name_to_level("bogus") is LogLevel.UNKNOWN
    True
    """
    if not isinstance(name, str):
        return LogLevel.UNKNOWN
    return _NAME_TO_LEVEL.get(name.lower(), LogLevel.UNKNOWN)


def level_to_name(level: int) -> str:
    """Return the lowercase name of ``level``; out-of-range values map to ``"unknown"``.

    Examples
    --------
    >>> level_to_name(LogLevel.TRACE)
    'trace'
    >>> level_to_name(42)
    'unknown'
    """
    try:
        return LogLevel(level).severity
    except ValueError:
        return LogLevel.UNKNOWN.severity


def parse_level(name: str) -> LogLevel:
    """Return the level called ``name`` or raise :class:`UnknownLogLevelError`."""

    level = name_to_level(name)
    if level is LogLevel.UNKNOWN:
        raise UnknownLogLevelError(name)
    return level


def coerce_level(level: str | int | LogLevel) -> LogLevel:
    """Normalise configuration input (name, number or enum) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warning") is LogLevel.WARNING
    True
    >>> coerce_level(6) is LogLevel.DEBUG
    True
    """
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, int) and not isinstance(level, bool):
        try:
            return LogLevel(level)
        except ValueError as exc:
            raise UnknownLogLevelError(str(level)) from exc
    return parse_level(level)


__all__ = [
    "LogLevel",
    "TRACE_PYTHON_LEVEL",
    "coerce_level",
    "level_to_name",
    "name_to_level",
    "parse_level",
]
