"""Immutable construction options for root prefixed loggers.

Purpose
-------
Capture everything :func:`lib_log_prefix.runtime.new` needs to build a root
logger: the initial prefix, the initial threshold and the output destination,
plus the header flags of the default terminal sink.

Contents
--------
* :class:`LogFlags` – header rendering switches for the default sink.
* :class:`LoggerConfig` – frozen options object with refinement helpers.

System Role
-----------
Domain value object; environment parsing lives in :mod:`lib_log_prefix.config`
and sink construction in :mod:`lib_log_prefix.runtime`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntFlag
from typing import TYPE_CHECKING, Any, TextIO

from .levels import LogLevel, coerce_level

if TYPE_CHECKING:  # pragma: no cover - typing only
    from lib_log_prefix.application.ports.sink import RawSink


class LogFlags(IntFlag):
    """Header fields rendered by the default terminal sink."""

    NONE = 0
    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    LONGFILE = 8
    SHORTFILE = 16
    UTC = 32
    MSGPREFIX = 64


DEFAULT_FLAGS = LogFlags.DATE | LogFlags.TIME
DEFAULT_LOG_LEVEL = LogLevel.WARNING


@dataclass(slots=True, frozen=True)
class LoggerConfig:
    """Options for building a root logger.

    Attributes
    ----------
    prefix:
        Label of the root logger; empty by default.
    log_level:
        Initial threshold, ``WARNING`` by default. Names and numbers are
        coerced on construction.
    flags:
        Header flags for the default sink. Ignored when ``sink`` is supplied.
    sink:
        Caller-supplied downstream sink. Mutually exclusive with ``stream``.
    stream:
        Text stream for the default sink; ``None`` means standard error.

    Examples
    --------
    >>> cfg = LoggerConfig(log_level="debug").without_flags(LogFlags.DATE)
    >>> cfg.log_level is LogLevel.DEBUG, cfg.flags is LogFlags.TIME
    (True, True)
    """

    prefix: str = ""
    log_level: LogLevel = DEFAULT_LOG_LEVEL
    flags: LogFlags = DEFAULT_FLAGS
    sink: RawSink | None = None
    stream: TextIO | None = None

    def __post_init__(self) -> None:
        if self.sink is not None and self.stream is not None:
            raise ValueError("sink and stream are mutually exclusive")
        object.__setattr__(self, "log_level", coerce_level(self.log_level))
        object.__setattr__(self, "flags", LogFlags(self.flags))

    def refine(self, **changes: Any) -> "LoggerConfig":
        """Return a copy with ``changes`` applied in keyword order.

        Setting ``sink`` clears ``stream`` and vice versa, so the last of the
        two destinations wins.
        """
        values: dict[str, Any] = {}
        for key, value in changes.items():
            values[key] = value
            if key == "sink" and value is not None:
                values["stream"] = None
            elif key == "stream" and value is not None:
                values["sink"] = None
        return replace(self, **values)

    def with_flags(self, flags: LogFlags | int) -> "LoggerConfig":
        """Return a copy with ``flags`` added to the existing flags."""

        return self.refine(flags=self.flags | flags)

    def without_flags(self, flags: LogFlags | int) -> "LoggerConfig":
        """Return a copy with ``flags`` removed from the existing flags."""

        return self.refine(flags=self.flags & ~LogFlags(flags))

    def replace_flags(self, flags: LogFlags | int) -> "LoggerConfig":
        return self.refine(flags=flags)

    def clear_flags(self) -> "LoggerConfig":
        return self.refine(flags=LogFlags.NONE)


__all__ = ["DEFAULT_FLAGS", "DEFAULT_LOG_LEVEL", "LogFlags", "LoggerConfig"]
