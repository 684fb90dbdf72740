"""Bridge forwarding finished lines into a stdlib :class:`logging.Logger`.

Hosts that already configure :mod:`logging` handlers can route prefixed
loggers through them. The sink writes every line at one fixed stdlib level and
reports the wrapped logger's effective level so forks clamp to it.
"""

from __future__ import annotations

import logging

from lib_log_prefix.application.ports.sink import LevelQuery, RawSink
from lib_log_prefix.domain.levels import TRACE_PYTHON_LEVEL, LogLevel, coerce_level

logging.addLevelName(TRACE_PYTHON_LEVEL, "TRACE")


class StdlibLoggerSink(RawSink, LevelQuery):
    """Write lines to ``logger`` at a fixed severity."""

    def __init__(self, logger: logging.Logger | str, level: str | LogLevel = LogLevel.INFO) -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger
        self._level = coerce_level(level)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def output(self, calldepth: int, text: str) -> None:
        if text.endswith("\n"):
            text = text[:-1]
        # stacklevel=1 names the frame calling ``log``, i.e. this method.
        self._logger.log(self._level.to_python_level(), text, stacklevel=calldepth + 1)

    def get_log_level(self) -> LogLevel:
        """Return the wrapped logger's effective level as a :class:`LogLevel`."""

        return LogLevel.from_python_level(self._logger.getEffectiveLevel())


__all__ = ["StdlibLoggerSink"]
