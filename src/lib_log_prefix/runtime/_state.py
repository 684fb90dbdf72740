"""Process-wide null logger and its lazy accessor."""

from __future__ import annotations

from threading import RLock

from lib_log_prefix.adapters.null import NullSink
from lib_log_prefix.domain.levels import LogLevel
from lib_log_prefix.logger import Level, PrefixedLogger


class _NilLogger(PrefixedLogger):
    """Shared discard-everything logger whose threshold cannot be changed."""

    def set_log_level(self, log_level: Level) -> None:
        return None


NULL_SINK = NullSink()
"""Shared sink that throws away its output."""

_NIL_LOGGER: PrefixedLogger | None = None
_STATE_LOCK = RLock()


def nil_logger() -> PrefixedLogger:
    """Return the process-wide logger that discards everything.

    Created on first use. ``PANIC`` and ``FATAL`` still raise, since the gate
    never suppresses them.

    Examples
    --------
    >>> nil_logger() is nil_logger()
    True
    """
    global _NIL_LOGGER
    with _STATE_LOCK:
        if _NIL_LOGGER is None:
            _NIL_LOGGER = _NilLogger(NULL_SINK, "", LogLevel.FATAL)
        return _NIL_LOGGER


__all__ = ["NULL_SINK", "nil_logger"]
