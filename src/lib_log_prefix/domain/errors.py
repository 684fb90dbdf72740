"""Exception types raised or returned by prefixed loggers."""

from __future__ import annotations


class UnknownLogLevelError(ValueError):
    """Raised when a level name does not match any operational severity."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown log level: {name!r}")


class LogError(Exception):
    """Error value built by the ``*_exc`` family; its text carries the logger prefix."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class LogPanic(RuntimeError):
    """Unrecoverable condition raised after a ``PANIC`` level message.

    Entry points and test harnesses catch it explicitly; it is never returned
    as a value.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


__all__ = ["LogError", "LogPanic", "UnknownLogLevelError"]
