"""Sink port describing the terminal write contract.

Purpose
-------
Define the two capabilities a prefixed logger needs from whatever sits
downstream: writing one finished line, and optionally reporting a threshold.

Contents
--------
* :class:`RawSink` – runtime-checkable protocol with a single ``output`` method.
* :class:`LevelQuery` – optional protocol consulted when forking or wrapping.

System Role
-----------
Keeps :class:`lib_log_prefix.logger.PrefixedLogger` independent of the
adapters. A prefixed logger satisfies both protocols itself, so it can sit
downstream of another logger.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_prefix.domain.levels import LogLevel


@runtime_checkable
class RawSink(Protocol):
    """Write one finished log record."""

    def output(self, calldepth: int, text: str) -> None:
        """Write ``text`` as one record, appending a newline when missing.

        ``calldepth`` counts frames above ``output`` to the call site: ``1`` is
        the immediate caller. Sinks that render no file/line information
        ignore it. Write failures propagate as exceptions.
        """


@runtime_checkable
class LevelQuery(Protocol):
    """Report the most verbose level a sink still passes through."""

    def get_log_level(self) -> LogLevel: ...


__all__ = ["LevelQuery", "RawSink"]
