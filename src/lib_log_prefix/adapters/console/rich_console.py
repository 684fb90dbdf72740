"""Rich-powered terminal sink implementing :class:`RawSink`.

Purpose
-------
Write finished log lines to a text stream (standard error by default) with an
optional header of date, time and call-site location, laid out as
``2025/09/30 12:00:00.000000 module.py:42: text``.

Contents
--------
* :class:`SystemClock` – default clock returning aware UTC timestamps.
* :class:`RichConsoleSink` – terminal sink constructed by
  :func:`lib_log_prefix.runtime.new` when no sink is supplied.

System Role
-----------
Default terminal collaborator. A :class:`rich.console.Console` resolves the
destination (following ``sys.stderr`` at write time when no stream is given);
finished lines go straight to ``console.file`` so tabs, carriage returns and
other control characters in message text are written verbatim.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from threading import Lock
from typing import TextIO

from rich.console import Console

from lib_log_prefix.application.ports.sink import RawSink
from lib_log_prefix.application.ports.time import ClockPort
from lib_log_prefix.domain.config import DEFAULT_FLAGS, LogFlags


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class RichConsoleSink(RawSink):
    """Render lines with a timestamp/location header onto a Rich console."""

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        flags: LogFlags | int = DEFAULT_FLAGS,
        prefix: str = "",
        console: Console | None = None,
        clock: ClockPort | None = None,
    ) -> None:
        """Configure the destination and header layout.

        Parameters
        ----------
        stream:
            Destination text stream. ``None`` follows ``sys.stderr``.
        flags:
            :class:`LogFlags` selecting the header fields.
        prefix:
            Sink-level prefix written at line start, or just before the text
            when :attr:`LogFlags.MSGPREFIX` is set.
        console:
            Pre-built console whose ``file`` receives the lines; overrides
            ``stream``.
        clock:
            Time source for the header; defaults to :class:`SystemClock`.
        """
        if console is not None:
            self._console = console
        elif stream is not None:
            self._console = _plain_console(file=stream)
        else:
            self._console = _plain_console(stderr=True)
        self._flags = LogFlags(flags)
        self._prefix = prefix
        self._clock = clock if clock is not None else SystemClock()
        self._lock = Lock()

    @property
    def console(self) -> Console:
        return self._console

    def flags(self) -> LogFlags:
        return self._flags

    def set_flags(self, flags: LogFlags | int) -> None:
        with self._lock:
            self._flags = LogFlags(flags)

    def output(self, calldepth: int, text: str) -> None:
        """Write ``text`` with the configured header.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> RichConsoleSink(buffer, flags=LogFlags.NONE).output(1, "ready")
        >>> buffer.getvalue()
        'ready\\n'
        """
        flags = self._flags
        location = None
        if flags & (LogFlags.LONGFILE | LogFlags.SHORTFILE):
            location = _caller_location(calldepth)
        header = self._format_header(flags, location)
        line = header + text
        if not line.endswith("\n"):
            line += "\n"
        with self._lock:
            stream = self._console.file
            stream.write(line)
            stream.flush()

    def _format_header(self, flags: LogFlags, location: tuple[str, int] | None) -> str:
        parts: list[str] = []
        if not flags & LogFlags.MSGPREFIX:
            parts.append(self._prefix)
        if flags & (LogFlags.DATE | LogFlags.TIME | LogFlags.MICROSECONDS):
            moment = self._clock.now()
            moment = moment.astimezone(timezone.utc) if flags & LogFlags.UTC else moment.astimezone()
            if flags & LogFlags.DATE:
                parts.append(f"{moment.year:04d}/{moment.month:02d}/{moment.day:02d} ")
            if flags & (LogFlags.TIME | LogFlags.MICROSECONDS):
                clock_text = f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
                if flags & LogFlags.MICROSECONDS:
                    clock_text += f".{moment.microsecond:06d}"
                parts.append(clock_text + " ")
        if location is not None:
            filename, lineno = location
            if flags & LogFlags.SHORTFILE:
                filename = os.path.basename(filename)
            parts.append(f"{filename}:{lineno}: ")
        if flags & LogFlags.MSGPREFIX:
            parts.append(self._prefix)
        return "".join(parts)


def _plain_console(**kwargs: object) -> Console:
    return Console(markup=False, emoji=False, highlight=False, soft_wrap=True, **kwargs)  # type: ignore[arg-type]


def _caller_location(depth: int) -> tuple[str, int]:
    """Return ``(filename, lineno)`` of the frame ``depth`` levels above the caller."""

    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return "???", 0
    return frame.f_code.co_filename, frame.f_lineno


__all__ = ["RichConsoleSink", "SystemClock"]
