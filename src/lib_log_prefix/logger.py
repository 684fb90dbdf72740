"""Leveled logger that annotates every line with a chain of component labels.

Purpose
-------
Let objects carry a logger that knows *who* is speaking. A root logger wraps a
sink; :meth:`PrefixedLogger.fork` derives a child whose prefix extends the
parent's (``"server: conn 3"``) and whose threshold never exceeds what the
sink passes through.

Contents
--------
* :class:`PrefixedLogger` – gate, format and emit family plus forking.
* :func:`new_log_wrapper` – wrap any sink, clamping the threshold to the sink.

System Role
-----------
Core of the package. Forks are flat: a child references the *same sink* as the
node it was forked from and stores the fully composed prefix, so a line reaches
the terminal sink in one hop. Explicitly wrapping a logger with
:func:`new_log_wrapper` (or ``new(sink=logger)``) is the only way to chain.

Call depth
----------
Methods prefixed ``cd_`` take ``calldepth`` where ``1`` is the immediate caller
of that method. Each layer adds one before handing off, so terminal sinks can
report the original call site.
"""

from __future__ import annotations

from typing import Any

from lib_log_prefix.application.ports.sink import LevelQuery, RawSink
from lib_log_prefix.domain.config import DEFAULT_LOG_LEVEL
from lib_log_prefix.domain.errors import LogError, LogPanic
from lib_log_prefix.domain.levels import LogLevel, coerce_level

Level = LogLevel | int


def _join(args: tuple[Any, ...]) -> str:
    # print() semantics: one space between every pair of arguments
    return " ".join(str(arg) for arg in args)


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    """Apply ``fmt % args``; a template that does not fit its arguments is kept with the arguments appended.

    Examples
    --------
    >>> _format("count %d", (3,))
    'count 3'
    >>> _format("count %d", ("x",))
    "count %d %!(BADFORMAT 'x')"
    """
    if not args:
        return str(fmt)
    try:
        return str(fmt) % args
    except (TypeError, ValueError, KeyError):
        return f"{fmt} %!(BADFORMAT {', '.join(repr(arg) for arg in args)})"


def _clamp_to_sink(sink: RawSink, log_level: LogLevel) -> LogLevel:
    """Limit ``log_level`` to the sink's own threshold when the sink reports one."""

    if log_level > LogLevel.FATAL and isinstance(sink, LevelQuery):
        sink_level = sink.get_log_level()
        if sink_level < log_level:
            return LogLevel(sink_level)
    return log_level


def new_log_wrapper(sink: RawSink, prefix: str = "", log_level: Level = DEFAULT_LOG_LEVEL) -> "PrefixedLogger":
    """Wrap ``sink`` in a :class:`PrefixedLogger` with ``prefix`` and ``log_level``.

    The threshold is clamped to the sink's level when the sink implements
    :class:`LevelQuery`; the sink filters on its own anyway, so the clamp only
    saves formatting work. Later changes to the sink's level are not tracked.

    Examples
    --------
    >>> from lib_log_prefix.adapters.null import NullSink
    >>> new_log_wrapper(NullSink(), "svc", LogLevel.TRACE).get_log_level() is LogLevel.FATAL
    True
    """
    level = _clamp_to_sink(sink, coerce_level(log_level))
    return PrefixedLogger(sink, prefix, level)


class PrefixedLogger(RawSink, LevelQuery):
    """Severity-filtered logger adding a composed prefix to each record.

    Attributes
    ----------
    prefix:
        Every inherited label joined with ``": "``; empty at the root.
    sink:
        Downstream writer shared with every fork of this node.

    The threshold is the only mutable state. Lower :class:`LogLevel` values are
    more severe; a record is written when ``level <= threshold``, and ``FATAL``
    and ``PANIC`` are always written before exiting or raising.
    """

    def __init__(self, sink: RawSink, prefix: str = "", log_level: Level = DEFAULT_LOG_LEVEL) -> None:
        self._sink = sink
        self._prefix = prefix
        # prefix with the ": " separator, or "" at the root
        self._display_prefix = f"{prefix}: " if prefix else ""
        self._log_level = coerce_level(log_level)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={self._prefix!r}, log_level={self._log_level.severity!r})"

    @property
    def prefix(self) -> str:
        """Composed prefix without the trailing ``": "``."""

        return self._prefix

    @property
    def sink(self) -> RawSink:
        return self._sink

    def get_log_level(self) -> LogLevel:
        return self._log_level

    def set_log_level(self, log_level: Level) -> None:
        """Replace this node's threshold; forks made earlier keep theirs."""

        self._log_level = coerce_level(log_level)

    def is_enabled_for(self, level: Level) -> bool:
        """Return ``True`` when a record at ``level`` passes the gate."""

        return level <= self._log_level or level <= LogLevel.FATAL

    # ------------------------------------------------------------------
    # Forking

    def fork_str(self, label: str) -> "PrefixedLogger":
        """Return a child whose prefix is this prefix extended by ``label``.

        Examples
        --------
        >>> from lib_log_prefix.adapters.null import NullSink
        >>> root = PrefixedLogger(NullSink())
        >>> root.fork_str("A").fork_str("B").prefix
        'A: B'
        >>> root.fork_str("A").fork_str("").prefix
        'A'
        """
        if not label:
            new_prefix = self._prefix
        elif not self._prefix:
            new_prefix = label
        else:
            new_prefix = f"{self._prefix}: {label}"
        return new_log_wrapper(self._sink, new_prefix, self._log_level)

    def fork(self, *parts: Any) -> "PrefixedLogger":
        """Fork with ``parts`` joined by single spaces as the label."""

        return self.fork_str(_join(parts))

    def forkf(self, fmt: str, *args: Any) -> "PrefixedLogger":
        """Fork with a ``%``-formatted label, e.g. ``forkf("conn %d", 3)``."""

        return self.fork_str(_format(fmt, args))

    # ------------------------------------------------------------------
    # Formatting

    def sprint(self, *args: Any) -> str:
        return self._display_prefix + _join(args)

    def sprintf(self, fmt: str, *args: Any) -> str:
        return self._display_prefix + _format(fmt, args)

    def make_error(self, *args: Any) -> LogError:
        """Return a :class:`LogError` carrying the prefixed text; nothing is written."""

        return LogError(self.sprint(*args))

    def make_errorf(self, fmt: str, *args: Any) -> LogError:
        return LogError(self.sprintf(fmt, *args))

    # ------------------------------------------------------------------
    # Unfiltered output

    def cd_raw_output(self, calldepth: int, text: str) -> None:
        """Write ``text`` to the sink without prefix or level gate."""

        self._sink.output(calldepth + 1, text)

    def raw_output(self, text: str) -> None:
        self._sink.output(2, text)

    def output(self, calldepth: int, text: str) -> None:
        """Sink entry point: add this node's prefix and forward ungated."""

        self._sink.output(calldepth + 1, self.sprint(text))

    def print(self, *args: Any) -> None:
        self.cd_raw_output(2, self.sprint(*args))

    def printf(self, fmt: str, *args: Any) -> None:
        self.cd_raw_output(2, self.sprintf(fmt, *args))

    # ------------------------------------------------------------------
    # Gated output

    def cd_log_str_no_prefix(self, calldepth: int, level: Level, text: str) -> None:
        """Write ``text`` verbatim if ``level`` passes the gate.

        After the write attempt ``FATAL`` raises ``SystemExit(1)`` and ``PANIC``
        raises :class:`LogPanic`, even when the sink raised. ``UNKNOWN`` passes
        the gate but is never written.
        """
        if not self.is_enabled_for(level):
            return
        try:
            if level >= LogLevel.PANIC:
                self._sink.output(calldepth + 1, text)
        finally:
            if level == LogLevel.FATAL:
                raise SystemExit(1)
            if level == LogLevel.PANIC:
                raise LogPanic(text)

    def cd_log_no_prefix(self, calldepth: int, level: Level, *args: Any) -> None:
        if self.is_enabled_for(level):
            self.cd_log_str_no_prefix(calldepth + 1, level, _join(args))

    def cd_logf_no_prefix(self, calldepth: int, level: Level, fmt: str, *args: Any) -> None:
        if self.is_enabled_for(level):
            self.cd_log_str_no_prefix(calldepth + 1, level, _format(fmt, args))

    def cd_log(self, calldepth: int, level: Level, *args: Any) -> None:
        if self.is_enabled_for(level):
            self.cd_log_str_no_prefix(calldepth + 1, level, self.sprint(*args))

    def cd_logf(self, calldepth: int, level: Level, fmt: str, *args: Any) -> None:
        if self.is_enabled_for(level):
            self.cd_log_str_no_prefix(calldepth + 1, level, self.sprintf(fmt, *args))

    def log_str_no_prefix(self, level: Level, text: str) -> None:
        self.cd_log_str_no_prefix(2, level, text)

    def log_no_prefix(self, level: Level, *args: Any) -> None:
        """Gate and write ``args`` without adding this node's prefix."""

        self.cd_log_no_prefix(2, level, *args)

    def logf_no_prefix(self, level: Level, fmt: str, *args: Any) -> None:
        self.cd_logf_no_prefix(2, level, fmt, *args)

    def log(self, level: Level, *args: Any) -> None:
        """Gate, prefix and write ``args``.

        Arguments are rendered with ``str`` and separated by single spaces, the
        way :func:`print` does, so ``log(INFO, "n=", 3)`` writes ``n= 3``. Use
        :meth:`logf` for exact layouts.
        """

        self.cd_log(2, level, *args)

    def logf(self, level: Level, fmt: str, *args: Any) -> None:
        """Gate, prefix and write ``fmt % args``."""

        self.cd_logf(2, level, fmt, *args)

    # ------------------------------------------------------------------
    # Error values

    def cd_log_error(self, calldepth: int, level: Level, *args: Any) -> LogError:
        text = self.sprint(*args)
        self.cd_log_str_no_prefix(calldepth + 1, level, text)
        return LogError(text)

    def cd_log_errorf(self, calldepth: int, level: Level, fmt: str, *args: Any) -> LogError:
        text = self.sprintf(fmt, *args)
        self.cd_log_str_no_prefix(calldepth + 1, level, text)
        return LogError(text)

    def log_error(self, level: Level, *args: Any) -> LogError:
        """Log at ``level`` when enabled and always return the prefixed :class:`LogError`."""

        return self.cd_log_error(2, level, *args)

    def log_errorf(self, level: Level, fmt: str, *args: Any) -> LogError:
        return self.cd_log_errorf(2, level, fmt, *args)

    # ------------------------------------------------------------------
    # Process-terminating levels

    def panic(self, *args: Any) -> None:
        """Write at ``PANIC`` and raise :class:`LogPanic`; never returns."""

        self.cd_log(2, LogLevel.PANIC, *args)

    def panicf(self, fmt: str, *args: Any) -> None:
        self.cd_logf(2, LogLevel.PANIC, fmt, *args)

    def panic_on_error(self, err: BaseException | None) -> None:
        """Do nothing for ``None``; otherwise panic with ``str(err)``."""

        if err is not None:
            self.cd_log(2, LogLevel.PANIC, err)

    def fatal(self, *args: Any) -> None:
        """Write at ``FATAL`` and raise ``SystemExit(1)``; never returns."""

        self.cd_log(2, LogLevel.FATAL, *args)

    def fatalf(self, fmt: str, *args: Any) -> None:
        self.cd_logf(2, LogLevel.FATAL, fmt, *args)

    # ------------------------------------------------------------------
    # Per-level shortcuts

    def error(self, *args: Any) -> None:
        self.cd_log(2, LogLevel.ERROR, *args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self.cd_logf(2, LogLevel.ERROR, fmt, *args)

    def warning(self, *args: Any) -> None:
        self.cd_log(2, LogLevel.WARNING, *args)

    def warningf(self, fmt: str, *args: Any) -> None:
        self.cd_logf(2, LogLevel.WARNING, fmt, *args)

    def info(self, *args: Any) -> None:
        self.cd_log(2, LogLevel.INFO, *args)

    def infof(self, fmt: str, *args: Any) -> None:
        self.cd_logf(2, LogLevel.INFO, fmt, *args)

    def debug(self, *args: Any) -> None:
        self.cd_log(2, LogLevel.DEBUG, *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self.cd_logf(2, LogLevel.DEBUG, fmt, *args)

    def trace(self, *args: Any) -> None:
        self.cd_log(2, LogLevel.TRACE, *args)

    def tracef(self, fmt: str, *args: Any) -> None:
        self.cd_logf(2, LogLevel.TRACE, fmt, *args)

    # Log and return the error value.

    def error_exc(self, *args: Any) -> LogError:
        return self.cd_log_error(2, LogLevel.ERROR, *args)

    def errorf_exc(self, fmt: str, *args: Any) -> LogError:
        return self.cd_log_errorf(2, LogLevel.ERROR, fmt, *args)

    def warning_exc(self, *args: Any) -> LogError:
        return self.cd_log_error(2, LogLevel.WARNING, *args)

    def warningf_exc(self, fmt: str, *args: Any) -> LogError:
        return self.cd_log_errorf(2, LogLevel.WARNING, fmt, *args)

    def info_exc(self, *args: Any) -> LogError:
        return self.cd_log_error(2, LogLevel.INFO, *args)

    def infof_exc(self, fmt: str, *args: Any) -> LogError:
        return self.cd_log_errorf(2, LogLevel.INFO, fmt, *args)

    def debug_exc(self, *args: Any) -> LogError:
        return self.cd_log_error(2, LogLevel.DEBUG, *args)

    def debugf_exc(self, fmt: str, *args: Any) -> LogError:
        return self.cd_log_errorf(2, LogLevel.DEBUG, fmt, *args)

    def trace_exc(self, *args: Any) -> LogError:
        return self.cd_log_error(2, LogLevel.TRACE, *args)

    def tracef_exc(self, fmt: str, *args: Any) -> LogError:
        return self.cd_log_errorf(2, LogLevel.TRACE, fmt, *args)


__all__ = ["PrefixedLogger", "new_log_wrapper"]
