"""Construction façade for root prefixed loggers.

Purpose
-------
Expose the stable entry points host applications use to obtain a root logger:
``new`` (keyword refinements over a :class:`LoggerConfig`), ``new_with_config``
and ``new_log_wrapper``, plus the process-wide ``nil_logger``.

System Role
-----------
Composition root: chooses the terminal sink (caller-supplied, or a
:class:`RichConsoleSink` on the configured stream) and hands it to the logger
core. Nothing below this layer touches streams or configuration.
"""

from __future__ import annotations

from typing import Any

from lib_log_prefix.adapters.console import RichConsoleSink
from lib_log_prefix.application.ports.sink import RawSink
from lib_log_prefix.domain.config import LoggerConfig
from lib_log_prefix.logger import PrefixedLogger, new_log_wrapper

from ._state import NULL_SINK, nil_logger


def build_sink(config: LoggerConfig) -> RawSink:
    """Return the sink described by ``config``.

    A caller-supplied sink wins; otherwise a :class:`RichConsoleSink` writes to
    ``config.stream`` (standard error when unset) using ``config.flags``.
    """
    if config.sink is not None:
        return config.sink
    return RichConsoleSink(config.stream, flags=config.flags)


def new_with_config(config: LoggerConfig) -> PrefixedLogger:
    """Build a root logger from ``config``."""

    return new_log_wrapper(build_sink(config), config.prefix, config.log_level)


def new(config: LoggerConfig | None = None, **changes: Any) -> PrefixedLogger:
    """Build a root logger from ``config`` refined by keyword ``changes``.

    Parameters
    ----------
    config:
        Base options; defaults to :class:`LoggerConfig` defaults (no prefix,
        ``WARNING``, date and time header on standard error).
    **changes:
        Field overrides applied with :meth:`LoggerConfig.refine`, e.g.
        ``prefix="server"``, ``log_level="debug"``, ``stream=handle`` or
        ``sink=other_logger``.

    Examples
    --------
    >>> from io import StringIO
    >>> from lib_log_prefix.domain.config import LogFlags
    >>> buffer = StringIO()
    >>> log = new(stream=buffer, flags=LogFlags.NONE, prefix="svc", log_level="info")
    >>> log.fork("db").info("connected")
    >>> buffer.getvalue()
    'svc: db: connected\\n'
    """
    base = config if config is not None else LoggerConfig()
    if changes:
        base = base.refine(**changes)
    return new_with_config(base)


__all__ = [
    "NULL_SINK",
    "build_sink",
    "new",
    "new_log_wrapper",
    "new_with_config",
    "nil_logger",
]
