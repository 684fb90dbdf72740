"""Environment-driven configuration helpers.

Purpose
-------
Translate ``LOG_*`` environment variables (optionally loaded from a nearby
``.env`` file) into :class:`LoggerConfig` values, so deployments can adjust
verbosity and header layout without code changes.

Contents
--------
* :func:`config_from_env` – overlay environment values onto a base config.
* :func:`should_use_dotenv` / :func:`enable_dotenv` – opt-in ``.env`` loading.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from lib_log_prefix.domain.config import LogFlags, LoggerConfig
from lib_log_prefix.domain.levels import parse_level

DOTENV_ENV_VAR = "LOG_USE_DOTENV"
"""Environment toggle asking entry points to load the nearest ``.env``."""

_TRUTHY = {"1", "true", "yes", "on"}

_FLAG_VARIABLES: tuple[tuple[str, LogFlags], ...] = (
    ("LOG_DATE", LogFlags.DATE),
    ("LOG_TIME", LogFlags.TIME),
    ("LOG_MICROSECONDS", LogFlags.MICROSECONDS),
    ("LOG_UTC", LogFlags.UTC),
    ("LOG_LONGFILE", LogFlags.LONGFILE),
    ("LOG_SHORTFILE", LogFlags.SHORTFILE),
)

_DOTENV_LOADED: Path | None = None


def _env_bool(value: str | None, default: bool) -> bool:
    """Interpret ``1/true/yes/on`` strings; ``None`` or blank keeps ``default``.

    Examples
    --------
    >>> _env_bool("Yes", False), _env_bool("0", True), _env_bool(None, True)
    (True, False, True)
    """
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def config_from_env(base: LoggerConfig | None = None, environ: Mapping[str, str] | None = None) -> LoggerConfig:
    """Return ``base`` with ``LOG_*`` environment overrides applied.

    Recognised variables: ``LOG_LEVEL`` (severity name, surrounding whitespace
    ignored), ``LOG_PREFIX`` and the boolean header switches ``LOG_DATE``,
    ``LOG_TIME``, ``LOG_MICROSECONDS``, ``LOG_UTC``, ``LOG_LONGFILE`` and
    ``LOG_SHORTFILE``.

    Raises
    ------
    UnknownLogLevelError
        When ``LOG_LEVEL`` is set to an unrecognised name.

    Examples
    --------
    >>> cfg = config_from_env(environ={"LOG_LEVEL": "Debug", "LOG_DATE": "off"})
    >>> cfg.log_level.severity, cfg.flags is LogFlags.TIME
    ('debug', True)
    """
    config = base if base is not None else LoggerConfig()
    env = os.environ if environ is None else environ

    changes: dict[str, object] = {}
    level_name = (env.get("LOG_LEVEL") or "").strip()
    if level_name:
        changes["log_level"] = parse_level(level_name)
    prefix = env.get("LOG_PREFIX")
    if prefix is not None:
        changes["prefix"] = prefix

    flags = config.flags
    for variable, flag in _FLAG_VARIABLES:
        if _env_bool(env.get(variable), default=bool(flags & flag)):
            flags |= flag
        else:
            flags &= ~flag
    if flags != config.flags:
        changes["flags"] = flags

    return config.refine(**changes) if changes else config


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether to load ``.env``: an explicit flag beats the environment toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="on")
    True
    """
    if explicit is not None:
        return explicit
    return _env_bool(env_value, default=False)


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` into ``os.environ`` without overriding existing values.

    The search walks upward from ``search_from`` (default: the working
    directory). Only the first successful load per process has an effect.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED

    if search_from is None:
        found = find_dotenv(usecwd=True)
    else:
        found = _find_upwards(Path(search_from))
    if not found:
        return None

    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_LOADED = path
    return path


def _find_upwards(start: Path) -> str:
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return str(candidate)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "DOTENV_ENV_VAR",
    "config_from_env",
    "enable_dotenv",
    "should_use_dotenv",
]
