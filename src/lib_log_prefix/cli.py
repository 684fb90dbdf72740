"""Click command group exposing metadata, the level table and a demo run.

Purpose
-------
Give packaging smoke tests and operators a quick way to see the logger in
action: ``demo`` forks a handful of objects from one root logger and emits
debug lines, showing how the prefix chain composes.

Contents
--------
* :func:`cli` – the command group (``info``, ``levels``, ``demo``).
* :func:`main` – test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as log_config
from .domain.config import LogFlags, LoggerConfig
from .domain.levels import LogLevel, name_to_level
from .lib_log_prefix import summary_info
from .runtime import new

_LEVEL_CHOICES = [level.severity for level in LogLevel if level is not LogLevel.UNKNOWN]


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help="Load LOG_* variables from the nearest .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None) -> None:
    """Leveled logging with forkable component prefixes."""

    if log_config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info")
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("levels")
def cli_levels() -> None:
    """List severity names and their ordering values."""

    table = Table(title="log levels")
    table.add_column("value", justify="right")
    table.add_column("name")
    table.add_column("logging", justify="right")
    for level in LogLevel:
        table.add_row(str(int(level)), level.severity, str(level.to_python_level()))
    Console(markup=False).print(table)


@cli.command("demo")
@click.option("--level", "level_name", type=click.Choice(_LEVEL_CHOICES, case_sensitive=False), default=None, help="Threshold of the root logger (default: debug, or LOG_LEVEL).")
@click.option("--prefix", default=None, help="Label of the root logger.")
@click.option("--objects", type=click.IntRange(min=0), default=3, show_default=True, help="Number of forked objects.")
@click.option("--iterations", type=click.IntRange(min=0), default=3, show_default=True, help="Messages per object.")
@click.option("--no-date", is_flag=True, help="Omit the date from the header.")
@click.option("--no-time", is_flag=True, help="Omit the time of day from the header.")
@click.option("--utc", is_flag=True, help="Render header times in UTC.")
@click.option("--microseconds", is_flag=True, help="Render header times with microseconds.")
def cli_demo(
    level_name: str | None,
    prefix: str | None,
    objects: int,
    iterations: int,
    no_date: bool,
    no_time: bool,
    utc: bool,
    microseconds: bool,
) -> None:
    """Fork objects from a root logger and emit sample lines to stderr."""

    config = log_config.config_from_env(base=LoggerConfig(log_level=LogLevel.DEBUG))
    if level_name is not None:
        config = config.refine(log_level=name_to_level(level_name))
    if prefix is not None:
        config = config.refine(prefix=prefix)
    if no_date:
        config = config.without_flags(LogFlags.DATE)
    if no_time:
        config = config.without_flags(LogFlags.TIME)
    if utc:
        config = config.with_flags(LogFlags.UTC)
    if microseconds:
        config = config.with_flags(LogFlags.MICROSECONDS)

    root = new(config)
    root.debug("top level log entry")

    workers = [root.forkf("object %d", index) for index in range(objects)]
    if workers:
        workers.append(workers[0].forkf("object %d", 10))
    for iteration in range(iterations):
        for worker in workers:
            worker.debugf("log message %d", iteration)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group and return a process exit code.

    Examples
    --------
    >>> main(["--version"])
    0.1.0
    0
    """
    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main"]
