"""Click command-line interface for the log stream.

Purpose
-------
Offer a shell entry point that pipes text into a :class:`LogStream` so each
input line becomes a log record, plus the metadata banner and a priority demo.

Contents
--------
* :func:`cli` - root group handling ``--traceback`` and ``--use-dotenv``.
* :func:`cli_info`, :func:`cli_relay`, :func:`cli_demo` - subcommands.
* :func:`main` - runs the group through :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer only: all line handling lives in :mod:`lib_log_stream.log_stream`;
this module wires loggers and settings together.
"""

from __future__ import annotations

import logging
import os
from typing import IO, Sequence

import click
import lib_cli_exit_tools
from click.core import ParameterSource

from . import __init__conf__
from . import config as config_module
from .adapters.console.rich_console import RichConsoleLogger
from .adapters.stdlib_logging import StdlibLoggerRegistry
from .application.ports.logger import LoggerPort
from .domain.priority import Priority
from .log_stream import DEFAULT_BUFFER_CAPACITY, LogStream, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
BACKENDS = ("console", "stdlib")
_READ_CHUNK = 4096
_STDLIB_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _explicit(ctx: click.Context, name: str, value: bool) -> bool | None:
    """Return ``value`` when the option was given on the command line, else ``None``."""
    if ctx.get_parameter_source(name) in (ParameterSource.DEFAULT, None):
        return None
    return value


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (also via {config_module.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Relay text into a line-buffered log stream."""

    explicit_traceback = _explicit(ctx, "traceback", traceback)
    if explicit_traceback is not None:
        lib_cli_exit_tools.config.traceback = explicit_traceback
        lib_cli_exit_tools.config.traceback_force_color = explicit_traceback

    env_toggle = os.getenv(config_module.DOTENV_ENV_VAR)
    if config_module.should_use_dotenv(explicit=_explicit(ctx, "use_dotenv", use_dotenv), env_value=env_toggle):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("relay", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("r", encoding="utf-8", errors="replace"), default="-")
@click.option("--logger", "logger_name", default="", show_default=True, help="Logger name receiving the records.")
@click.option("--priority", default=Priority.INFORMATION.severity, show_default=True, help="Initial record priority.")
@click.option("--capacity", type=int, default=DEFAULT_BUFFER_CAPACITY, show_default=True, help="Message buffer capacity hint.")
@click.option("--backend", type=click.Choice(BACKENDS), default="console", show_default=True, help="Logger backend.")
@click.option("--no-color", is_flag=True, default=False, help="Disable console colours.")
def cli_relay(source: IO[str], logger_name: str, priority: str, capacity: int, backend: str, no_color: bool) -> None:
    """Log every line read from SOURCE (default: stdin) as one record.

    Line endings are normalised while reading, so CRLF input yields one record
    per line. Bytes that are not valid UTF-8 are replaced with U+FFFD instead
    of aborting the relay. A final line without a terminator is still logged.
    """

    try:
        settings = config_module.load_stream_settings(logger_name=logger_name, priority=priority, capacity=capacity)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    logger = _build_logger(backend, settings.logger_name, no_color=no_color)
    with LogStream(logger, settings.priority, settings.capacity) as stream:
        for chunk in iter(lambda: source.read(_READ_CHUNK), ""):
            stream.write(chunk)
        if stream.assembler.pending:
            stream.write("\n")
        if stream.failed:
            raise click.ClickException("message buffer could not grow; input was truncated")


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--logger", "logger_name", default="lib_log_stream.demo", show_default=True, help="Logger name shown in the output.")
@click.option("--no-color", is_flag=True, default=False, help="Disable console colours.")
def cli_demo(logger_name: str, no_color: bool) -> None:
    """Emit one sample record per priority to the console."""

    logger = RichConsoleLogger(logger_name, no_color=no_color)
    with LogStream(logger) as stream:
        for priority in Priority:
            getattr(stream, priority.severity)(f"{priority.severity} sample ({priority.code})")


def _build_logger(backend: str, logger_name: str, *, no_color: bool) -> LoggerPort:
    """Return the logger for ``backend``; stdlib output goes to stderr via ``basicConfig``."""
    if backend == "stdlib":
        logging.basicConfig(level=Priority.TRACE.to_python_level(), format=_STDLIB_FORMAT)
        return StdlibLoggerRegistry().get(logger_name)
    return RichConsoleLogger(logger_name, no_color=no_color)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Parameters
    ----------
    argv:
        Optional argument list; ``None`` lets Click consume ``sys.argv``.
    restore_traceback:
        Restore the ``lib_cli_exit_tools`` traceback preferences afterwards so
        embedding hosts are not affected by ``--traceback`` flags.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
