"""Click command line for exercising the fan-out pipeline.

Purpose
-------
Provide smoke-test commands for operators: print package metadata, push one
record per level through a composed runtime, and send a single test alert
through the configured SMS medium.

Contents
--------
* :func:`cli` - root group with ``--traceback`` and ``--use-dotenv`` toggles.
* ``info``, ``logdemo``, ``send-alert`` subcommands.
* :func:`main` - entry point delegating to :func:`lib_cli_exit_tools.run_cli`.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as log_config
from .adapters.alert import AlertChannel
from .adapters.clock import MonotonicClock
from .domain.errors import ConfigurationError
from .domain.levels import LogLevel
from .domain.records import LogRecord
from .runtime import create_runtime
from .runtime._settings import build_runtime_settings

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LEVEL_CHOICE = click.Choice([level.name for level in LogLevel], case_sensitive=False)


def summary_info() -> str:
    """Return the metadata banner printed by ``info``."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags and loading ``.env`` when requested."""

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--console-level", type=_LEVEL_CHOICE, default="DEBUG", show_default=True, help="Console threshold.")
@click.option("--file", "file_path", type=click.Path(dir_okay=False), default=None, help="Also append records to this file.")
@click.option("--with-alerts/--without-alerts", default=False, help="Register the SMS alert channel (needs MESSAGEBIRD_* settings).")
def cli_logdemo(console_level: str, file_path: str | None, with_alerts: bool) -> None:
    """Emit one record per level through a freshly composed runtime."""

    try:
        runtime = create_runtime(console_level=console_level, file_path=file_path, enable_alerts=with_alerts)
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc

    with runtime:
        delivered = 0
        for level in LogLevel:
            outcome = runtime.log(level, f"This is a test at {level.severity} level.")
            delivered += outcome["delivered"]
    channels = len(runtime.dispatcher.registrations)
    click.echo(f"emitted {len(LogLevel)} records to {channels} channel(s), {delivered} deliveries")


@cli.command("send-alert", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message")
@click.option("--level", type=_LEVEL_CHOICE, default="ERROR", show_default=True, help="Severity rendered into the alert.")
def cli_send_alert(message: str, level: str) -> None:
    """Send MESSAGE once through the configured SMS alert channel."""

    try:
        settings = build_runtime_settings(enable_alerts=True)
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc
    if settings.alert is None:
        raise click.UsageError("alerts are disabled by LOG_ENABLE_ALERTS")

    channel = AlertChannel(settings.alert)
    try:
        record = LogRecord.create(LogLevel.from_name(level), message, MonotonicClock().now(), settings.name)
        result = channel.deliver(record)
    finally:
        channel.close()

    if not result.ok:
        raise click.ClickException(f"alert not delivered: {result.error_kind}: {result.description}")
    reference = f" (id {result.reference})" if result.reference else ""
    click.echo(f"alert delivered to {len(settings.alert.recipients)} recipient(s){reference}")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    so repeated in-process invocations (tests, embedding hosts) stay isolated.
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


__all__ = ["cli", "main", "summary_info"]
