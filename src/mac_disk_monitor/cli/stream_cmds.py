#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The ``stream`` command: run the monitoring command and print its events."""

from __future__ import annotations

import asyncio
import contextlib
import signal
from pathlib import Path

import click
from attrs import evolve
from provide.foundation.cli.decorators import logging_options
from provide.foundation.logger import get_logger
from structlog.typing import FilteringBoundLogger as StructLogger

from mac_disk_monitor.config import EngineConfig, MonitorConfig, load_config
from mac_disk_monitor.config.defaults import CONFIG_ENV_VAR, OUTPUT_FORMATS
from mac_disk_monitor.errors import ChannelClosedError, DiskMonitorError
from mac_disk_monitor.monitor import Action, Channel, stream_events
from mac_disk_monitor.output import EventFormatter, get_formatter

log: StructLogger = get_logger(__name__)

_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _request_stop(actions: Channel[Action], sig: int) -> None:
    log.warning("Received shutdown signal", signal=signal.Signals(sig).name, signal_num=sig)
    with contextlib.suppress(ChannelClosedError):
        actions.send_nowait(Action.STOP)


async def _stream(config: EngineConfig, formatter: EventFormatter) -> None:
    loop = asyncio.get_running_loop()
    actions: Channel[Action] = Channel(name="actions")
    installed = []
    for sig in _STOP_SIGNALS:
        # add_signal_handler is unavailable on some platforms
        with contextlib.suppress(NotImplementedError, RuntimeError):
            loop.add_signal_handler(sig, _request_stop, actions, sig)
            installed.append(sig)

    task, events = stream_events(actions, config)
    try:
        async for event in events:
            click.echo(formatter.format_event(event))
    finally:
        if not task.done():
            with contextlib.suppress(ChannelClosedError):
                actions.send_nowait(Action.STOP)
        for sig in installed:
            loop.remove_signal_handler(sig)

    await task


@click.command(name="stream")
@click.option(
    "-c",
    "--config-path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=None,
    envvar=CONFIG_ENV_VAR,
    help=f"Path to a TOML configuration file (env var {CONFIG_ENV_VAR}).",
    show_envvar=True,
)
@click.option("--command", "command", default=None, help="Monitoring command to run instead of diskutil.")
@click.option("-a", "--arg", "args", multiple=True, help="Argument for --command (repeatable).")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: json, or [output] format from the config file).",
)
@logging_options
@click.pass_context
def stream_cli(
    ctx: click.Context,
    config_path: Path | None,
    command: str | None,
    args: tuple[str, ...],
    output_format: str | None,
    **kwargs,
):
    """Stream disk activity events until interrupted.

    Example:
        mac-disk-monitor stream --format text
    """
    try:
        config = load_config(config_path) if config_path else MonitorConfig()
    except DiskMonitorError as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)
        return

    engine_config = config.engine
    if command:
        engine_config = evolve(engine_config, command=command, args=args)
    elif args:
        engine_config = evolve(engine_config, args=args)
    formatter = get_formatter(output_format or config.output.format)

    log.debug("Starting stream", command=engine_config.command, args=list(engine_config.args))
    try:
        asyncio.run(_stream(engine_config, formatter))
    except DiskMonitorError as e:
        log.error("Stream ended with an error", error=str(e), error_type=type(e).__name__)
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)


# 🔼⚙️🔚
