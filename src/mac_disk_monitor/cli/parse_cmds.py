#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The ``parse`` command: parse previously captured diskutil activity output."""

from __future__ import annotations

from typing import TextIO

import click
from provide.foundation.cli.decorators import logging_options
from provide.foundation.logger import get_logger
from structlog.typing import FilteringBoundLogger as StructLogger

from mac_disk_monitor.config.defaults import DEFAULT_BANNER_PREFIX, OUTPUT_FORMATS
from mac_disk_monitor.errors import TimestampFormatError
from mac_disk_monitor.events import parse_line
from mac_disk_monitor.output import get_formatter

log: StructLogger = get_logger(__name__)


@click.command(name="parse")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="json",
    show_default=True,
    help="Output format.",
)
@click.option("--skip-errors", is_flag=True, help="Report lines with malformed timestamps and carry on.")
@logging_options
@click.pass_context
def parse_cli(ctx: click.Context, source: TextIO, output_format: str, skip_errors: bool, **kwargs):
    """Parse lines of `diskutil activity` output from SOURCE (default: stdin).

    Example:
        diskutil activity > activity.log; mac-disk-monitor parse activity.log
    """
    formatter = get_formatter(output_format)
    for lineno, line in enumerate(source, start=1):
        line = line.rstrip("\r\n")
        if not line.strip() or line.startswith(DEFAULT_BANNER_PREFIX):
            continue
        try:
            event = parse_line(line)
        except TimestampFormatError as e:
            if not skip_errors:
                click.echo(f"❌ Error on line {lineno}: {e}", err=True)
                ctx.exit(1)
            log.warning("Skipping malformed line", lineno=lineno, token=e.token)
            click.echo(f"⚠️  Skipping line {lineno}: {e}", err=True)
            continue
        click.echo(formatter.format_event(event))


# 🔼⚙️🔚
