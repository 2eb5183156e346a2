#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Main CLI entry point for mac-disk-monitor."""

from __future__ import annotations

import click

from mac_disk_monitor import __version__
from mac_disk_monitor.cli.parse_cmds import parse_cli
from mac_disk_monitor.cli.stream_cmds import stream_cli


@click.group(name="mac-disk-monitor")
@click.version_option(version=__version__, prog_name="mac-disk-monitor")
def cli():
    """mac-disk-monitor - stream macOS disk activity as structured events."""


cli.add_command(stream_cli)
cli.add_command(parse_cli)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

# 🔼⚙️🔚
