#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Real-time disk activity monitoring for macOS.

Runs ``diskutil activity`` in a background task and turns each line it prints
into an immutable Event, delivered on an asynchronous channel."""

from provide.foundation.utils.versioning import get_version

from mac_disk_monitor.events import Event, parse_line
from mac_disk_monitor.monitor import Action, Channel, EventChannel, stream_events, stream_events_with_command

__version__ = get_version("mac-disk-monitor", caller_file=__file__)


def version() -> str:
    """The installed version of mac-disk-monitor."""
    return __version__


__all__ = [
    "Action",
    "Channel",
    "Event",
    "EventChannel",
    "__version__",
    "parse_line",
    "stream_events",
    "stream_events_with_command",
    "version",
]

# 🔼⚙️🔚
