#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""JSON, YAML and plain-text event formatters."""

from __future__ import annotations

from mac_disk_monitor.events.model import Event
from mac_disk_monitor.output.base import EventFormatter


class JsonEventFormatter:
    """One JSON object per line."""

    def format_event(self, event: Event) -> str:
        return event.to_json()


class YamlEventFormatter:
    """One YAML document per event, separated by ``---``."""

    def format_event(self, event: Event) -> str:
        return "---\n" + event.to_yaml().rstrip("\n")


class TextEventFormatter:
    """Human-readable single line with an icon per event kind."""

    def format_event(self, event: Event) -> str:
        return event.format()


_FORMATTERS: dict[str, type[EventFormatter]] = {
    "json": JsonEventFormatter,
    "yaml": YamlEventFormatter,
    "text": TextEventFormatter,
}


def get_formatter(name: str) -> EventFormatter:
    """Look up a formatter by name.

    Raises:
        ValueError: If no formatter has that name
    """
    try:
        return _FORMATTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown output format {name!r}, expected one of {', '.join(_FORMATTERS)}") from None


# 🔼⚙️🔚
