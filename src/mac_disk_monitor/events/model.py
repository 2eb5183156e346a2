#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The Event record produced for each line of disk activity."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

import yaml
from attrs import define, field

from mac_disk_monitor.events.timestamp import format_timestamp

# Icons for the human-readable format, keyed by event name
EVENT_ICONS = {
    "DiskAppeared": "\U0001f4bd",  # MINIDISC
    "DiskDisappeared": "⏏️",  # EJECT SYMBOL
    "DiskMountApproval": "✅",  # WHITE HEAVY CHECK MARK
    "DiskUnmountApproval": "\U0001f6aa",  # DOOR
    "DiskEjectApproval": "\U0001f6aa",  # DOOR
    "DiskPeek": "\U0001f440",  # EYES
    "DiskDescriptionChanged": "✏️",  # PENCIL
    "DAIdle": "\U0001f4a4",  # SLEEPING SYMBOL
}
DEFAULT_ICON = "\U0001f4c4"  # PAGE FACING UP


@define(frozen=True)
class Event:
    """One parsed observation from the monitoring command.

    Optional fields are None when the source omits them or reports the
    ``<null>`` sentinel. ``raw_time`` keeps the exact source token so it can
    be reproduced verbatim, even at nanosecond precision.
    """

    name: str = field(default="")
    time: datetime = field(factory=datetime.now)
    raw_time: str = field(default="")
    bsd_name: str | None = field(default=None)
    volume_path: str | None = field(default=None)
    volume_kind: str | None = field(default=None)
    volume_name: str | None = field(default=None)
    comment: str | None = field(default=None)

    @classmethod
    def empty(cls) -> Event:
        """An event with no name, stamped with the current time."""
        return cls()

    @property
    def time_string(self) -> str:
        """The timestamp as reported by the source."""
        return self.raw_time or format_timestamp(self.time)

    def to_dict(self) -> dict[str, Any]:
        """Convert the event to a field-keyed dictionary."""
        return {
            "name": self.name,
            "time": self.time_string,
            "bsd_name": self.bsd_name,
            "volume_path": self.volume_path,
            "volume_kind": self.volume_kind,
            "volume_name": self.volume_name,
            "comment": self.comment,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)

    def format(self) -> str:
        """Format the event as a single human-readable line."""
        icon = EVENT_ICONS.get(self.name, DEFAULT_ICON)
        parts = [f"[{self.time.strftime('%H:%M:%S')}]", icon, self.name or "<unparsed>"]
        if self.bsd_name:
            parts.append(self.bsd_name)
        if self.volume_name:
            parts.append(f"'{self.volume_name}'")
        if self.volume_kind:
            parts.append(f"({self.volume_kind})")
        if self.volume_path:
            parts.append(self.volume_path)
        if self.comment:
            parts.append(f"- {self.comment}")
        return " ".join(parts)


# 🔼⚙️🔚
