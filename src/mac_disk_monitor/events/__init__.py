#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Disk activity events and the line grammar that produces them."""

from mac_disk_monitor.events.model import Event
from mac_disk_monitor.events.parser import (
    BaseMetadata,
    extract_base_metadata,
    extract_volume_kind,
    extract_volume_name,
    extract_volume_path,
    parse_line,
)
from mac_disk_monitor.events.timestamp import format_timestamp, parse_timestamp

__all__ = [
    "BaseMetadata",
    "Event",
    "extract_base_metadata",
    "extract_volume_kind",
    "extract_volume_name",
    "extract_volume_path",
    "format_timestamp",
    "parse_line",
    "parse_timestamp",
]

# 🔼⚙️🔚
