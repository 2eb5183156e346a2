#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Output formatters for presenting events."""

from mac_disk_monitor.output.base import EventFormatter
from mac_disk_monitor.output.formats import (
    JsonEventFormatter,
    TextEventFormatter,
    YamlEventFormatter,
    get_formatter,
)

__all__ = [
    "EventFormatter",
    "JsonEventFormatter",
    "TextEventFormatter",
    "YamlEventFormatter",
    "get_formatter",
]

# 🔼⚙️🔚
