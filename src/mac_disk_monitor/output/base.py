#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Base protocol for event formatters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mac_disk_monitor.events.model import Event


class EventFormatter(Protocol):
    """Protocol for turning an event into printable text."""

    def format_event(self, event: Event) -> str:
        """Format an event.

        Args:
            event: Event to format

        Returns:
            Text to print, without a trailing newline
        """
        ...


# 🔼⚙️🔚
