#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Default values for engine and output configuration."""

from __future__ import annotations

DEFAULT_COMMAND = "/usr/sbin/diskutil"
DEFAULT_ARGS: tuple[str, ...] = ("activity",)

# Bounded waits (seconds). Together they bound how long a Stop request can go unnoticed.
DEFAULT_READ_TIMEOUT = 0.25
DEFAULT_ACTION_POLL_INTERVAL = 0.1

DEFAULT_READ_CHUNK_SIZE = 4096
DEFAULT_MAX_LINE_LENGTH = 64 * 1024
DEFAULT_EVENT_QUEUE_SIZE = 0  # unbounded
DEFAULT_KILL_TIMEOUT = 5.0
DEFAULT_ENCODING = "utf-8"
DEFAULT_BANNER_PREFIX = "***Begin monitoring"

DEFAULT_OUTPUT_FORMAT = "json"
OUTPUT_FORMATS: tuple[str, ...] = ("json", "yaml", "text")

CONFIG_ENV_VAR = "MAC_DISK_MONITOR_CONF"

# 🔼⚙️🔚
