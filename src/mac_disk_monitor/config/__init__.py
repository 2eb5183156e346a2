#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration module for mac-disk-monitor.

Re-exports the configuration models and the loading function."""

from __future__ import annotations

from mac_disk_monitor.config.models import (
    EngineConfig,
    MonitorConfig,
    OutputConfig,
    load_config,
)
from mac_disk_monitor.errors import ConfigurationError

__all__ = [
    "ConfigurationError",
    "EngineConfig",
    "MonitorConfig",
    "OutputConfig",
    "load_config",
]

# 🔼⚙️🔚
