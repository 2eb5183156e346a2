#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from mac_disk_monitor.config import EngineConfig


@pytest.fixture
def fast_config() -> EngineConfig:
    """Engine settings with short bounded waits so tests stay quick."""
    return EngineConfig(read_timeout=0.05, action_poll_interval=0.02, kill_timeout=2.0)


@pytest.fixture
def python_command():
    """Build (command, args) that run a Python snippet in a child process."""

    def build(script: str) -> tuple[str, list[str]]:
        return sys.executable, ["-u", "-c", script]

    return build


@pytest.fixture
def activity_log(tmp_path: Path) -> Path:
    """A captured diskutil activity session."""
    log_file = tmp_path / "activity.log"
    log_file.write_text(
        "***Begin monitoring\n"
        "***DiskAppeared ('disk4', DAVolumePath = 'file:///Volumes/USB/', DAVolumeKind = 'msdos', "
        "DAVolumeName = 'USB') Time=20220108-20:22:05.000001\n"
        "***DiskPeek ('disk4') Time=20220108-20:22:05.000002\n"
        "\n"
        "***DiskMountApproval ('disk4', DAVolumePath = '<null>', DAVolumeKind = 'msdos', "
        "DAVolumeName = 'USB') Comment=Approving Time=20220108-20:22:05.000003\n"
    )
    return log_file


# 🔼⚙️🔚
