#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Disk activity monitoring: process supervision, line reading and the streaming engine."""

from .channels import Action, Channel, EventChannel
from .engine import EngineHandle, EngineState, StreamEngine, stream_events, stream_events_with_command
from .reader import LineReader
from .supervisor import ProcessSupervisor, SupervisedProcess

__all__ = [
    "Action",
    "Channel",
    "EngineHandle",
    "EngineState",
    "EventChannel",
    "LineReader",
    "ProcessSupervisor",
    "StreamEngine",
    "SupervisedProcess",
    "stream_events",
    "stream_events_with_command",
]

# 🔼⚙️🔚
