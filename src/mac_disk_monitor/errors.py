#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Exception hierarchy for mac-disk-monitor.

Every failure the streaming engine can hit is one of these. The engine never
logs-and-drops them: they end up as the terminal result of the worker task."""

from __future__ import annotations


class DiskMonitorError(Exception):
    """Base exception for all mac-disk-monitor errors."""


class ConfigurationError(DiskMonitorError):
    """Raised when configuration is missing, malformed or invalid."""


class ProcessSpawnError(DiskMonitorError):
    """Raised when the monitoring command could not be started."""

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to start '{command}': {reason}")


class StreamReadError(DiskMonitorError):
    """Raised when the process output stream could not be read."""


class LineDecodeError(DiskMonitorError):
    """Raised when a line of process output is not valid text."""

    def __init__(self, raw: bytes, encoding: str, reason: str):
        self.raw = raw
        self.encoding = encoding
        self.reason = reason
        preview = raw[:60]
        super().__init__(f"Could not decode line as {encoding} ({reason}): {preview!r}")


class TimestampFormatError(DiskMonitorError, ValueError):
    """Raised when a Time= token does not match YYYYMMDD-HH:MM:SS.ffffff."""

    def __init__(self, token: str, reason: str | None = None):
        self.token = token
        message = f"Malformed event timestamp {token!r}, expected YYYYMMDD-HH:MM:SS.ffffff"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ChannelClosedError(DiskMonitorError):
    """Raised when sending on a channel whose receiving side has gone away."""

    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(f"Channel '{channel}' is closed")


class ProcessTerminationError(DiskMonitorError):
    """Raised when the supervised process could not be killed or reaped."""

    def __init__(self, pid: int | None, reason: str):
        self.pid = pid
        self.reason = reason
        super().__init__(f"Failed to terminate process {pid}: {reason}")


class ProcessExitedError(DiskMonitorError):
    """Raised when the monitoring command exits on its own with a failure status."""

    def __init__(self, command: str, returncode: int):
        self.command = command
        self.returncode = returncode
        super().__init__(f"'{command}' exited with status {returncode}")


# 🔼⚙️🔚
