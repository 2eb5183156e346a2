#
# SPDX-FileCopyrightText: Copyright (c) provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""In-memory stand-in for ProcessSupervisor.

Must be created inside a running event loop, since it owns an
asyncio.StreamReader that the test feeds directly."""

from __future__ import annotations

import asyncio

from mac_disk_monitor.errors import ProcessSpawnError, ProcessTerminationError


class FakeProcess:
    """Satisfies the SupervisedProcess protocol without touching the OS."""

    def __init__(
        self,
        command: str = "fake-diskutil",
        *,
        spawn_error: bool = False,
        kill_error: bool = False,
    ) -> None:
        self._command = command
        self._spawn_error = spawn_error
        self._kill_error = kill_error
        self._stdout = asyncio.StreamReader()
        self.returncode: int | None = None
        self.started = False
        self.terminate_calls = 0

    @property
    def command(self) -> str:
        return self._command

    @property
    def pid(self) -> int | None:
        return 4242 if self.started else None

    @property
    def stdout(self) -> asyncio.StreamReader:
        return self._stdout

    def emit(self, *lines: str) -> None:
        """Write lines to the fake stdout."""
        for line in lines:
            self._stdout.feed_data(f"{line}\n".encode())

    def emit_bytes(self, data: bytes) -> None:
        self._stdout.feed_data(data)

    def exit(self, returncode: int = 0) -> None:
        """Close stdout and mark the process as exited on its own."""
        self._stdout.feed_eof()
        self.returncode = returncode

    async def start(self) -> None:
        if self._spawn_error:
            raise ProcessSpawnError(self._command, "No such file or directory")
        self.started = True

    def poll(self) -> int | None:
        return self.returncode

    async def terminate(self) -> None:
        self.terminate_calls += 1
        if self._kill_error:
            raise ProcessTerminationError(self.pid, "Operation not permitted")
        if self.returncode is None:
            self.returncode = -9
            self._stdout.feed_eof()

    async def __aenter__(self) -> FakeProcess:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.terminate()


# 🔼⚙️🔚
