#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Ownership of the external monitoring process.

This is the only module that touches OS process primitives. The supervisor is
an async context manager: entering spawns the process, leaving kills and reaps
it, whatever the reason for leaving.
"""

from __future__ import annotations

import asyncio
import contextlib
import os
import signal
import subprocess
from collections.abc import Sequence
from types import TracebackType
from typing import Protocol

from provide.foundation.logger import get_logger

from mac_disk_monitor.config.defaults import DEFAULT_KILL_TIMEOUT
from mac_disk_monitor.errors import ProcessSpawnError, ProcessTerminationError

log = get_logger(__name__)


class SupervisedProcess(Protocol):
    """What the engine needs from a supervised process."""

    @property
    def command(self) -> str: ...

    @property
    def pid(self) -> int | None: ...

    @property
    def stdout(self) -> asyncio.StreamReader: ...

    async def start(self) -> None: ...

    def poll(self) -> int | None: ...

    async def terminate(self) -> None: ...

    async def __aenter__(self) -> SupervisedProcess: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...


class ProcessSupervisor:
    """Spawns a command with stdin suppressed and stdout captured."""

    def __init__(
        self,
        command: str,
        args: Sequence[str] = (),
        *,
        capture_stderr: bool = False,
        kill_timeout: float = DEFAULT_KILL_TIMEOUT,
    ) -> None:
        self._command = command
        self._args = tuple(args)
        self._capture_stderr = capture_stderr
        self._kill_timeout = kill_timeout
        self._process: asyncio.subprocess.Process | None = None
        self._stderr_task: asyncio.Task[None] | None = None
        self._log = log.bind(command=command)

    @property
    def command(self) -> str:
        return self._command

    @property
    def args(self) -> tuple[str, ...]:
        return self._args

    @property
    def pid(self) -> int | None:
        return self._process.pid if self._process else None

    @property
    def stdout(self) -> asyncio.StreamReader:
        if self._process is None or self._process.stdout is None:
            raise RuntimeError("Process has not been started")
        return self._process.stdout

    async def start(self) -> None:
        """Spawn the command.

        Raises:
            ProcessSpawnError: If the OS refuses to start it
        """
        if self._process is not None:
            raise RuntimeError("Process already started")
        try:
            self._process = await asyncio.create_subprocess_exec(
                self._command,
                *self._args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE if self._capture_stderr else subprocess.DEVNULL,
            )
        except OSError as e:
            self._log.error("Failed to spawn monitoring process", error=str(e))
            raise ProcessSpawnError(self._command, str(e)) from e

        if self._capture_stderr and self._process.stderr is not None:
            self._stderr_task = asyncio.create_task(self._drain_stderr(self._process.stderr))
        self._log.debug("Monitoring process started", pid=self._process.pid, args=list(self._args))

    async def _drain_stderr(self, stream: asyncio.StreamReader) -> None:
        # Keeps the pipe from filling up and blocking the child.
        while True:
            try:
                raw = await stream.readline()
            except ValueError:
                # readline drops the buffered data when a line exceeds the stream limit
                self._log.warning("Discarded over-long stderr line", pid=self.pid)
                continue
            if not raw:
                return
            self._log.warning(
                "Monitoring process stderr",
                pid=self.pid,
                line=raw.decode("utf-8", errors="replace").rstrip(),
            )

    def poll(self) -> int | None:
        """Return the exit status if the process has exited, without blocking."""
        if self._process is None:
            return None
        return self._process.returncode

    async def terminate(self) -> None:
        """Kill the process if it is still running and reap it.

        A process that already exited counts as terminated.

        Raises:
            ProcessTerminationError: If the kill fails or the process is not reaped in time
        """
        process = self._process
        if process is None:
            return

        try:
            if process.returncode is None:
                try:
                    # Process.kill() may reap the child through Popen; reaping belongs to the loop.
                    os.kill(process.pid, signal.SIGKILL)
                except ProcessLookupError:
                    self._log.debug("Process already gone before kill", pid=process.pid)
                except OSError as e:
                    self._log.error("Failed to kill monitoring process", pid=process.pid, error=str(e))
                    raise ProcessTerminationError(process.pid, str(e)) from e
            try:
                returncode = await asyncio.wait_for(process.wait(), self._kill_timeout)
            except TimeoutError as e:
                raise ProcessTerminationError(
                    process.pid, f"not reaped within {self._kill_timeout}s"
                ) from e
            self._log.debug("Monitoring process terminated", pid=process.pid, returncode=returncode)
        finally:
            if self._stderr_task is not None:
                self._stderr_task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await self._stderr_task
                self._stderr_task = None

    async def __aenter__(self) -> ProcessSupervisor:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.terminate()


# 🔼⚙️🔚
