#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The streaming engine: supervise a monitoring command and emit its events.

The engine is a small state machine run by a single asyncio task::

    RUNNING --(STOP / process exited / failure)--> STOPPING --> TERMINATED

It suspends in exactly two places, the bounded read of process output and the
bounded poll of the action channel, so a STOP request is honoured within
roughly one read timeout plus one poll interval even when the process is idle.

Usage:
    actions: Channel[Action] = Channel(name="actions")
    task, events = stream_events(actions)

    async for event in events:
        print(event.to_json())
    await task  # raises the failure, if any
"""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Callable, Sequence
from enum import Enum, auto
from typing import NamedTuple

from provide.foundation.logger import get_logger

from mac_disk_monitor.config.models import EngineConfig
from mac_disk_monitor.errors import ChannelClosedError, DiskMonitorError, ProcessExitedError
from mac_disk_monitor.events.model import Event
from mac_disk_monitor.events.parser import parse_line
from mac_disk_monitor.monitor.channels import Action, Channel, EventChannel
from mac_disk_monitor.monitor.reader import LineReader
from mac_disk_monitor.monitor.supervisor import ProcessSupervisor, SupervisedProcess

log = get_logger(__name__)


class EngineState(Enum):
    """Lifecycle of a StreamEngine."""

    RUNNING = auto()
    STOPPING = auto()
    TERMINATED = auto()


class EngineHandle(NamedTuple):
    """The running worker task and the channel its events arrive on."""

    task: asyncio.Task[None]
    events: EventChannel


class StreamEngine:
    """Reads a supervised process line by line and publishes parsed events."""

    def __init__(
        self,
        process: SupervisedProcess,
        events: EventChannel,
        actions: Channel[Action],
        config: EngineConfig | None = None,
        parser: Callable[[str], Event] = parse_line,
    ) -> None:
        self._process = process
        self._events = events
        self._actions = actions
        self._config = config or EngineConfig()
        self._parse = parser
        self._state = EngineState.RUNNING
        self._result: DiskMonitorError | None = None
        self._events_emitted = 0
        self._log = log.bind(command=process.command)

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def result(self) -> DiskMonitorError | None:
        """The failure the engine terminated with, or None."""
        return self._result

    @property
    def events_emitted(self) -> int:
        return self._events_emitted

    async def run(self) -> None:
        """Run until the process exits, a STOP arrives, or something fails.

        The process is terminated and the terminal ``None`` is sent on every
        path out of this method.

        Raises:
            DiskMonitorError: The first failure encountered
        """
        failure: DiskMonitorError | None = None
        try:
            async with self._process:
                self._log.info("Stream engine running", pid=self._process.pid)
                try:
                    await self._run_loop()
                except DiskMonitorError as e:
                    failure = e
                    self._log.error("Stream engine failed", error=str(e), error_type=type(e).__name__)
                finally:
                    self._state = EngineState.STOPPING
        except DiskMonitorError as e:
            # Spawn or termination failure; an earlier loop failure takes precedence.
            failure = failure or e
            self._log.error("Process supervision failed", error=str(e), error_type=type(e).__name__)
        finally:
            self._state = EngineState.STOPPING
            await self._send_end_of_stream()
            self._state = EngineState.TERMINATED
            self._result = failure
            self._log.info(
                "Stream engine terminated",
                events_emitted=self._events_emitted,
                failed=failure is not None,
            )

        if failure is not None:
            raise failure

    async def _run_loop(self) -> None:
        reader = LineReader(
            self._process.stdout,
            timeout=self._config.read_timeout,
            chunk_size=self._config.read_chunk_size,
            max_line_length=self._config.max_line_length,
            encoding=self._config.encoding,
            skip_prefixes=(self._config.banner_prefix,),
        )

        while self._state is EngineState.RUNNING:
            line = await reader.read_line()
            if line is not None:
                await self._emit(self._parse(line))

            returncode = self._process.poll()
            if returncode is not None and reader.at_eof:
                self._log.info("Monitoring process exited", returncode=returncode)
                if returncode != 0:
                    raise ProcessExitedError(self._process.command, returncode)
                return

            busy = line is not None or reader.has_buffered_line
            action = await self._poll_action(0 if busy else self._config.action_poll_interval)
            if action is Action.STOP:
                self._log.info("Stop requested")
                return

    async def _poll_action(self, wait: float) -> Action | None:
        if self._actions.closed and self._actions.empty():
            # Nobody is left to send STOP, so stop now.
            return Action.STOP
        if wait <= 0:
            return self._actions.try_recv()
        try:
            return await self._actions.recv(timeout=wait)
        except TimeoutError:
            return None

    async def _emit(self, event: Event) -> None:
        await self._events.send(event)
        self._events_emitted += 1

    async def _send_end_of_stream(self) -> None:
        # A closed event channel means the consumer has left and needs no sentinel.
        with contextlib.suppress(ChannelClosedError):
            await self._events.send(None)


def stream_events_with_command(
    command: str,
    args: Sequence[str],
    actions: Channel[Action],
    config: EngineConfig | None = None,
) -> EngineHandle:
    """Run ``command`` in a background task and parse events from its stdout.

    Must be called from within a running event loop.

    Args:
        command: The executable to run
        args: Its command-line arguments
        actions: Channel the caller uses to send Action.STOP / Action.NOOP
        config: Engine settings; ``command`` and ``args`` here take precedence

    Returns:
        The worker task and the event channel, ending with ``None``
    """
    config = config or EngineConfig()
    supervisor = ProcessSupervisor(
        command,
        args,
        capture_stderr=config.capture_stderr,
        kill_timeout=config.kill_timeout,
    )
    events = EventChannel(config.event_queue_size)
    engine = StreamEngine(supervisor, events, actions, config)
    task = asyncio.create_task(engine.run(), name=f"stream-engine:{command}")
    return EngineHandle(task, events)


def stream_events(actions: Channel[Action], config: EngineConfig | None = None) -> EngineHandle:
    """Run the configured monitoring command (``diskutil activity`` by default)."""
    config = config or EngineConfig()
    return stream_events_with_command(config.command, config.args, actions, config)


# 🔼⚙️🔚
