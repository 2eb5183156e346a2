#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Asynchronous channels between the streaming engine and its consumer.

Events flow out on an EventChannel, ending with a single ``None``. Actions
flow in on a plain Channel owned by the caller.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from enum import Enum
from typing import Generic, TypeVar

from mac_disk_monitor.errors import ChannelClosedError
from mac_disk_monitor.events.model import Event

T = TypeVar("T")


class Action(Enum):
    """Control messages the consumer can send to the engine."""

    STOP = "stop"
    NOOP = "noop"


class Channel(Generic[T]):
    """Single-producer, single-consumer queue that either side may close.

    The receiver closes an event channel to say it has gone away: further
    sends raise ChannelClosedError, and a send already waiting for room on a
    full bounded channel is woken and raises it too. The sender closes an
    action channel to say nothing more will come; the engine treats a closed,
    drained action channel as STOP. Items already queued can still be
    received after either kind of close.
    """

    def __init__(self, maxsize: int = 0, *, name: str = "channel") -> None:
        self.name = name
        self._queue: asyncio.Queue[T] = asyncio.Queue(maxsize)
        self._closed = False
        self._closed_event = asyncio.Event()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True
        self._closed_event.set()

    def empty(self) -> bool:
        return self._queue.empty()

    def qsize(self) -> int:
        return self._queue.qsize()

    async def send(self, item: T) -> None:
        """Queue an item, waiting for room when the channel is bounded.

        Raises:
            ChannelClosedError: If the channel is closed before the item is queued
        """
        if self._closed:
            raise ChannelClosedError(self.name)
        if not self._queue.full():
            self._queue.put_nowait(item)
            return

        put = asyncio.ensure_future(self._queue.put(item))
        closed = asyncio.ensure_future(self._closed_event.wait())
        try:
            await asyncio.wait({put, closed}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for waiter in (put, closed):
                if not waiter.done():
                    waiter.cancel()
        if not put.done() or put.cancelled():
            raise ChannelClosedError(self.name)

    def send_nowait(self, item: T) -> None:
        """Queue an item without waiting; usable from signal handlers."""
        if self._closed:
            raise ChannelClosedError(self.name)
        self._queue.put_nowait(item)

    async def recv(self, timeout: float | None = None) -> T:
        """Receive the next item.

        Raises:
            TimeoutError: If ``timeout`` elapses with nothing to receive
        """
        if timeout is None:
            return await self._queue.get()
        return await asyncio.wait_for(self._queue.get(), timeout)

    def try_recv(self) -> T | None:
        """Receive the next item if one is already queued."""
        try:
            return self._queue.get_nowait()
        except asyncio.QueueEmpty:
            return None


class EventChannel(Channel[Event | None]):
    """Channel of parsed events, terminated by a single ``None``."""

    def __init__(self, maxsize: int = 0) -> None:
        super().__init__(maxsize, name="events")

    async def __aiter__(self) -> AsyncIterator[Event]:
        while True:
            event = await self.recv()
            if event is None:
                return
            yield event


# 🔼⚙️🔚
