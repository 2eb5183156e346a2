#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the event and action channels."""

import asyncio

import pytest

from mac_disk_monitor.errors import ChannelClosedError
from mac_disk_monitor.events import parse_line
from mac_disk_monitor.monitor import Action, Channel, EventChannel
from tests.helpers.lines import numbered_lines


@pytest.mark.asyncio
class TestChannel:
    """Tests for the generic Channel."""

    async def test_send_and_recv_in_order(self) -> None:
        channel: Channel[Action] = Channel(name="actions")
        await channel.send(Action.NOOP)
        channel.send_nowait(Action.STOP)

        assert channel.qsize() == 2
        assert await channel.recv() is Action.NOOP
        assert await channel.recv(timeout=0.1) is Action.STOP
        assert channel.empty()

    async def test_recv_timeout(self) -> None:
        channel: Channel[Action] = Channel()
        with pytest.raises(TimeoutError):
            await channel.recv(timeout=0.02)

    async def test_try_recv(self) -> None:
        channel: Channel[Action] = Channel()
        assert channel.try_recv() is None
        channel.send_nowait(Action.STOP)
        assert channel.try_recv() is Action.STOP

    async def test_send_after_close_raises(self) -> None:
        channel: Channel[Action] = Channel(name="actions")
        channel.close()

        assert channel.closed
        with pytest.raises(ChannelClosedError) as exc_info:
            await channel.send(Action.STOP)
        assert exc_info.value.channel == "actions"
        with pytest.raises(ChannelClosedError):
            channel.send_nowait(Action.STOP)

    async def test_queued_items_survive_close(self) -> None:
        channel: Channel[Action] = Channel()
        channel.send_nowait(Action.NOOP)
        channel.close()

        assert channel.try_recv() is Action.NOOP

    async def test_bounded_channel_applies_backpressure(self) -> None:
        channel: Channel[int] = Channel(maxsize=1)
        await channel.send(1)

        pending = asyncio.create_task(channel.send(2))
        await asyncio.sleep(0.02)
        assert not pending.done()

        assert await channel.recv() == 1
        await asyncio.wait_for(pending, timeout=1.0)
        assert await channel.recv() == 2

    async def test_close_wakes_blocked_sender(self) -> None:
        channel: Channel[int] = Channel(maxsize=1, name="events")
        await channel.send(1)

        pending = asyncio.create_task(channel.send(2))
        await asyncio.sleep(0.02)
        assert not pending.done()

        channel.close()
        with pytest.raises(ChannelClosedError):
            await asyncio.wait_for(pending, timeout=1.0)
        assert channel.qsize() == 1
        assert channel.try_recv() == 1


@pytest.mark.asyncio
class TestEventChannel:
    """Tests for async iteration over an EventChannel."""

    async def test_iteration_stops_at_terminal_none(self) -> None:
        channel = EventChannel()
        expected = [parse_line(line) for line in numbered_lines(3)]
        for event in expected:
            await channel.send(event)
        await channel.send(None)

        received = [event async for event in channel]
        assert received == expected
        assert channel.empty()

    async def test_name(self) -> None:
        assert EventChannel().name == "events"


# 🔼⚙️🔚
