#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for ProcessSupervisor against real child processes."""

import asyncio
import sys

import pytest
from provide.testkit.mocking import patch

from mac_disk_monitor.errors import ProcessSpawnError, ProcessTerminationError
from mac_disk_monitor.monitor import ProcessSupervisor

SLEEPER = ["-c", "import time; time.sleep(30)"]


@pytest.mark.asyncio
@pytest.mark.slow
class TestProcessSupervisor:
    """Spawn, poll and terminate behaviour."""

    async def test_start_poll_terminate(self) -> None:
        supervisor = ProcessSupervisor(sys.executable, SLEEPER)
        await supervisor.start()

        assert supervisor.pid is not None
        assert supervisor.poll() is None

        await supervisor.terminate()
        assert supervisor.poll() is not None

    async def test_captures_stdout(self) -> None:
        supervisor = ProcessSupervisor(sys.executable, ["-c", "print('hello')"])
        async with supervisor:
            data = await asyncio.wait_for(supervisor.stdout.read(), timeout=5.0)

        assert data.strip() == b"hello"
        assert supervisor.poll() == 0

    async def test_stdin_is_suppressed(self) -> None:
        supervisor = ProcessSupervisor(sys.executable, ["-c", "import sys; print(repr(sys.stdin.read()))"])
        async with supervisor:
            data = await asyncio.wait_for(supervisor.stdout.read(), timeout=5.0)

        assert data.strip() == b"''"

    async def test_context_manager_kills_running_process(self) -> None:
        async with ProcessSupervisor(sys.executable, SLEEPER) as supervisor:
            assert supervisor.poll() is None

        assert supervisor.poll() is not None
        assert supervisor.poll() != 0

    async def test_terminate_after_exit_is_success(self) -> None:
        supervisor = ProcessSupervisor(sys.executable, ["-c", "pass"])
        await supervisor.start()
        await asyncio.wait_for(supervisor.stdout.read(), timeout=5.0)

        await supervisor.terminate()
        await supervisor.terminate()
        assert supervisor.poll() == 0

    async def test_terminate_before_start_is_noop(self) -> None:
        await ProcessSupervisor("never-started").terminate()

    async def test_stdout_before_start_raises(self) -> None:
        with pytest.raises(RuntimeError, match="not been started"):
            _ = ProcessSupervisor(sys.executable).stdout

    async def test_spawn_failure(self, tmp_path) -> None:
        missing = str(tmp_path / "no-such-diskutil")
        supervisor = ProcessSupervisor(missing, ["activity"])

        with pytest.raises(ProcessSpawnError) as exc_info:
            await supervisor.start()
        assert exc_info.value.command == missing
        assert supervisor.pid is None

    async def test_kill_failure_raises_termination_error(self) -> None:
        supervisor = ProcessSupervisor(sys.executable, SLEEPER)
        await supervisor.start()
        process = supervisor._process

        try:
            with patch(
                "mac_disk_monitor.monitor.supervisor.os.kill",
                side_effect=PermissionError("Operation not permitted"),
            ):
                with pytest.raises(ProcessTerminationError) as exc_info:
                    await supervisor.terminate()
            assert exc_info.value.pid == supervisor.pid
        finally:
            process.kill()
            await process.wait()

    async def test_stderr_is_drained(self) -> None:
        script = "import sys; sys.stderr.write('x' * 200000); print('done')"
        supervisor = ProcessSupervisor(sys.executable, ["-c", script], capture_stderr=True)
        async with supervisor:
            data = await asyncio.wait_for(supervisor.stdout.read(), timeout=10.0)

        assert data.strip() == b"done"


# 🔼⚙️🔚
