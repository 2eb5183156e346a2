#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Incremental line reading with a bounded wait per read."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Protocol

from mac_disk_monitor.config.defaults import (
    DEFAULT_BANNER_PREFIX,
    DEFAULT_ENCODING,
    DEFAULT_MAX_LINE_LENGTH,
    DEFAULT_READ_CHUNK_SIZE,
    DEFAULT_READ_TIMEOUT,
)
from mac_disk_monitor.errors import LineDecodeError, StreamReadError


class ByteStream(Protocol):
    async def read(self, n: int = -1) -> bytes: ...


class LineReader:
    """Accumulates bytes from a stream and hands them out one line at a time.

    Each call to ``read_line`` performs at most one underlying read, bounded by
    ``timeout``, so a caller polling an idle process is never stuck for long.
    """

    def __init__(
        self,
        stream: ByteStream,
        *,
        timeout: float = DEFAULT_READ_TIMEOUT,
        chunk_size: int = DEFAULT_READ_CHUNK_SIZE,
        max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
        encoding: str = DEFAULT_ENCODING,
        skip_prefixes: Sequence[str] = (DEFAULT_BANNER_PREFIX,),
    ) -> None:
        self._stream = stream
        self._timeout = timeout
        self._chunk_size = chunk_size
        self._max_line_length = max_line_length
        self._encoding = encoding
        self._skip_prefixes = tuple(p for p in skip_prefixes if p)
        self._buffer = bytearray()
        self._eof = False

    @property
    def at_eof(self) -> bool:
        """True once the stream has ended and every buffered byte was handed out."""
        return self._eof and not self._buffer

    @property
    def has_buffered_line(self) -> bool:
        return b"\n" in self._buffer

    async def read_line(self) -> str | None:
        """Return the next line, or None if no complete line is available yet.

        Banner and blank lines are consumed and reported as None.

        Raises:
            LineDecodeError: If the line's bytes are not valid text
            StreamReadError: If the underlying stream fails, or a line grows
                past ``max_line_length`` without a newline
        """
        raw = self._take_line()
        if raw is None and not self._eof:
            await self._fill()
            raw = self._take_line()
        if raw is None and len(self._buffer) > self._max_line_length:
            raise StreamReadError(
                f"Line exceeds {self._max_line_length} bytes without a newline"
            )
        if raw is None and self._eof and self._buffer:
            raw = bytes(self._buffer)
            self._buffer.clear()
        if raw is None:
            return None

        try:
            line = raw.decode(self._encoding)
        except UnicodeDecodeError as e:
            raise LineDecodeError(raw, self._encoding, e.reason) from e

        line = line.rstrip("\r\n")
        if not line.strip() or line.startswith(self._skip_prefixes):
            return None
        return line

    def _take_line(self) -> bytes | None:
        end = self._buffer.find(b"\n")
        if end < 0:
            return None
        raw = bytes(self._buffer[: end + 1])
        del self._buffer[: end + 1]
        return raw

    async def _fill(self) -> None:
        try:
            chunk = await asyncio.wait_for(self._stream.read(self._chunk_size), self._timeout)
        except TimeoutError:
            return
        except OSError as e:
            raise StreamReadError(f"Failed to read process output: {e}") from e
        if chunk:
            self._buffer.extend(chunk)
        else:
            self._eof = True


# 🔼⚙️🔚
