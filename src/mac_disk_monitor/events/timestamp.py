#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Parsing and formatting of diskutil activity timestamps."""

from __future__ import annotations

import re
from datetime import datetime

from mac_disk_monitor.errors import TimestampFormatError

TIMESTAMP_FORMAT = "%Y%m%d-%H:%M:%S.%f"

# Six fractional digits are required; three more (nanoseconds) are tolerated
# and truncated, since datetime only holds microseconds.
_TIMESTAMP_RE = re.compile(r"^(\d{8}-\d{2}:\d{2}:\d{2})\.(\d{6})(\d{3})?$")


def parse_timestamp(token: str) -> datetime:
    """Parse a ``Time=`` token such as ``20220108-20:22:05.000001``.

    Raises:
        TimestampFormatError: If the token does not match the fixed format
    """
    match = _TIMESTAMP_RE.match(token)
    if match is None:
        raise TimestampFormatError(token)
    seconds, micros, _nanos = match.groups()
    try:
        moment = datetime.strptime(seconds, "%Y%m%d-%H:%M:%S")
    except ValueError as e:
        raise TimestampFormatError(token, str(e)) from e
    return moment.replace(microsecond=int(micros))


def format_timestamp(moment: datetime) -> str:
    """Render a datetime in the ``YYYYMMDD-HH:MM:SS.ffffff`` form."""
    return moment.strftime(TIMESTAMP_FORMAT)


# 🔼⚙️🔚
