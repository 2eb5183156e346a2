#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Line grammar for ``diskutil activity`` output.

A line looks like::

    ***DiskAppeared ('disk4', DAVolumePath = 'file:///Volumes/USB/', DAVolumeKind = 'msdos', DAVolumeName = 'USB') Time=20220108-20:22:05.000001

Each field has its own extractor, and a field whose pattern does not match is
simply left unset. Event kinds carry different subsets of fields (DiskPeek has
no volume metadata, DiskMountApproval adds a Comment=), so one expression per
field copes with all of them.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from mac_disk_monitor.events.model import Event
from mac_disk_monitor.events.timestamp import parse_timestamp

NULL_SENTINEL = "<null>"
NO_BSD_NAME = "(no BSD name)"

_HEADER_RE = re.compile(r"^[*]{3}(\w+)\s*\('?([^,']+)'?.*?\)\s*(Comment=(\S+))?\s*Time=(\S+)")
_VOLUME_PATH_RE = re.compile(r"DAVolumePath\s*=\s*'([^']+)'")
_VOLUME_KIND_RE = re.compile(r"DAVolumeKind\s*=\s*'([^']+)'")
_VOLUME_NAME_RE = re.compile(r"DAVolumeName\s*=\s*'([^']+)'")


class BaseMetadata(NamedTuple):
    """Fields taken from the ``***Name (subject) ... Time=`` header."""

    name: str
    bsd_name: str | None
    comment: str | None
    time: str


def extract_base_metadata(line: str) -> BaseMetadata | None:
    match = _HEADER_RE.match(line)
    if match is None:
        return None
    name, subject, _, comment, time = match.groups()
    bsd_name = None if subject == NO_BSD_NAME else subject
    return BaseMetadata(name=name, bsd_name=bsd_name, comment=comment, time=time)


def _extract_volume_field(pattern: re.Pattern[str], line: str) -> str | None:
    match = pattern.search(line)
    if match is None:
        return None
    value = match.group(1)
    return None if value == NULL_SENTINEL else value


def extract_volume_path(line: str) -> str | None:
    return _extract_volume_field(_VOLUME_PATH_RE, line)


def extract_volume_kind(line: str) -> str | None:
    return _extract_volume_field(_VOLUME_KIND_RE, line)


def extract_volume_name(line: str) -> str | None:
    return _extract_volume_field(_VOLUME_NAME_RE, line)


def parse_line(line: str) -> Event:
    """Build an Event from one line of monitoring output.

    A line without a recognisable header still produces an Event: it has an
    empty name and the current time, plus whatever volume fields matched.

    Raises:
        TimestampFormatError: If the header's Time= token is malformed
    """
    line = line.strip()
    fields: dict[str, object] = {
        "volume_path": extract_volume_path(line),
        "volume_kind": extract_volume_kind(line),
        "volume_name": extract_volume_name(line),
    }

    header = extract_base_metadata(line)
    if header is not None:
        fields.update(
            name=header.name,
            bsd_name=header.bsd_name,
            comment=header.comment,
            time=parse_timestamp(header.time),
            raw_time=header.time,
        )

    return Event(**fields)


# 🔼⚙️🔚
