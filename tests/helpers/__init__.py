#
# SPDX-FileCopyrightText: Copyright (c) provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test helpers for mac-disk-monitor.

This package contains an in-memory process double for engine tests and
builders for diskutil activity lines."""

from __future__ import annotations

# 🔼⚙️🔚
