#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration models and TOML loading for mac-disk-monitor."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from attrs import define, field, fields, validators
from provide.foundation.logger import get_logger

from mac_disk_monitor.config.defaults import (
    DEFAULT_ACTION_POLL_INTERVAL,
    DEFAULT_ARGS,
    DEFAULT_BANNER_PREFIX,
    DEFAULT_COMMAND,
    DEFAULT_ENCODING,
    DEFAULT_EVENT_QUEUE_SIZE,
    DEFAULT_KILL_TIMEOUT,
    DEFAULT_MAX_LINE_LENGTH,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_READ_CHUNK_SIZE,
    DEFAULT_READ_TIMEOUT,
    OUTPUT_FORMATS,
)
from mac_disk_monitor.errors import ConfigurationError

log = get_logger(__name__)


def _positive(instance: Any, attribute: Any, value: float) -> None:
    if value <= 0:
        raise ValueError(f"{attribute.name} must be positive, got {value}")


def _non_negative(instance: Any, attribute: Any, value: int) -> None:
    if value < 0:
        raise ValueError(f"{attribute.name} must be non-negative, got {value}")


def _non_empty(instance: Any, attribute: Any, value: str) -> None:
    if not value:
        raise ValueError(f"{attribute.name} must not be empty")


def _known_format(instance: Any, attribute: Any, value: str) -> None:
    if value not in OUTPUT_FORMATS:
        raise ValueError(f"{attribute.name} must be one of {', '.join(OUTPUT_FORMATS)}, got {value!r}")


def _to_args(value: Any) -> tuple[str, ...]:
    # tuple("activity") would split the string into characters
    if isinstance(value, str):
        raise ValueError(f"args must be a list of strings, got {value!r}")
    return tuple(value)


@define(frozen=True)
class EngineConfig:
    """Settings for the process supervisor, the reader and the engine loop."""

    command: str = field(default=DEFAULT_COMMAND, validator=_non_empty)
    args: tuple[str, ...] = field(
        default=DEFAULT_ARGS,
        converter=_to_args,
        validator=validators.deep_iterable(validators.instance_of(str)),
    )
    read_timeout: float = field(default=DEFAULT_READ_TIMEOUT, validator=_positive)
    action_poll_interval: float = field(default=DEFAULT_ACTION_POLL_INTERVAL, validator=_positive)
    read_chunk_size: int = field(default=DEFAULT_READ_CHUNK_SIZE, validator=_positive)
    max_line_length: int = field(default=DEFAULT_MAX_LINE_LENGTH, validator=_positive)
    event_queue_size: int = field(default=DEFAULT_EVENT_QUEUE_SIZE, validator=_non_negative)
    capture_stderr: bool = field(default=False)
    kill_timeout: float = field(default=DEFAULT_KILL_TIMEOUT, validator=_positive)
    encoding: str = field(default=DEFAULT_ENCODING, validator=_non_empty)
    banner_prefix: str = field(default=DEFAULT_BANNER_PREFIX)


@define(frozen=True)
class OutputConfig:
    """Presentation settings used by the CLI."""

    format: str = field(default=DEFAULT_OUTPUT_FORMAT, validator=_known_format)


@define(frozen=True)
class MonitorConfig:
    """Top-level configuration."""

    engine: EngineConfig = field(factory=EngineConfig)
    output: OutputConfig = field(factory=OutputConfig)


def _build_section(cls: type, section: str, data: Any) -> Any:
    if not isinstance(data, dict):
        raise ConfigurationError(f"[{section}] must be a table")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown key(s) in [{section}]: {', '.join(unknown)}")
    try:
        return cls(**data)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid [{section}] configuration: {e}") from e


def load_config(path: Path) -> MonitorConfig:
    """Load a MonitorConfig from a TOML file.

    Args:
        path: Path to the TOML configuration file

    Returns:
        The parsed configuration; missing sections fall back to defaults

    Raises:
        ConfigurationError: If the file is unreadable, not TOML, or holds invalid values
    """
    path = Path(path)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Configuration file {path} is not valid TOML: {e}") from e

    unknown = sorted(set(data) - {"engine", "output"})
    if unknown:
        raise ConfigurationError(f"Unknown section(s) in {path}: {', '.join(unknown)}")

    config = MonitorConfig(
        engine=_build_section(EngineConfig, "engine", data.get("engine", {})),
        output=_build_section(OutputConfig, "output", data.get("output", {})),
    )
    log.debug("Configuration loaded", path=str(path), command=config.engine.command)
    return config


# 🔼⚙️🔚
