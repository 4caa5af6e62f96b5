# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""
pyax25_netstat.core.config.py

Runtime configuration for reading the kernel AX.25 connection table.

Values can be given directly, or picked up from the environment:
- AX25_PROC_FILE: path of the connection table (default /proc/net/ax25)
- AX25_NETSTAT_COMMAND: command whose stdout replaces the file
- AX25_NETSTAT_LOG_LEVEL: logging level name
"""

from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

PROC_AX25_FILE = "/proc/net/ax25"
MAX_FIELDS = 32

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class NetstatConfig:
    """
    Configuration for one report run.

    Attributes:
        proc_path: Connection table file to read
        command: Optional argv; when set its stdout is read instead of proc_path
        max_fields: Maximum number of whitespace-separated tokens kept per line
        log_level: Logging level name
    """

    proc_path: str = PROC_AX25_FILE
    command: Optional[List[str]] = None
    max_fields: int = MAX_FIELDS
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.proc_path:
            raise ConfigError("proc_path must not be empty")
        if self.command is not None and len(self.command) == 0:
            raise ConfigError("command must contain at least the program name")
        if self.max_fields < 1:
            raise ConfigError(f"max_fields must be positive, got {self.max_fields}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level '{self.log_level}'")

    @property
    def source_name(self) -> str:
        """Human readable name of the configured data source."""
        if self.command:
            return " ".join(self.command)
        return self.proc_path

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NetstatConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)
        """
        env = os.environ if environ is None else environ

        command = None
        raw_command = env.get("AX25_NETSTAT_COMMAND")
        if raw_command:
            command = split_command(raw_command)

        config = cls(
            proc_path=env.get("AX25_PROC_FILE", PROC_AX25_FILE),
            command=command,
            log_level=env.get("AX25_NETSTAT_LOG_LEVEL", "WARNING"),
        )
        logger.debug(f"Configuration from environment: {config}")
        return config


def split_command(raw: str) -> List[str]:
    """Split a shell-style command string into argv."""
    try:
        argv = shlex.split(raw)
    except ValueError as e:
        raise ConfigError(f"Cannot parse command '{raw}': {e}") from e
    if not argv:
        raise ConfigError("command must contain at least the program name")
    return argv


DEFAULT_CONFIG = NetstatConfig()
