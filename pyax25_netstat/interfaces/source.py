# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""
pyax25_netstat.interfaces.source.py

Line sources for the kernel AX.25 connection table.

Provides:
- LineSource: abstract base for anything that yields the table as lines
- ProcFileSource: reads /proc/net/ax25 (or another file) directly
- CommandSource: runs a command such as "cat /proc/net/ax25" and reads stdout

Sources are read once and buffered, so the report can make its two passes
over a pipe that cannot be rewound.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..core.config import PROC_AX25_FILE, NetstatConfig
from ..core.exceptions import SourceUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND_TIMEOUT = 10.0


def split_lines(text: str) -> List[str]:
    """Split text into lines on newline only, without line terminators."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class LineSource(ABC):
    """
    Abstract base class for connection table sources.

    Subclasses implement _read_text(); read_lines() buffers the result.
    """

    def __init__(self):
        self._lines: Optional[List[str]] = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Name used in messages"""

    @abstractmethod
    def _read_text(self) -> str:
        """
        Fetch the whole table.

        Raises:
            SourceUnavailableError: If the table cannot be obtained
        """

    def read_lines(self) -> List[str]:
        """
        Return the table as a list of lines, reading it on first use.

        Raises:
            SourceUnavailableError: If the table cannot be obtained
        """
        if self._lines is None:
            self._lines = split_lines(self._read_text())
            logger.debug(f"Read {len(self._lines)} lines from {self.name}")
        return list(self._lines)

    def close(self) -> None:
        """Drop the buffered lines"""
        self._lines = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class ProcFileSource(LineSource):
    """
    Read the table straight from a file.

    Args:
        path: File to read (default /proc/net/ax25)
    """

    def __init__(self, path: str = PROC_AX25_FILE):
        super().__init__()
        self.path = path

    @property
    def name(self) -> str:
        return self.path

    def _read_text(self) -> str:
        try:
            with open(self.path, "r", encoding="ascii", errors="replace") as f:
                return f.read()
        except OSError as e:
            logger.error(f"Cannot open {self.path}: {e}")
            raise SourceUnavailableError(self.path, e.strerror or str(e)) from e


class CommandSource(LineSource):
    """
    Read the table from the standard output of a command.

    Args:
        argv: Command and arguments, e.g. ["/bin/cat", "/proc/net/ax25"]
        timeout: Seconds to wait for the command to finish
    """

    def __init__(self, argv: Sequence[str], timeout: float = DEFAULT_COMMAND_TIMEOUT):
        super().__init__()
        if not argv:
            raise ValueError("Command must contain at least the program name")
        self.argv = list(argv)
        self.timeout = timeout

    @property
    def name(self) -> str:
        return " ".join(self.argv)

    def _read_text(self) -> str:
        logger.debug(f"Running '{self.name}'")
        try:
            result = subprocess.run(
                self.argv,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            logger.error(f"Command not found: {self.argv[0]}")
            raise SourceUnavailableError(self.name, f"'{self.argv[0]}' not found") from e
        except subprocess.TimeoutExpired as e:
            logger.error(f"Command timed out after {self.timeout}s: {self.name}")
            raise SourceUnavailableError(self.name, "command timed out") from e
        except OSError as e:
            logger.error(f"Cannot run '{self.name}': {e}")
            raise SourceUnavailableError(self.name, str(e)) from e

        if result.returncode != 0:
            reason = result.stderr.strip() or f"exit status {result.returncode}"
            logger.error(f"'{self.name}' failed: {reason}")
            raise SourceUnavailableError(self.name, reason)

        return result.stdout


def create_source(config: NetstatConfig) -> LineSource:
    """
    Create the line source described by a configuration.

    A configured command takes precedence over the proc file path.
    """
    if config.command:
        return CommandSource(config.command)
    return ProcFileSource(config.proc_path)
