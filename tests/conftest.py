# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""
tests/conftest.py

Shared fixtures: sample /proc/net/ax25 tables in both layouts.
"""

import logging
from typing import Generator, List

import pytest

# Old kernels: no header, digipeaters appended to the destination with commas
LEGACY_LINE = (
    "12345678 ax0 KE4AHR-1 N0CALL,DIGI1,DIGI2 3 2 1 2 "
    "3 10 1 3 300 300 0 20 0 10 5 7 256 512 0 4711"
)

# Newer kernels: header row, digipeaters in columns 4 and 5
HEADER_LINE = (
    "magic dev src_addr dest_addr digi1 digi2 st vs vr va "
    "t1 t1 t2 t2 t3 t3 idle idle sndq rcvq inode"
)
HEADERED_LINE = (
    "c1a2b3c4 ax0 KE4AHR-1 N0CALL * * 3 2 1 2 "
    "3 10 1 3 300 300 0 20 256 0 12345"
)


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Generator[None, None, None]:
    """Configure logging for all tests"""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    yield


@pytest.fixture
def legacy_line() -> str:
    return LEGACY_LINE


@pytest.fixture
def headered_line() -> str:
    return HEADERED_LINE


@pytest.fixture
def legacy_table() -> List[str]:
    """Legacy table with one digipeated connection"""
    return [LEGACY_LINE]


@pytest.fixture
def headered_table() -> List[str]:
    """Headered table with one direct connection"""
    return [HEADER_LINE, HEADERED_LINE]


@pytest.fixture
def proc_file(tmp_path):
    """Write a table to a temporary file and return its path"""
    def _write(lines: List[str]) -> str:
        path = tmp_path / "ax25"
        path.write_text("".join(line + "\n" for line in lines))
        return str(path)
    return _write
