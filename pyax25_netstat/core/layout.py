# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""
pyax25_netstat.core.layout.py

Column layouts of /proc/net/ax25 and detection of the one in use.

Two layouts exist in the wild:
- legacy: no header row, destination token carries comma-separated
  digipeaters, 24 fields per line
- headered: a descriptive header row first, digipeaters in their own
  columns ("*" when unused), 21 fields per line

The layout is decided once from the first line of the table and then passed
to every record parse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# Fixed positions shared by both layouts
INTERFACE_INDEX = 1
SOURCE_INDEX = 2
DESTINATION_INDEX = 3

# Headered layout only
DIGIPEATER1_INDEX = 4
DIGIPEATER2_INDEX = 5

NO_DIGIPEATER = "*"


@dataclass(frozen=True)
class SchemaLayout:
    """Token positions for one connection table layout."""

    has_header_row: bool
    min_field_count: int
    state_index: int
    send_seq_index: int
    recv_seq_index: int
    ack_seq_index: int
    send_queue_index: int
    recv_queue_index: int

    @property
    def name(self) -> str:
        return "headered" if self.has_header_row else "legacy"


LEGACY_LAYOUT = SchemaLayout(
    has_header_row=False,
    min_field_count=24,
    state_index=4,
    send_seq_index=5,
    recv_seq_index=6,
    ack_seq_index=7,
    send_queue_index=21,
    recv_queue_index=22,
)

HEADERED_LAYOUT = SchemaLayout(
    has_header_row=True,
    min_field_count=21,
    state_index=6,
    send_seq_index=7,
    recv_seq_index=8,
    ack_seq_index=9,
    send_queue_index=18,
    recv_queue_index=19,
)


def detect_layout(first_line: Optional[str]) -> Optional[SchemaLayout]:
    """
    Classify the connection table from its first line.

    Args:
        first_line: First line of the table, or None when the table is empty

    Returns:
        LEGACY_LAYOUT when the line starts with a digit after leading
        whitespace, HEADERED_LAYOUT otherwise, None for an empty table
    """
    if first_line is None:
        logger.debug("No first line, connection table is empty")
        return None

    stripped = first_line.lstrip()
    if stripped[:1].isdigit() and stripped[:1].isascii():
        layout = LEGACY_LAYOUT
    else:
        layout = HEADERED_LAYOUT

    logger.debug(f"Detected {layout.name} layout")
    return layout
