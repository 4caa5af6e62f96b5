# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""
pyax25_netstat.core.record.py

Parsing and formatting of single /proc/net/ax25 connection records.

Handles:
- Whitespace tokenization with a cap on kept tokens
- Positional field extraction for the legacy and headered layouts
- Digipeater chain parsing (comma-separated or explicit columns)
- Vs/Vr/Va and Send-Q/Recv-Q rendering
- netstat-style fixed-width row output

Nothing here raises on bad input: a line too short for its layout is
dropped and numeric fields that do not parse read as 0.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import MAX_FIELDS
from .layout import (
    DESTINATION_INDEX,
    DIGIPEATER1_INDEX,
    DIGIPEATER2_INDEX,
    INTERFACE_INDEX,
    NO_DIGIPEATER,
    SOURCE_INDEX,
    SchemaLayout,
)
from .states import state_label

logger = logging.getLogger(__name__)

ROW_FORMAT = "%-12s %-12s %-7s %-12s %-21s %-12s %7s %7s"

DIGIPEATER_WIDTH = 10
DIGIS_MAX_LEN = 24
SEQUENCE_MAX_LEN = 11

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class ConnectionRecord:
    """One active AX.25 connection as listed by the kernel."""

    destination: str
    source: str
    interface: str
    state_code: int
    send_seq: int
    recv_seq: int
    ack_seq: int
    send_queue: str
    recv_queue: str
    digipeater1: Optional[str] = None
    digipeater2: Optional[str] = None

    @property
    def state(self) -> str:
        return state_label(self.state_code)

    @property
    def digipeaters(self) -> str:
        return format_digipeaters(self.digipeater1, self.digipeater2)

    @property
    def sequence(self) -> str:
        return format_sequence(self.send_seq, self.recv_seq, self.ack_seq)


def tokenize(line: str, max_fields: int = MAX_FIELDS) -> List[str]:
    """Split a line on runs of whitespace, keeping at most max_fields tokens."""
    return line.split()[:max_fields]


def to_int(token: str) -> int:
    """
    Read the leading integer of a token, atoi style.

    "12" -> 12, "-3x" -> -3, "abc" -> 0
    """
    match = _LEADING_INT.match(token)
    if match is None:
        return 0
    return int(match.group(1))


def split_digipeater_chain(raw: str) -> Tuple[str, Optional[str], Optional[str]]:
    """
    Split a legacy destination token "CALL,DIGI1,DIGI2".

    Returns:
        (destination, digipeater1, digipeater2); anything after the second
        comma stays part of digipeater2
    """
    destination, comma, chain = raw.partition(",")
    if not comma:
        return destination, None, None

    digi1, comma, digi2 = chain.partition(",")
    return destination, digi1, (digi2 if comma else None)


def _column_digipeater(token: str) -> Optional[str]:
    return None if token == NO_DIGIPEATER else token


def parse_line(
    line: str,
    layout: SchemaLayout,
    max_fields: int = MAX_FIELDS,
) -> Optional[ConnectionRecord]:
    """
    Parse one data line of the connection table.

    Args:
        line: Raw data line
        layout: Layout detected for this table
        max_fields: Token cap per line

    Returns:
        ConnectionRecord, or None if the line has too few fields
    """
    fields = tokenize(line, max_fields)
    if len(fields) < layout.min_field_count:
        logger.debug(
            f"Skipping record with {len(fields)} fields "
            f"(need {layout.min_field_count}): {line!r}"
        )
        return None

    if layout.has_header_row:
        destination = fields[DESTINATION_INDEX]
        digi1 = _column_digipeater(fields[DIGIPEATER1_INDEX])
        digi2 = _column_digipeater(fields[DIGIPEATER2_INDEX])
    else:
        destination, digi1, digi2 = split_digipeater_chain(fields[DESTINATION_INDEX])

    return ConnectionRecord(
        destination=destination,
        source=fields[SOURCE_INDEX],
        interface=fields[INTERFACE_INDEX],
        state_code=to_int(fields[layout.state_index]),
        send_seq=to_int(fields[layout.send_seq_index]),
        recv_seq=to_int(fields[layout.recv_seq_index]),
        ack_seq=to_int(fields[layout.ack_seq_index]),
        send_queue=fields[layout.send_queue_index],
        recv_queue=fields[layout.recv_queue_index],
        digipeater1=digi1,
        digipeater2=digi2,
    )


def format_digipeaters(digi1: Optional[str], digi2: Optional[str]) -> str:
    """
    Render the digipeater column.

    No digipeater gives "*", one gives the call plus a "-" filler for the
    second slot, two give both calls in 10-character sub-fields.
    """
    if digi1 is None:
        return NO_DIGIPEATER

    if digi2 is not None:
        text = f"{digi1:<{DIGIPEATER_WIDTH}}{digi2:<{DIGIPEATER_WIDTH}}"
    else:
        text = f"{digi1:<{DIGIPEATER_WIDTH}}    -      "
    return text[:DIGIS_MAX_LEN]


def format_sequence(vs: int, vr: int, va: int) -> str:
    """Render Vs/Vr/Va as zero-padded three digit counters, e.g. 001/002/000."""
    return f"{vs:03d}/{vr:03d}/{va:03d}"[:SEQUENCE_MAX_LEN]


def format_columns(*columns: str) -> str:
    """Lay out the eight report columns with the netstat widths."""
    return ROW_FORMAT % columns


def format_row(record: ConnectionRecord) -> str:
    """Render one record as a report row."""
    return format_columns(
        record.destination,
        record.source,
        record.interface,
        record.state,
        record.digipeaters,
        record.sequence,
        record.send_queue,
        record.recv_queue,
    )


def parse_and_format(
    line: str,
    layout: SchemaLayout,
    max_fields: int = MAX_FIELDS,
) -> Optional[str]:
    """Parse a data line and render it, or return None if it is skipped."""
    record = parse_line(line, layout, max_fields)
    if record is None:
        return None
    return format_row(record)
