# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""
pyax25_netstat.core.report.py

Assembly of the "Active AX.25 Sockets" report from a buffered connection table.

The table is walked twice: a scan pass decides the layout and whether any
connection rows exist, and only then a render pass parses the data lines.
No table is produced unless the scan pass finds activity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from .config import MAX_FIELDS
from .layout import SchemaLayout, detect_layout
from .record import format_columns, parse_and_format

logger = logging.getLogger(__name__)

BANNER = "Active AX.25 Sockets"

HEADER_COLUMNS = (
    "Destination",
    "Source",
    "Device",
    "State",
    "Digipeaters",
    "Vs/Vr/Va",
    "Send-Q",
    "Recv-Q",
)


class ReportStatus(Enum):
    """Outcome of building a report"""
    OK = "ok"
    EMPTY = "empty"          # Source has no lines at all
    INACTIVE = "inactive"    # Only a header row, no connections


@dataclass
class SourceScan:
    """Result of the first pass over the connection table."""
    layout: Optional[SchemaLayout]
    line_count: int

    @property
    def is_empty(self) -> bool:
        return self.layout is None

    @property
    def has_activity(self) -> bool:
        if self.layout is None:
            return False
        return self.line_count > (1 if self.layout.has_header_row else 0)


@dataclass
class Report:
    """A built report, ready to print."""
    status: ReportStatus
    layout: Optional[SchemaLayout] = None
    rows: List[str] = field(default_factory=list)

    def render(self) -> List[str]:
        """Return banner, header and rows; empty unless status is OK."""
        if self.status is not ReportStatus.OK:
            return []
        return [BANNER, format_header()] + self.rows


def format_header() -> str:
    """Column header row, laid out like the data rows."""
    return format_columns(*HEADER_COLUMNS)


def scan_source(lines: Sequence[str]) -> SourceScan:
    """
    First pass: detect the layout and count lines.

    Args:
        lines: Connection table lines, in order
    """
    first_line = lines[0] if lines else None
    scan = SourceScan(layout=detect_layout(first_line), line_count=len(lines))
    logger.debug(f"Scanned {scan.line_count} lines, activity={scan.has_activity}")
    return scan


def render_rows(
    lines: Sequence[str],
    layout: SchemaLayout,
    max_fields: int = MAX_FIELDS,
) -> List[str]:
    """
    Second pass: format every data line, in input order.

    The header row of a headered table is skipped, as are blank lines and
    records too short for the layout.
    """
    data_lines = lines[1:] if layout.has_header_row else lines

    rows: List[str] = []
    for line in data_lines:
        line = line.rstrip("\r\n")
        if not line:
            continue
        row = parse_and_format(line, layout, max_fields)
        if row is not None:
            rows.append(row)

    skipped = len(data_lines) - len(rows)
    if skipped:
        logger.debug(f"{skipped} line(s) not shown")
    return rows


def build_report(lines: Sequence[str], max_fields: int = MAX_FIELDS) -> Report:
    """
    Build the report for a buffered connection table.

    Args:
        lines: Connection table lines, in order
        max_fields: Token cap per line

    Returns:
        Report with status EMPTY, INACTIVE or OK
    """
    scan = scan_source(lines)
    if scan.is_empty:
        return Report(status=ReportStatus.EMPTY)
    if not scan.has_activity:
        return Report(status=ReportStatus.INACTIVE, layout=scan.layout)

    rows = render_rows(lines, scan.layout, max_fields)
    logger.info(f"{len(rows)} active AX.25 connection(s) in {scan.layout.name} layout")
    return Report(status=ReportStatus.OK, layout=scan.layout, rows=rows)
