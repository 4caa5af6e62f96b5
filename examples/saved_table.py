# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""
examples/saved_table.py

Inspect a saved copy of /proc/net/ax25 with the library API.

This example demonstrates:
- Reading a table from a file (or the live /proc entry)
- Detecting its layout
- Working with ConnectionRecord objects instead of formatted rows

Run with:
    python examples/saved_table.py [path]
"""

import sys
import logging

from pyax25_netstat import (
    ProcFileSource,
    SourceUnavailableError,
    configure_logging,
    detect_layout,
    parse_line,
)

logger = logging.getLogger("saved_table")


def main() -> int:
    path = sys.argv[1] if len(sys.argv) > 1 else "/proc/net/ax25"
    configure_logging("INFO")

    try:
        with ProcFileSource(path) as source:
            lines = source.read_lines()
    except SourceUnavailableError as e:
        logger.error(str(e))
        return 1

    layout = detect_layout(lines[0] if lines else None)
    if layout is None:
        print(f"{path} is empty")
        return 0

    print(f"{path}: {layout.name} layout, {len(lines)} line(s)")
    data_lines = lines[1:] if layout.has_header_row else lines

    for line in data_lines:
        record = parse_line(line, layout)
        if record is None:
            continue
        via = [d for d in (record.digipeater1, record.digipeater2) if d]
        route = f" via {','.join(via)}" if via else ""
        print(f"{record.source} -> {record.destination}{route} on {record.interface}: "
              f"{record.state} (V(S)={record.send_seq} V(R)={record.recv_seq} V(A)={record.ack_seq})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
