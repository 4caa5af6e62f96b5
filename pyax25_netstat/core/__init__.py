"""
pyax25_netstat Core Module - AX.25 connection table parsing

Contains:
- Layout detection for legacy and headered /proc/net/ax25 tables
- Record parsing and netstat-style row formatting
- State labels and report assembly

License: LGPLv3.0
Copyright (C) 2025-2026 Kris Kirby, KE4AHR
"""

# Layouts
from .layout import (
    SchemaLayout,
    LEGACY_LAYOUT,
    HEADERED_LAYOUT,
    detect_layout
)

# Records
from .record import (
    ConnectionRecord,
    parse_line,
    format_row,
    format_digipeaters,
    format_sequence
)
from .states import (
    StateLabel,
    AX25_STATE_LABELS,
    state_label
)

# Report
from .report import (
    Report,
    ReportStatus,
    build_report,
    format_header
)

# Configuration
from .config import NetstatConfig, DEFAULT_CONFIG

# Exceptions
from .exceptions import (
    AX25NetstatError,
    SourceUnavailableError,
    ConfigError
)

# Public API
__all__ = [
    # Layouts
    'SchemaLayout',
    'LEGACY_LAYOUT',
    'HEADERED_LAYOUT',
    'detect_layout',

    # Records
    'ConnectionRecord',
    'parse_line',
    'format_row',
    'format_digipeaters',
    'format_sequence',
    'StateLabel',
    'AX25_STATE_LABELS',
    'state_label',

    # Report
    'Report',
    'ReportStatus',
    'build_report',
    'format_header',

    # Configuration
    'NetstatConfig',
    'DEFAULT_CONFIG',

    # Exceptions
    'AX25NetstatError',
    'SourceUnavailableError',
    'ConfigError'
]
