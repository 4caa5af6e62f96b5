# pyax25_netstat/__init__.py
"""
pyax25_netstat - netstat-style viewer for Linux AX.25 connections

Provides:
- Detection of the legacy and headered /proc/net/ax25 layouts
- Connection record parsing and fixed-width report rows
- File and command line sources for the connection table

License: LGPLv3.0
Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""

__version__ = "0.1.0"

# Core parsing and formatting
from .core.layout import (
    SchemaLayout,
    LEGACY_LAYOUT,
    HEADERED_LAYOUT,
    detect_layout
)
from .core.record import (
    ConnectionRecord,
    parse_line,
    format_row
)
from .core.states import state_label
from .core.report import (
    Report,
    ReportStatus,
    build_report
)
from .core.config import NetstatConfig

# Data sources
from .interfaces.source import (
    LineSource,
    ProcFileSource,
    CommandSource,
    create_source
)

# Exceptions
from .core.exceptions import (
    AX25NetstatError,
    SourceUnavailableError,
    ConfigError
)

# Utilities
from .utils import configure_logging

__all__ = [
    # Core
    'SchemaLayout',
    'LEGACY_LAYOUT',
    'HEADERED_LAYOUT',
    'detect_layout',
    'ConnectionRecord',
    'parse_line',
    'format_row',
    'state_label',
    'Report',
    'ReportStatus',
    'build_report',
    'NetstatConfig',

    # Sources
    'LineSource',
    'ProcFileSource',
    'CommandSource',
    'create_source',

    # Exceptions
    'AX25NetstatError',
    'SourceUnavailableError',
    'ConfigError',

    # Utilities
    'configure_logging',
    'get_version',

    # Metadata
    '__version__'
]

def get_version() -> str:
    """Return the package version."""
    return __version__
