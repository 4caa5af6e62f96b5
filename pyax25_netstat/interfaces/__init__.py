"""
pyax25_netstat Data Sources

Provides:
- Direct file reader for /proc/net/ax25
- Command output reader (e.g. "cat /proc/net/ax25" on a remote host)

License: LGPLv3.0
Copyright (C) 2025-2026 Kris Kirby, KE4AHR
"""

from .source import (
    LineSource,
    ProcFileSource,
    CommandSource,
    create_source,
    split_lines
)

__all__ = [
    'LineSource',
    'ProcFileSource',
    'CommandSource',
    'create_source',
    'split_lines'
]
