# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""
pyax25_netstat.core.exceptions.py

Exception hierarchy for the AX.25 connection table reader.

Only conditions that stop the report are exceptions. An empty source or a
source without connections is a normal outcome (see core.report.ReportStatus),
and short records are skipped by the parser without raising.
"""


class AX25NetstatError(Exception):
    """Base exception for all pyax25_netstat errors"""


class SourceUnavailableError(AX25NetstatError):
    """The connection table could not be opened, read or produced"""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read AX.25 connection table from {source}: {reason}")


class ConfigError(AX25NetstatError):
    """Invalid configuration value"""
