"""
pyax25_netstat Utilities Module

Provides logging setup shared by the library and the command line tool.

License: LGPLv3.0
Copyright (C) 2025-2026 Kris Kirby, KE4AHR
"""

import logging
from typing import List

__all__: List[str] = [
    'configure_logging'
]

LOG_FORMAT = '%(asctime)s %(name)s %(levelname)s: %(message)s'


def configure_logging(level: str = "INFO") -> None:
    """
    Configure package-wide logging.

    Log records go to stderr so they never mix with the report on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT
    )
