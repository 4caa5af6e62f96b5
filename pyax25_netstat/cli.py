# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""
pyax25_netstat.cli.py

netstat-ax25: print the active AX.25 sockets of the running kernel.

Run with no arguments to read /proc/net/ax25:

    netstat-ax25

Options select another file, read the table from a command's output
(for example over ssh) or turn on debug logging. Exit status is 0 for a
printed table and for an empty or idle table, 1 when the table cannot be
read at all.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .core.config import NetstatConfig, split_command
from .core.exceptions import AX25NetstatError
from .core.report import ReportStatus, build_report
from .interfaces.source import create_source
from .utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

EMPTY_MESSAGE = "Warning: File {source} is empty or unreadable. Is AX25 active ?"
INACTIVE_MESSAGE = "Warning: No active AX.25 connections currently."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netstat-ax25",
        description="Display active AX.25 sockets from the kernel connection table.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="connection table to read (default: /proc/net/ax25)",
    )
    source.add_argument(
        "-c", "--command",
        metavar="CMD",
        help="read the table from the output of CMD, e.g. 'ssh node cat /proc/net/ax25'",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log debug information to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def config_from_args(args: argparse.Namespace, base: NetstatConfig) -> NetstatConfig:
    """Apply command line options on top of a base configuration."""
    changes = {}
    if args.file:
        changes["proc_path"] = args.file
        changes["command"] = None
    if args.command:
        changes["command"] = split_command(args.command)
    if args.verbose:
        changes["log_level"] = "DEBUG"
    return dataclasses.replace(base, **changes)


def run(config: NetstatConfig, out: Optional[TextIO] = None) -> int:
    """
    Read the configured source and print the report.

    Returns:
        Process exit status

    Raises:
        SourceUnavailableError: If the table cannot be read
    """
    if out is None:
        out = sys.stdout
    with create_source(config) as source:
        lines = source.read_lines()

    report = build_report(lines, config.max_fields)

    if report.status is ReportStatus.EMPTY:
        print(EMPTY_MESSAGE.format(source=config.source_name), file=out)
        return EXIT_OK
    if report.status is ReportStatus.INACTIVE:
        print(INACTIVE_MESSAGE, file=out)
        return EXIT_OK

    for line in report.render():
        print(line, file=out)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point"""
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args, NetstatConfig.from_env())
    except AX25NetstatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(config.log_level)
    logger.debug(f"Reading AX.25 connections from {config.source_name}")

    try:
        return run(config)
    except AX25NetstatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
