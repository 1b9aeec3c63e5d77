"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag (where .textparser/config is looked up)."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Override project root used for configuration lookup",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )


def add_delimiter_flags(parser: argparse.ArgumentParser) -> None:
    """Add --start/--end marker overrides and --strict/--no-strict."""
    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Placeholder start marker (default from config: '*(')",
    )
    parser.add_argument(
        "--end",
        type=str,
        default=None,
        help="Placeholder end marker (default from config: ')*')",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Reject a start marker found inside an open placeholder (default from config)",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add --json, --repo-root and --verbose."""
    add_json_flag(parser)
    add_repo_root_flag(parser)
    add_verbose_flag(parser)
