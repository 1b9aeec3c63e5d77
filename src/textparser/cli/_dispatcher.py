"""
Auto-discovery CLI dispatcher for textparser.

Scans ``commands/`` for top-level commands and other subfolders for command
domains (``textparser config show``). Adding a command means adding a module
with ``SUMMARY``, ``register_args`` and ``main``.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from textparser.core.exceptions import TextParserError

logger = logging.getLogger(__name__)


def _load_command(module_name: str, fallback_summary: str) -> dict[str, Any] | None:
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        print(f"Warning: Could not import {module_name}: {e}", file=sys.stderr)
        return None
    return {
        "module": module,
        "summary": getattr(module, "SUMMARY", fallback_summary),
        "register_args": getattr(module, "register_args", None),
        "main": getattr(module, "main", None),
    }


@lru_cache(maxsize=1)
def discover_domains() -> dict[str, Path]:
    """Discover CLI domain subfolders (config, ...)."""
    cli_dir = Path(__file__).parent
    domains = {}
    for item in cli_dir.iterdir():
        if item.name == "commands":
            continue
        if item.is_dir() and not item.name.startswith("_"):
            has_commands = any(
                f.suffix == ".py" and not f.name.startswith("_") for f in item.iterdir()
            )
            if has_commands:
                domains[item.name] = item
    return domains


@lru_cache(maxsize=1)
def discover_root_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands (no domain prefix)."""
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}
    if not commands_dir.exists():
        return commands

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue
        info = _load_command(f"textparser.cli.commands.{item.stem}", item.stem)
        if info is not None:
            commands[item.stem] = info
    return commands


@lru_cache(maxsize=8)
def discover_commands(domain: str) -> dict[str, dict[str, Any]]:
    """Discover all commands in a domain subfolder."""
    domain_dir = Path(__file__).parent / domain
    commands: dict[str, dict[str, Any]] = {}
    for item in sorted(domain_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue
        info = _load_command(f"textparser.cli.{domain}.{item.stem}", f"{domain} {item.stem}")
        if info is not None:
            commands[item.stem] = info
    return commands


def _add_command(subparsers: Any, cmd_name: str, cmd_info: dict[str, Any]) -> None:
    primary_name = cmd_name.replace("_", "-")
    aliases = [cmd_name] if primary_name != cmd_name else []
    cmd_parser = subparsers.add_parser(primary_name, aliases=aliases, help=cmd_info["summary"])
    if cmd_info["register_args"]:
        cmd_info["register_args"](cmd_parser)
    if cmd_info["main"]:
        cmd_parser.set_defaults(_func=cmd_info["main"])


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with auto-discovered domains and commands."""
    parser = argparse.ArgumentParser(
        prog="textparser",
        description="textparser - delimiter-driven placeholder substitution",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="domain",
        title="commands",
        metavar="<command>",
    )

    for cmd_name, cmd_info in sorted(discover_root_commands().items()):
        _add_command(subparsers, cmd_name, cmd_info)

    for domain_name in sorted(discover_domains().keys()):
        domain_commands = discover_commands(domain_name)
        if not domain_commands:
            continue
        domain_parser = subparsers.add_parser(
            domain_name,
            help=f"{domain_name.title()} commands",
        )
        cmd_subparsers = domain_parser.add_subparsers(
            dest="command",
            title="commands",
            description=f"Available {domain_name} commands",
            metavar="<command>",
        )
        for cmd_name, cmd_info in sorted(domain_commands.items()):
            _add_command(cmd_subparsers, cmd_name, cmd_info)

    return parser


def _get_version() -> str:
    from textparser import __version__

    return __version__


def _configure_logging(args: argparse.Namespace) -> None:
    from textparser.cli._utils import get_repo_root
    from textparser.core.config import LoggingConfig

    verbose = bool(getattr(args, "verbose", False))
    try:
        LoggingConfig(repo_root=get_repo_root(args)).configure(verbose=verbose)
    except TextParserError:
        # Invalid config is reported by the command itself.
        logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the textparser CLI.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.domain:
        parser.print_help()
        return 0

    func = getattr(args, "_func", None)
    if func is None:
        domain_parser = parser._subparsers._group_actions[0].choices.get(args.domain)
        if domain_parser:
            domain_parser.print_help()
        return 0

    _configure_logging(args)
    logger.debug("Running command %s", args.domain)
    return int(func(args) or 0)


if __name__ == "__main__":
    sys.exit(main())
