"""
textparser config show command.

SUMMARY: Show current configuration

Displays the merged configuration from bundled defaults, project overrides
(.textparser/config/*.yaml) and TEXTPARSER_* environment variables.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

import yaml

from textparser.cli import OutputFormatter, add_json_flag, add_repo_root_flag, get_repo_root
from textparser.core.config import ConfigManager
from textparser.core.exceptions import TextParserError

SUMMARY = "Show current configuration"


def _nest_key(key: str, value: Any) -> Any:
    """Nest a dot-notation key into a YAML/JSON-friendly mapping."""
    parts = [p for p in str(key).split(".") if p]
    out = value
    for part in reversed(parts):
        out = {part: out}
    return out


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        nargs="?",
        help="Specific configuration key to show (e.g., 'delimiters.start')",
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml", "table"],
        default="table",
        help="Output format (default: table)",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def _format_value(value: Any, indent: int = 0) -> str:
    """Format a value for table display."""
    prefix = "  " * indent
    if isinstance(value, dict):
        lines = []
        for k, v in value.items():
            formatted = _format_value(v, indent + 1)
            if "\n" in formatted:
                lines.append(f"{prefix}{k}:")
                lines.append(formatted)
            else:
                lines.append(f"{prefix}{k}: {formatted}")
        return "\n".join(lines)
    if isinstance(value, str):
        # Markers often carry significant punctuation/whitespace.
        return repr(value)
    return str(value)


def _dump_yaml(data: Any) -> str:
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    ).rstrip()


def main(args: argparse.Namespace) -> int:
    """Show configuration - delegates to ConfigManager."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config_manager = ConfigManager(get_repo_root(args))
        output_format = "json" if args.json else args.format

        if args.key:
            value = config_manager.get(args.key)
            if value is None:
                formatter.text(f"Key not found: {args.key}")
                return 1
            if output_format == "json":
                formatter.json_output({args.key: value})
            elif output_format == "yaml":
                formatter.text(_dump_yaml(_nest_key(args.key, value)))
            else:
                formatter.text(f"{args.key}:")
                formatter.text(_format_value(value, indent=1))
            return 0

        config_data = config_manager.get_all()
        if output_format == "json":
            formatter.json_output(config_data)
        elif output_format == "yaml":
            formatter.text(_dump_yaml(config_data))
        else:
            formatter.text("textparser configuration")
            formatter.text("=" * 40)
            for section in sorted(config_data):
                formatter.text(f"[{section}]")
                formatter.text(_format_value(config_data[section], indent=1))
                formatter.text("")
        return 0

    except TextParserError as e:
        formatter.error(e, error_code="config_show_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
