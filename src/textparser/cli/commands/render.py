"""
textparser render command.

SUMMARY: Render a template, substituting placeholders with bound values

Reads a template from a file (or stdin with ``-``), collects bindings from an
optional YAML mapping and repeated ``--var NAME=VALUE`` pairs (``--var`` wins),
and writes the substituted text. Marker and strict-mode defaults come from the
merged configuration.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from textparser.cli import (
    OutputFormatter,
    add_delimiter_flags,
    add_standard_flags,
    get_repo_root,
    load_bindings_file,
    parse_var_assignments,
)
from textparser.core.config import DelimitersConfig, ScannerConfig
from textparser.core.delimiters import DelimiterSpec
from textparser.core.exceptions import TextParserError
from textparser.core.scanner import scan_sync

SUMMARY = "Render a template, substituting placeholders with bound values"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "template",
        nargs="?",
        default="-",
        help="Template file to render ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "--var",
        dest="vars",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Bind a placeholder name to a value (repeatable)",
    )
    parser.add_argument(
        "--vars-file",
        type=str,
        help="YAML/JSON mapping of placeholder names to values",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write the rendered text to this file instead of stdout",
    )
    add_delimiter_flags(parser)
    add_standard_flags(parser)


def _read_template(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _resolve_delimiters(args: argparse.Namespace) -> DelimiterSpec:
    if args.start is not None and args.end is not None:
        return DelimiterSpec(args.start, args.end)
    config = DelimitersConfig(repo_root=get_repo_root(args))
    start = args.start if args.start is not None else config.start
    end = args.end if args.end is not None else config.end
    return DelimiterSpec(start, end)


def _resolve_strict(args: argparse.Namespace) -> bool:
    if args.strict is not None:
        return args.strict
    return ScannerConfig(repo_root=get_repo_root(args)).strict_syntax_check


def main(args: argparse.Namespace) -> int:
    """Render a template - delegates to scan_sync."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        delimiters = _resolve_delimiters(args)
        strict = _resolve_strict(args)

        bindings = load_bindings_file(args.vars_file)
        bindings.update(parse_var_assignments(args.vars))

        text = _read_template(args.template)
        rendered = scan_sync(text, delimiters, bindings, strict)
    except TextParserError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1
    except OSError as e:
        formatter.error(e, error_code="io_error")
        return 1

    if args.output:
        try:
            Path(args.output).write_text(rendered, encoding="utf-8")
        except OSError as e:
            formatter.error(e, error_code="io_error")
            return 1
        formatter.success(
            {"output_path": str(args.output), "chars": len(rendered)},
            f"Rendered template written to {args.output}",
        )
        return 0

    if formatter.json_mode:
        formatter.success({"output": rendered}, rendered)
    else:
        formatter.raw(rendered)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
