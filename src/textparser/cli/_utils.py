"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, Iterable, Optional

import yaml

from textparser.core.exceptions import InvalidInputError


def get_repo_root(args: argparse.Namespace) -> Path:
    """Get project root from ``--repo-root`` or fall back to the cwd."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return Path.cwd()


def parse_var_assignments(assignments: Iterable[str]) -> Dict[str, str]:
    """Parse ``NAME=VALUE`` pairs; the value may itself contain ``=``."""
    bindings: Dict[str, str] = {}
    for item in assignments:
        name, sep, value = item.partition("=")
        if not sep:
            raise InvalidInputError(
                f"Invalid --var '{item}', expected NAME=VALUE",
                context={"var": item},
            )
        bindings[name] = value
    return bindings


def load_bindings_file(path: Optional[str]) -> Dict[str, str]:
    """Load a flat YAML (or JSON) mapping of placeholder names to values."""
    if not path:
        return {}
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise InvalidInputError(
            f"Invalid YAML in bindings file {path}: {exc}",
            context={"path": str(path)},
        ) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInputError(
            f"Bindings file {path} must contain a mapping",
            context={"path": str(path)},
        )
    bindings: Dict[str, str] = {}
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            raise InvalidInputError(
                f"Binding '{key}' in {path} must be a scalar value",
                context={"path": str(path), "name": str(key)},
            )
        bindings[str(key)] = str(value)
    return bindings
