"""Deep merge used to layer configuration sources.

Later layers (project YAML, environment) override earlier ones (bundled
defaults). Mappings merge key by key; any other value replaces.
"""
from __future__ import annotations

from typing import Any, Dict


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``.

    Example:
        >>> deep_merge({"delimiters": {"start": "*(", "end": ")*"}}, {"delimiters": {"end": ")"}})
        {'delimiters': {'start': '*(', 'end': ')'}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result


__all__ = ["deep_merge"]
