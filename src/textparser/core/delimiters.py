"""Delimiter pair that bounds a placeholder.

A ``DelimiterSpec`` is built once and shared across any number of scans:

    spec = DelimiterSpec("*(", ")*")
    spec.parse("Hi *(name)*", {"name": "Ann"})  # -> "Hi Ann"
"""
from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
from typing import Callable, Mapping

from .exceptions import ConfigError, ParseError


@dataclass(frozen=True)
class DelimiterSpec:
    """Immutable pair of non-empty start/end markers."""

    start: str
    end: str

    def __post_init__(self) -> None:
        for field_name in ("start", "end"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise ConfigError(
                    "Delimiter start or end marker cannot be null or empty.",
                    context={"field": field_name, "value": value},
                )

    def parse(
        self,
        text: str,
        bindings: Mapping[str, str],
        strict_syntax_check: bool = False,
    ) -> str:
        """Scan ``text`` with this delimiter pair on the calling thread."""
        from .scanner import scan_sync

        return scan_sync(text, self, bindings, strict_syntax_check)

    def parse_async(
        self,
        text: str,
        bindings: Mapping[str, str],
        strict_syntax_check: bool = False,
        *,
        on_done: Callable[[str], None],
        on_error: Callable[[ParseError], None],
    ) -> "Future[str]":
        """Scan ``text`` with this delimiter pair on a one-shot worker."""
        from .runner import scan_async

        return scan_async(
            text,
            self,
            bindings,
            strict_syntax_check,
            on_done=on_done,
            on_error=on_error,
        )


__all__ = ["DelimiterSpec"]
