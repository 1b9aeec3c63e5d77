"""Stateful convenience wrapper around the scanner.

Holds one text, one delimiter pair and its own binding table that can be
seeded incrementally before parsing:

    parser = TextParser("Hi, I am *(name)* and I am *(age)* years old.", DelimiterSpec("*(", ")*"))
    parser.put("name", "Ann")
    parser.put("age", "23")
    parser.parse()
"""
from __future__ import annotations

from concurrent.futures import Future
from typing import Callable, Dict, Mapping, Optional

from .delimiters import DelimiterSpec
from .exceptions import ParseError
from .runner import scan_async
from .scanner import scan_sync


class TextParser:
    """Text + delimiters + bindings, parsed synchronously or on a worker."""

    def __init__(
        self,
        text: str,
        delimiters: DelimiterSpec,
        bindings: Optional[Mapping[str, str]] = None,
        *,
        strict_syntax_check: bool = False,
    ) -> None:
        self.text = text
        self.delimiters = delimiters
        self.strict_syntax_check = strict_syntax_check
        self._bindings: Dict[str, str] = dict(bindings or {})

    @property
    def bindings(self) -> Dict[str, str]:
        """Copy of the current binding table."""
        return dict(self._bindings)

    def put(self, name: str, value: str) -> "TextParser":
        """Bind ``name`` to ``value``, replacing any earlier binding."""
        self._bindings[name] = value
        return self

    def parse(self) -> str:
        return scan_sync(self.text, self.delimiters, self._bindings, self.strict_syntax_check)

    def parse_async(
        self,
        on_done: Callable[[str], None],
        on_error: Callable[[ParseError], None],
    ) -> "Future[str]":
        # Snapshot so later put() calls cannot race the worker.
        return scan_async(
            self.text,
            self.delimiters,
            dict(self._bindings),
            self.strict_syntax_check,
            on_done=on_done,
            on_error=on_error,
        )


__all__ = ["TextParser"]
