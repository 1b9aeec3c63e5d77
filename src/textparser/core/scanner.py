"""Placeholder scanning engine.

Single forward pass over the input text. Each placeholder found between the
start and end markers is parsed into an :class:`Identifier` and replaced by
its bound (or default) value:

    scan_sync("Hi *(name)*", DelimiterSpec("*(", ")*"), {"name": "Ann"})
    # -> "Hi Ann"

The scan works on a copy of the text terminated by one sentinel newline, so
every position has at least one character of look-ahead. Marker comparisons
only happen while the whole marker fits strictly before the end of that
buffer, which means a marker is recognized anywhere inside the input text
but never overlaps the sentinel. The sentinel is not part of the output.

Bindings are read, never mutated. Callers sharing a binding table between
threads must not mutate it while a scan is running.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import List

from .delimiters import DelimiterSpec
from .exceptions import (
    InvalidInputError,
    TemplateSyntaxError,
    UnboundVariableError,
    UnterminatedPlaceholderError,
)
from .identifier import Identifier, parse_identifier

logger = logging.getLogger(__name__)

SENTINEL = "\n"


@dataclass(frozen=True)
class ScanRequest:
    """Inputs of one scan; created per call and discarded afterwards."""

    text: str
    delimiters: DelimiterSpec
    bindings: Mapping[str, str]
    strict_syntax_check: bool = False


class PlaceholderScanner:
    """Scan state for exactly one :class:`ScanRequest`."""

    def __init__(self, request: ScanRequest) -> None:
        self.request = request
        self.buffer = request.text + SENTINEL
        self.substitutions = 0

    def run(self) -> str:
        start = self.request.delimiters.start
        text_len = len(self.request.text)
        output: List[str] = []

        pos = 0
        while pos < text_len:
            if self._marker_at(start, pos):
                body_start = pos + len(start)
                body_end = self._find_end(body_start)
                output.append(self._resolve(self.buffer[body_start:body_end]))
                pos = body_end + len(self.request.delimiters.end)
            else:
                output.append(self.buffer[pos])
                pos += 1

        return "".join(output)

    def _marker_at(self, marker: str, pos: int) -> bool:
        if pos + len(marker) < len(self.buffer):
            return self.buffer.startswith(marker, pos)
        return False

    def _find_end(self, body_start: int) -> int:
        """Return the index where the end marker closing this placeholder begins."""
        start = self.request.delimiters.start
        end = self.request.delimiters.end

        pos = body_start
        while pos + len(end) < len(self.buffer):
            if self.buffer.startswith(end, pos):
                return pos
            if self.request.strict_syntax_check and self._marker_at(start, pos):
                raise TemplateSyntaxError(
                    "Syntax error: found nested start marker before end marker.",
                    context={"position": pos, "start": start, "end": end},
                )
            pos += 1

        raise UnterminatedPlaceholderError(
            "End marker not found.",
            context={"position": body_start - len(start), "end": end},
        )

    def _resolve(self, body: str) -> str:
        value = resolve_identifier(parse_identifier(body), self.request.bindings)
        self.substitutions += 1
        return value


def resolve_identifier(identifier: Identifier, bindings: Mapping[str, str]) -> str:
    """Return the substitution value for ``identifier``.

    A bound value always wins; optional identifiers fall back to their
    default, mandatory ones raise :class:`UnboundVariableError`.
    """
    value = bindings.get(identifier.name)
    if value is not None:
        return value if isinstance(value, str) else str(value)
    if identifier.optional and identifier.default is not None:
        return identifier.default
    raise UnboundVariableError(identifier.name)


def scan_sync(
    text: str,
    delimiters: DelimiterSpec,
    bindings: Mapping[str, str],
    strict_syntax_check: bool = False,
) -> str:
    """Substitute every placeholder in ``text`` on the calling thread.

    Args:
        text: Input text.
        delimiters: Start/end marker pair.
        bindings: Placeholder name to value mapping (case-sensitive).
        strict_syntax_check: Reject a start marker found inside an open
            placeholder instead of treating it as part of the body.

    Returns:
        The substituted text.

    Raises:
        InvalidInputError: ``text``, ``delimiters`` or ``bindings`` is None
            or not a str, DelimiterSpec or mapping respectively.
        TemplateSyntaxError: nested start marker (strict mode only).
        UnterminatedPlaceholderError: a placeholder is never closed.
        MissingDefaultValueError: optional identifier without ``defVal``.
        UnboundVariableError: mandatory identifier without a binding.
    """
    missing = [
        name
        for name, value in (("text", text), ("delimiters", delimiters), ("bindings", bindings))
        if value is None
    ]
    if missing:
        raise InvalidInputError(
            "Input text, bindings or delimiters is null.",
            context={"missing": missing},
        )
    for name, value, expected in (
        ("text", text, str),
        ("delimiters", delimiters, DelimiterSpec),
        ("bindings", bindings, Mapping),
    ):
        if not isinstance(value, expected):
            raise InvalidInputError(
                f"Input {name} must be a {expected.__name__}, got {type(value).__name__}.",
                context={"field": name, "type": type(value).__name__},
            )

    request = ScanRequest(
        text=text,
        delimiters=delimiters,
        bindings=bindings,
        strict_syntax_check=bool(strict_syntax_check),
    )
    logger.debug(
        "Scanning %d chars with %r (strict=%s)",
        len(text),
        delimiters,
        request.strict_syntax_check,
    )
    scanner = PlaceholderScanner(request)
    result = scanner.run()
    logger.debug("Scan finished: %d placeholder(s) substituted", scanner.substitutions)
    return result


__all__ = ["ScanRequest", "PlaceholderScanner", "resolve_identifier", "scan_sync", "SENTINEL"]
