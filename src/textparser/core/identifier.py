"""Placeholder body micro-parser.

A placeholder body is either a mandatory identifier (the whole body is the
name) or an optional identifier introduced by ``?``:

    name                         -> mandatory "name"
    ?name defVal="John Doe"      -> optional "name", default "John Doe"
    ?name defVal="*"John*""      -> optional "name", default '"John"'

Inside a default value ``*"`` stands for a literal quote. The escape marker is
the same character the conventional ``*(`` / ``)*`` markers begin/end with, so
a default value can never contain the end marker itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .exceptions import MissingDefaultValueError

OPTIONAL_MARKER = "?"
ESCAPE_MARKER = "*"
QUOTE = '"'
DEFAULT_VALUE_TOKEN = 'defVal="'


@dataclass(frozen=True)
class Identifier:
    """Parsed form of one placeholder occurrence."""

    optional: bool
    name: str
    default: Optional[str] = None


def parse_identifier(body: str) -> Identifier:
    """Parse a raw placeholder body into an :class:`Identifier`.

    Raises:
        MissingDefaultValueError: optional identifier without a valid
            ``defVal="..."`` parameter.
    """
    if not body.startswith(OPTIONAL_MARKER):
        return Identifier(optional=False, name=body)

    rest = body[len(OPTIONAL_MARKER):]
    split_at = _first_whitespace(rest)
    if split_at is None or split_at + 1 >= len(rest):
        raise MissingDefaultValueError(
            "Missing default value for optional identifier.",
            context={"body": body},
        )

    name = rest[:split_at]
    default = _read_default_value(rest[split_at + 1:], body=body)
    return Identifier(optional=True, name=name, default=default)


def _first_whitespace(value: str) -> Optional[int]:
    for index, char in enumerate(value):
        if char.isspace():
            return index
    return None


def _read_default_value(params: str, *, body: str) -> str:
    start = params.find(DEFAULT_VALUE_TOKEN)
    if start < 0:
        raise MissingDefaultValueError(
            f"Default value not found, define one using {DEFAULT_VALUE_TOKEN}defValue{QUOTE}",
            context={"body": body},
        )

    chars: list[str] = []
    pos = start + len(DEFAULT_VALUE_TOKEN)
    while pos < len(params):
        char = params[pos]
        if char == ESCAPE_MARKER and params[pos + 1:pos + 2] == QUOTE:
            chars.append(QUOTE)
            pos += 2
            continue
        if char == QUOTE:
            return "".join(chars)
        chars.append(char)
        pos += 1

    raise MissingDefaultValueError(
        "Default value is not terminated by a closing quote.",
        context={"body": body},
    )


__all__ = [
    "Identifier",
    "parse_identifier",
    "OPTIONAL_MARKER",
    "ESCAPE_MARKER",
    "DEFAULT_VALUE_TOKEN",
]
