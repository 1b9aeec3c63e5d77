"""textparser core library package.

Placeholder scanning engine plus the delimiter value object, the identifier
micro-parser, the one-shot async runner and configuration.
"""
from __future__ import annotations

from . import exceptions  # noqa: F401
from .delimiters import DelimiterSpec
from .exceptions import (
    ConfigError,
    InvalidInputError,
    MissingDefaultValueError,
    ParseError,
    TemplateSyntaxError,
    TextParserError,
    UnboundVariableError,
    UnterminatedPlaceholderError,
)
from .identifier import Identifier, parse_identifier
from .parser import TextParser
from .runner import scan_async
from .scanner import ScanRequest, resolve_identifier, scan_sync

__all__ = [
    "exceptions",
    "DelimiterSpec",
    "Identifier",
    "parse_identifier",
    "ScanRequest",
    "resolve_identifier",
    "scan_sync",
    "scan_async",
    "TextParser",
    "TextParserError",
    "ConfigError",
    "ParseError",
    "InvalidInputError",
    "TemplateSyntaxError",
    "UnterminatedPlaceholderError",
    "MissingDefaultValueError",
    "UnboundVariableError",
]
