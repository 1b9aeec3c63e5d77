"""
textparser - delimiter-driven placeholder substitution

Replaces placeholders bounded by a caller-defined start/end marker pair with
bound values, supporting mandatory and optional (defaulted) identifiers.
"""

__version__ = "1.0.0"

from textparser.core import (  # noqa: E402
    ConfigError,
    DelimiterSpec,
    Identifier,
    InvalidInputError,
    MissingDefaultValueError,
    ParseError,
    TemplateSyntaxError,
    TextParser,
    TextParserError,
    UnboundVariableError,
    UnterminatedPlaceholderError,
    parse_identifier,
    scan_async,
    scan_sync,
)


def get_version() -> str:
    """Return the library version string."""
    return __version__


__all__ = [
    "__version__",
    "get_version",
    "DelimiterSpec",
    "Identifier",
    "parse_identifier",
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
