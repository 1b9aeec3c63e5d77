from __future__ import annotations

from typing import Any, Dict, Mapping


class TextParserError(Exception):
    """Base exception for textparser."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(TextParserError, ValueError):
    """Raised when a delimiter spec or loaded configuration is invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TextParserError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ParseError(TextParserError):
    """Base class for every failure raised while scanning a text."""


class InvalidInputError(ParseError, ValueError):
    """Raised when text, delimiters, bindings or callbacks are missing."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ParseError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class TemplateSyntaxError(ParseError):
    """Raised in strict mode when a start marker opens inside an open placeholder."""


class UnterminatedPlaceholderError(ParseError):
    """Raised when a start marker is never closed by an end marker."""


class MissingDefaultValueError(ParseError):
    """Raised when an optional identifier has no valid ``defVal="..."`` parameter."""


class UnboundVariableError(ParseError):
    """Raised when a mandatory identifier has no entry in the binding table."""

    def __init__(
        self,
        name: str,
        message: str | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx["name"] = name
        self.name = name
        super().__init__(
            message or f"Variable '{name}' has no bound value.",
            context=ctx,
        )


__all__ = [
    "TextParserError",
    "ConfigError",
    "ParseError",
    "InvalidInputError",
    "TemplateSyntaxError",
    "UnterminatedPlaceholderError",
    "MissingDefaultValueError",
    "UnboundVariableError",
]
