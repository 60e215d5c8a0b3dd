"""
Cetkaik Error Hierarchy

Everything the package raises on bad input derives from CetkaikError.
ParseError is also a ValueError, so it can be raised inside pydantic
validators and by Enum lookups.

Usage:
    from cetkaik.errors import ParseError

    try:
        prof = Profession.parse(raw)
    except ParseError as e:
        logger.warning("Skipping record: %s", e)
"""

from pathlib import Path
from typing import Any

__all__ = [
    # Base error
    "CetkaikError",
    "ConfigurationError",
    "ParseError",
    # Validation errors
    "ValidationError",
]


class CetkaikError(Exception):
    """Base exception for all cetkaik errors.

    Attributes:
        code: Stable error code, one per subclass
        message: Human-readable description
        context: The offending values, keyed by role ("input", "path", ...)
    """
    code: str = "CETKAIK_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        # Subclasses add keys; never mutate the caller's dict.
        self.context = dict(context or {})

    def __str__(self) -> str:
        # repr so that glyphs, blanks and empty input stay visible
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        if details:
            return f"[{self.code}] {self.message} ({details})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form, e.g. for reporting which records failed to load."""
        return {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(CetkaikError):
    """Base class for validation errors."""
    code: str = "VALIDATION_ERROR"


class ParseError(ValidationError, ValueError):
    """Input text did not match any accepted spelling or token.

    Attributes:
        text: The rejected input
        expected: What kind of value was being parsed ("color", "move", ...)
    """
    code: str = "PARSE_ERROR"

    def __init__(
        self,
        message: str,
        text: str | None = None,
        expected: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.text = text
        self.expected = expected
        if text is not None:
            self.context["input"] = text
        if expected:
            self.context["expected"] = expected

    @classmethod
    def unknown(cls, expected: str, text: str) -> "ParseError":
        """The error for a token that is no spelling of any `expected` value."""
        return cls(f"Unknown {expected}: {text!r}", text=text, expected=expected)


class ConfigurationError(ValidationError):
    """Invalid alias configuration.

    Attributes:
        path: The alias file at fault, when there is one
    """
    code: str = "CONFIGURATION_ERROR"

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.path = None if path is None else str(path)
        if self.path is not None:
            self.context["path"] = self.path
