"""Error codes and error handling utilities for the calculator core."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any

import yaml


class ErrorCode(Enum):
    """Standardized error codes for calculator operations."""

    # Arithmetic errors
    UNSUPPORTED_OPERATOR = auto()
    INVALID_NUMERIC_INPUT = auto()

    # Theme value errors
    MALFORMED_COLOR = auto()
    FIELD_INVALID = auto()

    # Configuration errors
    CONFIG_MISSING = auto()
    CONFIG_UNREADABLE = auto()
    CONFIG_SYNTAX = auto()
    CONFIG_INVALID = auto()
    CONFIG_EMPTY = auto()
    CONFIG_UNEXPECTED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.UNSUPPORTED_OPERATOR: "Unsupported operator.",
    ErrorCode.INVALID_NUMERIC_INPUT: "Invalid number.",

    ErrorCode.MALFORMED_COLOR: "Color must be a hex literal like RRGGBB or AARRGGBB.",
    ErrorCode.FIELD_INVALID: "A theme field is invalid.",

    ErrorCode.CONFIG_MISSING: "Theme configuration file not found. Using built-in look.",
    ErrorCode.CONFIG_UNREADABLE: "Theme configuration file is not readable.",
    ErrorCode.CONFIG_SYNTAX: "Theme configuration file is not valid YAML.",
    ErrorCode.CONFIG_INVALID: "Theme configuration is invalid.",
    ErrorCode.CONFIG_EMPTY: "Theme configuration defines no themes.",
    ErrorCode.CONFIG_UNEXPECTED: "Unexpected error while loading themes.",
}


@dataclass(eq=False)
class CalculatorError(Exception):
    """Base exception for the calculator with error code and context."""

    code: ErrorCode
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            details_str = " | ".join(f"{k}={v!r}" for k, v in self.details.items())
            parts.append(f" ({details_str})")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "details": self.details,
        }


class MalformedColor(CalculatorError, ValueError):
    """Raised when a hex color literal cannot be parsed."""

    def __init__(self, value: object, reason: str) -> None:
        super().__init__(
            ErrorCode.MALFORMED_COLOR,
            message=f"Malformed color {value!r}: {reason}",
        )
        self.value = value
        self.reason = reason


class ValidationError(CalculatorError, ValueError):
    """Raised when a theme field fails validation.

    ``field`` names the offending field and ``value`` carries the raw input
    exactly as it was supplied.
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(
            ErrorCode.FIELD_INVALID,
            message=f"Invalid {field}: {reason}",
            details={"field": field, "value": value},
        )
        self.field = field
        self.value = value
        self.reason = reason


class UnsupportedOperator(CalculatorError, ValueError):
    """Raised when the evaluator receives an unknown operator symbol."""

    def __init__(self, symbol: object) -> None:
        super().__init__(
            ErrorCode.UNSUPPORTED_OPERATOR,
            message=f"Unsupported operator: {symbol!r}",
        )
        self.symbol = symbol


class InvalidNumericInput(CalculatorError, ValueError):
    """Raised when user-entered text is not a number."""

    def __init__(self, text: object) -> None:
        super().__init__(
            ErrorCode.INVALID_NUMERIC_INPUT,
            message=f"Invalid number: {text!r}",
        )
        self.text = text


class ConfigLoadFailure(CalculatorError):
    """Unified I/O and parse failure inside the theme loader.

    Never escapes the loader's public functions.
    """

    def __init__(
        self,
        code: ErrorCode,
        path: Path | None = None,
        message: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(code, message=message, details=dict(details or {}))
        self.path = path

    def __str__(self) -> str:
        text = super().__str__()
        if self.path is not None:
            return f"{text} [{self.path}]"
        return text


def classify_exception(exc: BaseException, path: Path | None = None) -> ConfigLoadFailure:
    """Classify an exception raised while loading themes into a ConfigLoadFailure."""
    if isinstance(exc, ConfigLoadFailure):
        if exc.path is None:
            exc.path = path
        return exc

    exc_name = type(exc).__name__
    details = {"original": f"{exc_name}: {exc}"}

    if isinstance(exc, FileNotFoundError):
        return ConfigLoadFailure(ErrorCode.CONFIG_MISSING, path, details=details)
    if isinstance(exc, UnicodeDecodeError):
        return ConfigLoadFailure(ErrorCode.CONFIG_SYNTAX, path, details=details)
    if isinstance(exc, OSError):
        return ConfigLoadFailure(ErrorCode.CONFIG_UNREADABLE, path, details=details)
    if isinstance(exc, yaml.YAMLError):
        return ConfigLoadFailure(ErrorCode.CONFIG_SYNTAX, path, details=details)
    if isinstance(exc, CalculatorError):
        return ConfigLoadFailure(
            ErrorCode.CONFIG_INVALID,
            path,
            message=f"Theme configuration is invalid: {exc.message}",
            details=dict(exc.details),
        )

    return ConfigLoadFailure(
        ErrorCode.CONFIG_UNEXPECTED,
        path,
        message=f"{exc_name}: {exc}",
        details=details,
    )


def format_error_for_user(error: CalculatorError | Exception) -> str:
    """Format an error for the calculator display field."""
    if isinstance(error, (UnsupportedOperator, InvalidNumericInput)):
        return ERROR_MESSAGES[error.code]
    if isinstance(error, CalculatorError):
        return error.message

    classified = classify_exception(error)
    return format_error_for_user(classified)
