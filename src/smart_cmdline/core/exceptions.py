"""Custom exceptions for smart-cmdline.

Every failure raised by registration, parsing or retrieval derives from
``CommandLineParserError`` and carries a message that names the offending
option, switch or token so a calling CLI can print it and exit non-zero.
"""

from __future__ import annotations

from typing import Any


class CommandLineParserError(Exception):
    """Base exception for all command-line parsing errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class DuplicateOptionError(CommandLineParserError):
    """Raised when an option name is registered twice."""

    def __init__(self, option_name: str, details: str | None = None):
        self.option_name = option_name
        super().__init__(f"Option '{option_name}' already added.", details)


class UnknownSwitchError(CommandLineParserError):
    """Raised when a switch-shaped token matches no registered switch."""

    def __init__(self, switch: str, details: str | None = None):
        self.switch = switch
        super().__init__(f"Unknown switch '{switch}'.", details)


class UnexpectedArgumentError(CommandLineParserError):
    """Raised when a positional token arrives and no positional option is left."""

    def __init__(self, token: str, details: str | None = None):
        self.token = token
        super().__init__(f"Unexpected argument '{token}'.", details)


class MissingValueError(CommandLineParserError):
    """Raised when a value-consuming option runs out of tokens.

    Attributes:
        context: The switch (or token) that triggered value consumption
        option_name: Name of the option that needed the value
    """

    def __init__(self, context: str, option_name: str | None = None, details: str | None = None):
        self.context = context
        self.option_name = option_name
        super().__init__(f"Missing value after '{context}' switch.", details)


class InvalidValueError(CommandLineParserError):
    """Raised when a value cannot be used for an option.

    Examples:
        - Malformed integer or floating-point text
        - Text that names no member of the declared enumeration
        - A declared value type the parser does not support
        - A boolean option declared without switches

    Attributes:
        option_name: Name of the option the value was meant for
        value: The offending raw value (or type)
    """

    def __init__(
        self, message: str, option_name: str | None = None, value: Any = None, details: str | None = None
    ):
        self.option_name = option_name
        self.value = value
        super().__init__(message, details)


class MissingRequiredOptionError(CommandLineParserError):
    """Raised after parsing when a required option received no value."""

    def __init__(self, option_name: str, label: str, details: str | None = None):
        self.option_name = option_name
        self.label = label
        super().__init__(f"Required {label} is not specified.", details)


class UndefinedOptionError(CommandLineParserError, KeyError):
    """Raised when retrieving a name that holds no value.

    Covers retrieval before parsing, names that were never registered, and
    required options that were never populated.
    """

    def __init__(self, option_name: str, details: str | None = None):
        self.option_name = option_name
        super().__init__(f"Option '{option_name}' is not defined.", details)


class OptionTypeError(CommandLineParserError, TypeError):
    """Raised when a stored value is not of the type the caller asked for."""

    def __init__(self, option_name: str, expected_type: type, actual: Any, details: str | None = None):
        self.option_name = option_name
        self.expected_type = expected_type
        self.actual_type = type(actual)
        message = (
            f"Option '{option_name}' holds {type(actual).__name__}, "
            f"not {getattr(expected_type, '__name__', expected_type)}."
        )
        super().__init__(message, details)
