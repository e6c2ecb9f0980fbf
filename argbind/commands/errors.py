"""Errors raised while defining, converting and binding command arguments."""

from typing import Any


class CommandArgumentError(Exception):
    """Base class for argument handling errors."""


class ArgumentDefinitionError(CommandArgumentError):
    """A command's argument list breaks the ordering rules."""


class ConverterConfigurationError(CommandArgumentError):
    """No usable converter is registered for a type.

    This is a setup defect rather than bad user input.
    """

    def __init__(self, target_type: Any, message: str) -> None:
        super().__init__(message)
        self.target_type = target_type


class ArityError(CommandArgumentError):
    """The number of supplied arguments does not fit the command."""

    def __init__(self, message: str, *, expected: int, actual: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class TooFewArgumentsError(ArityError):
    def __init__(self, *, expected: int, actual: int) -> None:
        super().__init__(
            f"Not enough arguments were supplied (expected at least {expected}, got {actual})",
            expected=expected,
            actual=actual,
        )


class TooManyArgumentsError(ArityError):
    def __init__(self, *, expected: int, actual: int) -> None:
        super().__init__(
            f"Too many arguments were supplied (expected at most {expected}, got {actual})",
            expected=expected,
            actual=actual,
        )


class ArgumentConversionError(CommandArgumentError):
    """A token could not be converted to the required type."""

    def __init__(self, token: str, target_type: Any, type_name: str) -> None:
        super().__init__(f"Could not convert {token!r} to {type_name}")
        self.token = token
        self.target_type = target_type
        self.type_name = type_name
