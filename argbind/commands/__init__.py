"""Argument definitions, converters and the converter registry."""

from .argument_types import CommandArgument, validate_arguments
from .converters import ArgumentConverter
from .errors import (
    ArgumentConversionError,
    ArgumentDefinitionError,
    ArityError,
    CommandArgumentError,
    ConverterConfigurationError,
    TooFewArgumentsError,
    TooManyArgumentsError,
)
from .registry import (
    ConverterRegistry,
    TypeNameRegistry,
    convert_argument,
    converters,
    get_friendly_name,
    register_converter,
    register_friendly_name,
    type_names,
    unregister_converter,
)

__all__ = [
    "CommandArgument",
    "validate_arguments",
    "ArgumentConverter",
    "ConverterRegistry",
    "TypeNameRegistry",
    "converters",
    "type_names",
    "convert_argument",
    "register_converter",
    "unregister_converter",
    "register_friendly_name",
    "get_friendly_name",
    "CommandArgumentError",
    "ArgumentDefinitionError",
    "ConverterConfigurationError",
    "ArityError",
    "TooFewArgumentsError",
    "TooManyArgumentsError",
    "ArgumentConversionError",
]
