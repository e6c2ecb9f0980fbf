"""Prefix detection, argument tokenizing and argument binding for prefix commands."""

from .commands import (
    ArgumentConversionError,
    ArgumentConverter,
    ArityError,
    CommandArgument,
    ConverterConfigurationError,
    ConverterRegistry,
    register_converter,
    register_friendly_name,
    unregister_converter,
)
from .core import (
    CommandContext,
    bind_arguments,
    find_prefix,
    has_mention_prefix,
    has_string_prefix,
    split_arguments,
)

__version__ = "0.1.0"

__all__ = [
    "CommandArgument",
    "CommandContext",
    "ArgumentConverter",
    "ConverterRegistry",
    "ArityError",
    "ArgumentConversionError",
    "ConverterConfigurationError",
    "bind_arguments",
    "find_prefix",
    "has_mention_prefix",
    "has_string_prefix",
    "split_arguments",
    "register_converter",
    "register_friendly_name",
    "unregister_converter",
]
