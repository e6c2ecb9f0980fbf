"""Type-keyed converter registry and friendly type names."""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Dict, Generic, Optional, Type, TypeVar

import hikari

from .converters import (
    ArgumentConverter,
    BooleanConverter,
    ChannelConverter,
    DateTimeConverter,
    DecimalConverter,
    FloatConverter,
    GuildConverter,
    IntegerConverter,
    MemberConverter,
    RoleConverter,
    StringConverter,
    TimeSpanConverter,
    UserConverter,
)
from .errors import ArgumentConversionError, ConverterConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TypeNameRegistry:
    """Human readable names for argument types, used in error messages."""

    def __init__(self) -> None:
        self._names: Dict[Any, str] = {}

    def register(self, target_type: Any, name: str) -> None:
        if not name or not name.strip():
            raise ValueError("Name cannot be empty")
        self._names[target_type] = name

    def get(self, target_type: Any) -> str:
        """Return the registered name, falling back to the type's own name."""
        if target_type in self._names:
            return self._names[target_type]
        return getattr(target_type, "__name__", str(target_type))

    def resolve(self, name: str) -> Optional[Any]:
        """Find the type registered under ``name`` (case-insensitive)."""
        lowered = name.lower()
        for target_type, friendly_name in self._names.items():
            if friendly_name.lower() == lowered:
                return target_type
        return None


class TypedConverter(Generic[T]):
    """Conversion to a type known at the call site.

    Delegates to :meth:`ConverterRegistry.convert`, so it behaves exactly like the
    dynamic path.
    """

    def __init__(self, registry: "ConverterRegistry", target_type: Type[T]) -> None:
        self.registry = registry
        self.target_type = target_type

    async def __call__(self, value: str, ctx: Any, optional: bool = False, default: Any = None) -> T:
        return await self.registry.convert(value, ctx, self.target_type, optional, default)


class ConverterRegistry:
    """Maps argument types to the converter used for them.

    At most one converter is registered per type; registering again replaces it.
    The registry is not synchronized, so mutate it during startup only.
    """

    def __init__(self, type_names: Optional[TypeNameRegistry] = None) -> None:
        self._converters: Dict[Any, Any] = {}
        self.type_names = type_names if type_names is not None else TypeNameRegistry()

    def register(self, target_type: Any, converter: Any) -> None:
        if converter is None:
            raise ValueError("Converter cannot be None")

        replaced = target_type in self._converters
        self._converters[target_type] = converter
        logger.info(
            f"{'Replaced' if replaced else 'Registered'} converter for {self.type_names.get(target_type)}: "
            f"{type(converter).__name__}"
        )

    def unregister(self, target_type: Any) -> None:
        if self._converters.pop(target_type, None) is not None:
            logger.info(f"Unregistered converter for {self.type_names.get(target_type)}")

    def get(self, target_type: Any) -> Optional[Any]:
        return self._converters.get(target_type)

    def __contains__(self, target_type: Any) -> bool:
        return target_type in self._converters

    def types(self) -> list[Any]:
        return list(self._converters)

    def typed(self, target_type: Type[T]) -> TypedConverter[T]:
        return TypedConverter(self, target_type)

    async def convert(
        self,
        value: str,
        ctx: Any,
        target_type: Any,
        optional: bool = False,
        default: Any = None,
    ) -> Any:
        """Convert ``value`` to ``target_type``.

        A failed conversion of an optional argument yields ``default``; otherwise it
        raises :class:`ArgumentConversionError`.
        """
        if target_type not in self._converters:
            raise ConverterConfigurationError(
                target_type, f"There is no converter specified for {self.type_names.get(target_type)}"
            )

        converter = self._converters[target_type]
        if not isinstance(converter, ArgumentConverter) or not converter.handles(target_type):
            raise ConverterConfigurationError(
                target_type, f"Invalid converter registered for {self.type_names.get(target_type)}"
            )

        ok, result = await converter.try_convert(value, ctx)
        if ok:
            return result

        if optional:
            logger.debug(f"Using default for {value!r}, not a valid {self.type_names.get(target_type)}")
            return default

        raise ArgumentConversionError(value, target_type, self.type_names.get(target_type))

    @classmethod
    def with_defaults(cls, type_names: Optional[TypeNameRegistry] = None) -> "ConverterRegistry":
        """Create a registry seeded with the built-in converters and names."""
        registry = cls(type_names)
        for target_type, converter, name in _BUILTINS:
            registry.type_names.register(target_type, name)
            registry._converters[target_type] = converter
        return registry


_BUILTINS = [
    (str, StringConverter(), "string"),
    (bool, BooleanConverter(), "boolean"),
    (int, IntegerConverter(), "integer"),
    (float, FloatConverter(), "float"),
    (Decimal, DecimalConverter(), "decimal"),
    (datetime, DateTimeConverter(), "date and time"),
    (timedelta, TimeSpanConverter(), "time span"),
    (hikari.User, UserConverter(), "user"),
    (hikari.Member, MemberConverter(), "member"),
    (hikari.Role, RoleConverter(), "role"),
    (hikari.GuildChannel, ChannelConverter(), "channel"),
    (hikari.Guild, GuildConverter(), "guild"),
]

# Process-wide registries
type_names = TypeNameRegistry()
converters = ConverterRegistry.with_defaults(type_names)


def register_converter(target_type: Any, converter: ArgumentConverter) -> None:
    converters.register(target_type, converter)


def unregister_converter(target_type: Any) -> None:
    converters.unregister(target_type)


def register_friendly_name(target_type: Any, name: str) -> None:
    type_names.register(target_type, name)


def get_friendly_name(target_type: Any) -> str:
    return type_names.get(target_type)


async def convert_argument(
    value: str, ctx: Any, target_type: Any, optional: bool = False, default: Any = None
) -> Any:
    return await converters.convert(value, ctx, target_type, optional, default)
