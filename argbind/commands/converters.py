"""Argument converters using strategy pattern."""

import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Generic, Optional, Tuple, TypeVar

import hikari

from config.settings import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

USER_MENTION = re.compile(r"^<@!?([0-9]+)>$")
ROLE_MENTION = re.compile(r"^<@&([0-9]+)>$")
CHANNEL_MENTION = re.compile(r"^<#([0-9]+)>$")
TIME_SPAN = re.compile(
    r"^(?:(?P<days>[0-9]+)d)?(?:(?P<hours>[0-9]+)h)?(?:(?P<minutes>[0-9]+)m)?(?:(?P<seconds>[0-9]+)s)?$"
)

ConversionResult = Tuple[bool, Any]


def _is_ascii_number(value: str) -> bool:
    return value.isascii() and value.isdigit()


class ArgumentConverter(ABC, Generic[T]):
    """Base class for argument converters.

    ``target_type`` is the type the converter produces. A converter is only used for
    registry entries whose key is that type (or a subclass of it). A converter that
    leaves ``target_type`` unset handles no type at all.
    """

    target_type: ClassVar[Any] = None

    @abstractmethod
    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        """Convert ``value``, returning ``(True, result)`` or ``(False, None)``."""
        pass

    def handles(self, target_type: Any) -> bool:
        if self.target_type is None:
            return False
        if target_type is self.target_type:
            return True
        try:
            return issubclass(target_type, self.target_type)
        except TypeError:
            return False


class StringConverter(ArgumentConverter[str]):
    target_type = str

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        return True, value


class BooleanConverter(ArgumentConverter[bool]):
    target_type = bool

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        lowered = value.lower()
        if lowered in settings.truthy_values:
            return True, True
        if lowered in settings.falsy_values:
            return True, False
        return False, None


class IntegerConverter(ArgumentConverter[int]):
    target_type = int

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        try:
            return True, int(value)
        except ValueError:
            return False, None


class FloatConverter(ArgumentConverter[float]):
    target_type = float

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        try:
            return True, float(value)
        except ValueError:
            return False, None


class DecimalConverter(ArgumentConverter[Decimal]):
    target_type = Decimal

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        try:
            return True, Decimal(value)
        except InvalidOperation:
            return False, None


class DateTimeConverter(ArgumentConverter[datetime]):
    """Accepts ISO 8601 dates or unix timestamps."""

    target_type = datetime

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        if _is_ascii_number(value):
            try:
                return True, datetime.fromtimestamp(int(value), tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                return False, None

        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return False, None

        # Naive input is read as UTC so every result is timezone-aware
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return True, parsed


class TimeSpanConverter(ArgumentConverter[timedelta]):
    """Accepts ``1d2h3m4s`` style spans or a plain number of seconds."""

    target_type = timedelta

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        if not value:
            return False, None

        if _is_ascii_number(value):
            parts = {"seconds": int(value)}
        else:
            match = TIME_SPAN.match(value.lower())
            if not match:
                return False, None
            parts = {name: int(amount) for name, amount in match.groupdict().items() if amount}

        try:
            return True, timedelta(**parts)
        except OverflowError:
            return False, None


def _parse_snowflake(value: str, pattern: re.Pattern) -> Optional[int]:
    match = pattern.match(value)
    if match:
        return int(match.group(1))
    if _is_ascii_number(value):
        return int(value)
    return None


class UserConverter(ArgumentConverter[hikari.User]):
    """Resolves a user by mention, id or member name."""

    target_type = hikari.User

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        if ctx is None or ctx.client is None:
            return False, None

        user_id = _parse_snowflake(value, USER_MENTION)
        if user_id is not None:
            user = ctx.cache.get_user(user_id) if ctx.cache is not None else None
            if user:
                return True, user
            try:
                return True, await ctx.rest.fetch_user(user_id)
            except hikari.NotFoundError:
                logger.debug(f"User {user_id} not found")
                return False, None

        member = _find_member_by_name(ctx, value)
        if member:
            return True, member.user
        return False, None


class MemberConverter(ArgumentConverter[hikari.Member]):
    """Resolves a member of the context guild by mention, id or name."""

    target_type = hikari.Member

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        if ctx is None or ctx.client is None or not ctx.guild_id:
            return False, None

        user_id = _parse_snowflake(value, USER_MENTION)
        if user_id is not None:
            member = ctx.cache.get_member(ctx.guild_id, user_id) if ctx.cache is not None else None
            if member:
                return True, member
            try:
                return True, await ctx.rest.fetch_member(ctx.guild_id, user_id)
            except hikari.NotFoundError:
                logger.debug(f"Member {user_id} not found in guild {ctx.guild_id}")
                return False, None

        member = _find_member_by_name(ctx, value)
        if member:
            return True, member
        return False, None


class RoleConverter(ArgumentConverter[hikari.Role]):
    """Resolves a role of the context guild by mention, id or name."""

    target_type = hikari.Role

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        if ctx is None or ctx.client is None or not ctx.guild_id:
            return False, None

        role_id = _parse_snowflake(value, ROLE_MENTION)
        if role_id is not None:
            role = ctx.cache.get_role(role_id) if ctx.cache is not None else None
            if role:
                return True, role
            # Roles can only be fetched per guild
            try:
                roles = await ctx.rest.fetch_roles(ctx.guild_id)
            except hikari.NotFoundError:
                logger.debug(f"Guild {ctx.guild_id} not found while fetching roles")
                return False, None
            for role in roles:
                if role.id == role_id:
                    return True, role
            return False, None

        guild = ctx.get_guild()
        if guild:
            for role in guild.get_roles().values():
                if role.name.lower() == value.lower():
                    return True, role
        return False, None


class ChannelConverter(ArgumentConverter[hikari.GuildChannel]):
    """Resolves a guild channel by mention, id or name."""

    target_type = hikari.GuildChannel

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        if ctx is None or ctx.client is None:
            return False, None

        channel_id = _parse_snowflake(value, CHANNEL_MENTION)
        if channel_id is not None:
            channel = ctx.cache.get_guild_channel(channel_id) if ctx.cache is not None else None
            if channel:
                return True, channel
            try:
                channel = await ctx.rest.fetch_channel(channel_id)
            except hikari.NotFoundError:
                logger.debug(f"Channel {channel_id} not found")
                return False, None
            if isinstance(channel, hikari.GuildChannel):
                return True, channel
            return False, None

        guild = ctx.get_guild()
        if guild:
            for channel in guild.get_channels().values():
                if channel.name and channel.name.lower() == value.lower().lstrip("#"):
                    return True, channel
        return False, None


class GuildConverter(ArgumentConverter[hikari.Guild]):
    """Resolves a guild by id."""

    target_type = hikari.Guild

    async def try_convert(self, value: str, ctx: Any) -> ConversionResult:
        if ctx is None or ctx.client is None or not _is_ascii_number(value):
            return False, None

        guild_id = int(value)
        guild = ctx.cache.get_guild(guild_id) if ctx.cache is not None else None
        if guild:
            return True, guild
        try:
            return True, await ctx.rest.fetch_guild(guild_id)
        except (hikari.NotFoundError, hikari.ForbiddenError):
            logger.debug(f"Guild {guild_id} not available")
            return False, None


def _find_member_by_name(ctx: Any, name: str) -> Optional[hikari.Member]:
    guild = ctx.get_guild()
    if not guild:
        return None

    lowered = name.lower()
    for member in guild.get_members().values():
        if member.username.lower() == lowered or member.display_name.lower() == lowered:
            return member
    return None
