"""Pytest configuration and shared fixtures."""

import logging
from unittest.mock import AsyncMock, MagicMock

import hikari
import pytest

from argbind.commands.registry import ConverterRegistry, TypeNameRegistry
from argbind.core.context import CommandContext

# Disable logging during tests
logging.disable(logging.CRITICAL)


@pytest.fixture
def mock_hikari_bot():
    """Mock Hikari bot instance."""
    bot = MagicMock(spec=hikari.GatewayBot)
    bot.cache = MagicMock()
    bot.rest = MagicMock()

    # Mock cache methods
    bot.cache.get_user = MagicMock(return_value=None)
    bot.cache.get_guild = MagicMock(return_value=None)
    bot.cache.get_member = MagicMock(return_value=None)
    bot.cache.get_guild_channel = MagicMock(return_value=None)
    bot.cache.get_role = MagicMock(return_value=None)

    # Mock REST methods
    bot.rest.fetch_user = AsyncMock()
    bot.rest.fetch_member = AsyncMock()
    bot.rest.fetch_channel = AsyncMock()
    bot.rest.fetch_roles = AsyncMock(return_value=[])
    bot.rest.fetch_guild = AsyncMock()

    return bot


@pytest.fixture
def mock_user():
    """Mock Discord user."""
    user = MagicMock(spec=hikari.User)
    user.id = 111111111
    user.username = "testuser"
    user.display_name = "Test User"
    user.mention = "<@111111111>"
    return user


@pytest.fixture
def mock_member(mock_user):
    """Mock Discord member."""
    member = MagicMock(spec=hikari.Member)
    member.id = mock_user.id
    member.username = mock_user.username
    member.display_name = mock_user.display_name
    member.user = mock_user
    return member


@pytest.fixture
def mock_role():
    """Mock Discord role."""
    role = MagicMock(spec=hikari.Role)
    role.id = 222222222
    role.name = "Moderator"
    return role


@pytest.fixture
def mock_channel():
    """Mock Discord channel."""
    channel = MagicMock(spec=hikari.GuildTextChannel)
    channel.id = 444444444
    channel.name = "test-channel"
    channel.mention = "<#444444444>"
    return channel


@pytest.fixture
def mock_guild():
    """Mock Discord guild."""
    guild = MagicMock(spec=hikari.GatewayGuild)
    guild.id = 123456789
    guild.name = "Test Guild"
    guild.get_members = MagicMock(return_value={})
    guild.get_roles = MagicMock(return_value={})
    guild.get_channels = MagicMock(return_value={})
    return guild


@pytest.fixture
def context(mock_hikari_bot, mock_guild, mock_channel, mock_user):
    """Command context bound to the mocked client and guild."""
    return CommandContext(
        mock_hikari_bot,
        content="!test",
        prefix="!",
        author=mock_user,
        guild_id=mock_guild.id,
        channel_id=mock_channel.id,
    )


@pytest.fixture
def empty_context():
    """Command context without a client."""
    return CommandContext()


@pytest.fixture
def registry():
    """Fresh registry seeded with the built-in converters."""
    return ConverterRegistry.with_defaults(TypeNameRegistry())
