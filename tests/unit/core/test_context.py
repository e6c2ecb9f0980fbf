"""Tests for the command context."""

from unittest.mock import MagicMock

import hikari

from argbind.core.context import CommandContext


class TestCommandContext:
    """Test CommandContext class."""

    def test_context_defaults(self):
        ctx = CommandContext()

        assert ctx.client is None
        assert ctx.raw_arguments == []
        assert ctx.cache is None
        assert ctx.rest is None
        assert ctx.get_guild() is None

    def test_from_event(self, mock_hikari_bot, mock_user, mock_member):
        event = MagicMock(spec=hikari.GuildMessageCreateEvent)
        event.author = mock_user
        event.member = mock_member
        event.guild_id = 123
        event.channel_id = 456
        event.message = MagicMock()
        event.message.content = "!test a b"

        ctx = CommandContext.from_event(event, mock_hikari_bot, prefix="!", raw_arguments=["a", "b"])

        assert ctx.client == mock_hikari_bot
        assert ctx.content == "!test a b"
        assert ctx.prefix == "!"
        assert ctx.raw_arguments == ["a", "b"]
        assert ctx.author == mock_user
        assert ctx.member == mock_member
        assert ctx.guild_id == 123
        assert ctx.channel_id == 456

    def test_get_guild(self, context, mock_hikari_bot, mock_guild):
        mock_hikari_bot.cache.get_guild.return_value = mock_guild

        assert context.get_guild() == mock_guild
        mock_hikari_bot.cache.get_guild.assert_called_once_with(mock_guild.id)

    def test_get_guild_no_guild_id(self, mock_hikari_bot):
        ctx = CommandContext(mock_hikari_bot)

        assert ctx.get_guild() is None
