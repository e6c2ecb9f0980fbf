from typing import Any, List, Optional

import hikari


class CommandContext:
    """State handed to every converter and to the command callback.

    Converters read from it (the client for cache and REST lookups, the guild for
    name resolution); nothing in argument binding writes to it.
    """

    def __init__(
        self,
        client: Any = None,
        *,
        content: str = "",
        prefix: str = "",
        raw_arguments: Optional[List[str]] = None,
        author: Optional[hikari.User] = None,
        member: Optional[hikari.Member] = None,
        guild_id: Optional[hikari.Snowflake] = None,
        channel_id: Optional[hikari.Snowflake] = None,
        message: Optional[hikari.Message] = None,
    ):
        self.client = client
        self.content = content
        self.prefix = prefix
        self.raw_arguments = raw_arguments or []
        self.author = author
        self.member = member
        self.guild_id = guild_id
        self.channel_id = channel_id
        self.message = message

    @classmethod
    def from_event(
        cls,
        event: hikari.MessageCreateEvent,
        client: Any,
        prefix: str = "",
        raw_arguments: Optional[List[str]] = None,
    ) -> "CommandContext":
        """Build a context from a gateway message event."""
        return cls(
            client,
            content=event.message.content or "",
            prefix=prefix,
            raw_arguments=raw_arguments,
            author=event.author,
            member=getattr(event, "member", None),
            guild_id=getattr(event, "guild_id", None),
            channel_id=event.channel_id,
            message=event.message,
        )

    @property
    def cache(self) -> Any:
        return getattr(self.client, "cache", None)

    @property
    def rest(self) -> Any:
        return getattr(self.client, "rest", None)

    def get_guild(self) -> Optional[hikari.GatewayGuild]:
        if self.guild_id and self.cache is not None:
            return self.cache.get_guild(self.guild_id)
        return None

    def __repr__(self) -> str:
        return f"CommandContext(guild_id={self.guild_id}, channel_id={self.channel_id}, prefix={self.prefix!r})"
