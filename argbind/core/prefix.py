"""Detection of the prefix that marks a message as a command invocation."""

import logging
import re
from typing import Any, Iterable, Optional

from config.settings import settings

logger = logging.getLogger(__name__)

USER_MENTION_PREFIX = re.compile(r"<@!?([0-9]+)> ")


def has_string_prefix(text: str, prefix: str) -> Optional[int]:
    """Return the prefix length if ``text`` starts with ``prefix``.

    The prefix has to be strictly shorter than the message, so a message made of
    the prefix alone does not match.
    """
    if len(prefix) >= len(text):
        return None

    if text.startswith(prefix):
        return len(prefix)

    return None


def has_mention_prefix(text: str, user: Any) -> Optional[int]:
    """Return the length of a leading ``<@id> `` mention of ``user``.

    ``user`` may be a snowflake or anything with an ``id`` (a hikari user or member).
    The separating space after the mention is counted in the returned length.
    """
    if not text.startswith("<@"):
        return None

    match = USER_MENTION_PREFIX.match(text)
    if not match:
        return None

    user_id = int(getattr(user, "id", user))
    if int(match.group(1)) != user_id:
        return None

    return match.end()


def find_prefix(
    text: str,
    prefixes: Optional[Iterable[str]] = None,
    user: Any = None,
) -> Optional[int]:
    """Try each literal prefix in order, then the mention prefix for ``user``."""
    if prefixes is None:
        prefixes = [settings.command_prefix]

    for prefix in prefixes:
        consumed = has_string_prefix(text, prefix)
        if consumed is not None:
            logger.debug(f"Matched prefix {prefix!r}")
            return consumed

    if user is not None and settings.enable_mention_prefix:
        consumed = has_mention_prefix(text, user)
        if consumed is not None:
            logger.debug("Matched mention prefix")
            return consumed

    return None
