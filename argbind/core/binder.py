"""Binding of argument tokens to a command's argument definitions."""

import logging
from typing import Any, List, Optional, Sequence

from ..commands.argument_types import CommandArgument
from ..commands.errors import TooFewArgumentsError, TooManyArgumentsError
from ..commands.registry import ConverterRegistry, converters

logger = logging.getLogger(__name__)


def check_arity(arguments: Sequence[CommandArgument], token_count: int) -> None:
    """Raise an ArityError if ``token_count`` cannot fill ``arguments``."""
    required = sum(1 for arg in arguments if not arg.is_optional and not arg.is_catch_all)
    if token_count < required:
        raise TooFewArgumentsError(expected=required, actual=token_count)

    if token_count > len(arguments) and (not arguments or not arguments[-1].is_catch_all):
        raise TooManyArgumentsError(expected=len(arguments), actual=token_count)


async def bind_arguments(
    arguments: Sequence[CommandArgument],
    tokens: Sequence[str],
    ctx: Any,
    registry: Optional[ConverterRegistry] = None,
) -> List[Any]:
    """Convert ``tokens`` into the positional values for a command call.

    The result starts with ``ctx`` followed by one value per argument. A catch-all
    argument receives a list with every remaining token converted. Arguments left
    without a token get their default (or an empty list for a catch-all).
    """
    if registry is None:
        registry = converters
    tokens = list(tokens)
    check_arity(arguments, len(tokens))

    bound: List[Any] = [None] * (len(arguments) + 1)
    bound[0] = ctx

    for i, token in enumerate(tokens):
        arg = arguments[i]
        if not arg.is_catch_all:
            bound[i + 1] = await registry.convert(token, ctx, arg.arg_type, arg.is_optional, arg.default)
            continue

        # Every element of a catch-all is required, regardless of its default
        remaining = tokens[i:]
        bound[i + 1] = [await registry.convert(value, ctx, arg.arg_type) for value in remaining]
        logger.debug(f"Catch-all {arg.name!r} consumed {len(remaining)} token(s)")
        break

    for i in range(len(tokens), len(arguments)):
        arg = arguments[i]
        if arg.is_catch_all:
            bound[i + 1] = []
        elif arg.is_optional:
            bound[i + 1] = arg.default

    logger.debug(f"Bound {len(tokens)} token(s) to {len(arguments)} argument(s)")
    return bound
