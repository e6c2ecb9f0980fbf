"""Command argument types and definitions."""

from dataclasses import dataclass
from typing import Any

from .errors import ArgumentDefinitionError


@dataclass
class CommandArgument:
    """Defines a positional argument of a prefix command.

    ``arg_type`` is the key used to look up a converter. A ``catch_all`` argument
    absorbs every remaining token and is bound as a list of ``arg_type`` values.
    """

    name: str
    arg_type: Any
    description: str = ""
    required: bool = True
    default: Any = None
    catch_all: bool = False
    position: int | None = None

    @property
    def is_optional(self) -> bool:
        return not self.required

    @property
    def is_catch_all(self) -> bool:
        return self.catch_all


def validate_arguments(arguments: list[CommandArgument]) -> list[CommandArgument]:
    """Check argument ordering and fill in missing positions.

    Positions must run 0, 1, 2... in list order, and only the last argument may be
    a catch-all.
    """
    for index, argument in enumerate(arguments):
        if argument.position is None:
            argument.position = index
        elif argument.position != index:
            raise ArgumentDefinitionError(
                f"Argument {argument.name!r} has position {argument.position}, expected {index}"
            )

        if argument.catch_all and index != len(arguments) - 1:
            raise ArgumentDefinitionError(
                f"Catch-all argument {argument.name!r} must be the last argument"
            )

    return arguments
