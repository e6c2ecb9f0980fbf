"""Tests for argument definitions."""

import pytest

from argbind.commands.argument_types import CommandArgument, validate_arguments
from argbind.commands.errors import ArgumentDefinitionError


class TestCommandArgument:
    """Test CommandArgument class."""

    def test_argument_creation(self):
        arg = CommandArgument(
            name="amount",
            arg_type=int,
            description="How many",
            required=False,
            default=1,
        )

        assert arg.name == "amount"
        assert arg.arg_type is int
        assert arg.description == "How many"
        assert arg.is_optional is True
        assert arg.default == 1
        assert arg.is_catch_all is False

    def test_argument_defaults(self):
        arg = CommandArgument("text", str)

        assert arg.description == ""
        assert arg.required is True
        assert arg.is_optional is False
        assert arg.default is None
        assert arg.catch_all is False
        assert arg.position is None


class TestValidateArguments:
    """Test validate_arguments."""

    def test_assigns_positions(self):
        arguments = validate_arguments([CommandArgument("a", int), CommandArgument("b", str, catch_all=True)])

        assert [arg.position for arg in arguments] == [0, 1]

    def test_explicit_positions(self):
        validate_arguments([CommandArgument("a", int, position=0), CommandArgument("b", int, position=1)])

    def test_position_gap(self):
        with pytest.raises(ArgumentDefinitionError):
            validate_arguments([CommandArgument("a", int, position=0), CommandArgument("b", int, position=2)])

    def test_catch_all_not_last(self):
        with pytest.raises(ArgumentDefinitionError):
            validate_arguments([CommandArgument("rest", str, catch_all=True), CommandArgument("b", int)])

    def test_empty(self):
        assert validate_arguments([]) == []
