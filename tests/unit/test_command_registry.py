"""Unit Tests for command parsing and the command registry"""
import pytest

from stock_tracker.cli.command_registry import (
    ALL_COMMANDS,
    get_meta,
    parse_command,
    required_arg_count,
)
from stock_tracker.core.enums import Command, CommandGroup
from stock_tracker.core.exceptions import CommandInvalidError


EXPECTED_ARGS = {
    Command.INIT: 0,
    Command.CONSOLE: 0,
    Command.EXIT: 0,
    Command.HELP: 0,
    Command.LOGIN: 1,
    Command.LOGOUT: 0,
    Command.WHOAMI: 0,
    Command.CREATE_USER: 1,
    Command.DELETE_USER: 1,
    Command.EDIT_USER: 3,
    Command.LIST_USERS: 0,
    Command.CREATE_STOCK: 1,
    Command.DELETE_STOCK: 1,
    Command.EDIT_STOCK: 3,
    Command.LIST_STOCKS: 0,
    Command.BUY_STOCK: 2,
    Command.LIST_PORTFOLIO: 0,
}


class TestParse:
    """Test token -> Command parsing."""

    @pytest.mark.parametrize("meta", ALL_COMMANDS, ids=lambda m: m.name)
    def test_name_and_aliases_any_case(self, meta):
        for token in (meta.name,) + meta.aliases:
            assert parse_command(token) is meta.command
            assert parse_command(token.upper()) is meta.command
            assert parse_command(token.title()) is meta.command

    def test_parse_matches_canonical_form(self):
        assert Command.parse("CU") is Command.parse("create-user")
        assert Command.parse("Li") is Command.LOGIN
        assert Command.parse("BUY-STOCK") is Command.BUY_STOCK

    @pytest.mark.parametrize("token", ["", "create", "buy", "create_user", "xyz"])
    def test_unknown_token(self, token):
        with pytest.raises(CommandInvalidError) as exc_info:
            parse_command(token)
        assert exc_info.value.token == token


class TestRegistry:
    """Test the registry table."""

    def test_every_command_registered(self):
        assert {meta.command for meta in ALL_COMMANDS} == set(Command)

    def test_required_arg_counts(self):
        for command, expected in EXPECTED_ARGS.items():
            assert required_arg_count(command) == expected
            assert command.num_args == expected

    def test_display_round_trips(self):
        for command in Command:
            assert str(command) == command.display
            assert command.display == command.display.lower()
            assert parse_command(str(command)) is command

    def test_groups(self):
        assert Command.LOGIN.group is CommandGroup.SESSION
        assert Command.EDIT_STOCK.group is CommandGroup.STOCK
        assert Command.BUY_STOCK.group is CommandGroup.PORTFOLIO
        assert get_meta(Command.EXIT).aliases == ("quit", "q")
