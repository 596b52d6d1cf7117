"""Integration Tests for the typer entry point"""
import json

import pytest
from typer.testing import CliRunner

from stock_tracker.cli.main import app, execute

runner = CliRunner()


@pytest.fixture
def cli(config_dir):
    def _invoke(*args, input=None):
        return runner.invoke(app, list(args), input=input)
    return _invoke


class TestEntryPoint:

    def test_banner_without_command(self, cli):
        result = cli()
        assert result.exit_code == 1
        assert "Stock Tracker" in result.output
        assert "No command string provided." in result.output

    def test_version(self, cli):
        result = cli("--version")
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_session_of_commands(self, cli, config_dir):
        assert cli("init").exit_code == 0
        assert cli("create-user", "alice").exit_code == 0
        assert cli("CS", "FOO").exit_code == 0
        assert cli("login", "alice").exit_code == 0
        result = cli("buy-stock", "FOO", "7")
        assert result.exit_code == 0, result.output

        users = json.loads((config_dir / "UserMap.json").read_text())
        assert users["alice"]["portfolio"]["FOO"]["quantity"] == 7

        result = cli("list-portfolio")
        assert "FOO: 7 shares" in result.output

    def test_unknown_command_exits_nonzero(self, cli):
        result = cli("frobnicate")
        assert result.exit_code == 1
        assert "Problem parsing arguments" in result.output
        assert "not recognized" in result.output

    def test_too_few_arguments(self, cli):
        result = cli("edit-user", "alice")
        assert result.exit_code == 1
        assert "Too few arguments provided for edit-user" in result.output

    def test_handler_error_exits_nonzero(self, cli):
        cli("init")
        result = cli("buy-stock", "FOO", "1")
        assert result.exit_code == 1
        assert "Application error" in result.output
        assert "without logging in" in result.output

    def test_exit_invalid_outside_console(self, cli):
        assert cli("exit").exit_code == 1

    def test_delete_confirmation_from_input(self, cli, config_dir):
        cli("init")
        cli("create-user", "alice")
        result = cli("delete-user", "alice", input="yes\n")
        assert result.exit_code == 0, result.output
        assert json.loads((config_dir / "UserMap.json").read_text()) == {}

    def test_console_mode(self, cli, config_dir):
        cli("init")
        result = cli("console", input="create-user alice\nexit\n")
        assert result.exit_code == 0, result.output
        assert "Exiting..." in result.output
        assert list(json.loads((config_dir / "UserMap.json").read_text())) == ["alice"]

    def test_log_file_written(self, cli, config_dir):
        cli("init")
        assert (config_dir / "logs" / "stock_tracker.log").exists()

    def test_invalid_log_level(self, cli):
        result = cli("--log-level", "LOUD", "list-users")
        assert result.exit_code == 2

    @pytest.mark.parametrize("value", ["--version", "--help", "--log-level"])
    def test_option_like_arguments_pass_through(self, cli, config_dir, value):
        cli("init")
        cli("create-stock", "FOO")
        result = cli("edit-stock", "FOO", "cn", value)
        assert result.exit_code == 0, result.output

        stocks = json.loads((config_dir / "StockMap.json").read_text())
        assert stocks["FOO"]["company_name"] == value

    def test_options_before_command(self, cli):
        cli("init")
        result = cli("--log-level", "INFO", "list-users")
        assert result.exit_code == 0, result.output
        assert "No users created." in result.output


def test_execute_returns_status(config_dir):
    assert execute(["init"]) == 0
    assert execute(["login", "nobody"]) == 1
