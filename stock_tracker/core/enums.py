"""
Core enumerations used throughout the system.

These fundamental enums are used by multiple components and should be
imported from here (single source of truth).
"""

from enum import Enum


class CommandGroup(Enum):
    """
    Domain a command operates on.

    Values:
        TOP_LEVEL: init, console, exit, help
        SESSION: login, logout, whoami
        USER: user store commands
        STOCK: stock store commands
        PORTFOLIO: commands acting on the logged in user's holdings
    """
    TOP_LEVEL = "top-level"
    SESSION = "session"
    USER = "user"
    STOCK = "stock"
    PORTFOLIO = "portfolio"


class Command(Enum):
    """
    Every verb the tool recognizes.

    The value is the canonical lowercase display name. Aliases, argument
    counts and help text live in ``stock_tracker.cli.command_registry``.
    """
    INIT = "init"
    CONSOLE = "console"
    EXIT = "exit"
    HELP = "help"
    LOGIN = "login"
    LOGOUT = "logout"
    WHOAMI = "whoami"
    CREATE_USER = "create-user"
    DELETE_USER = "delete-user"
    EDIT_USER = "edit-user"
    LIST_USERS = "list-users"
    CREATE_STOCK = "create-stock"
    DELETE_STOCK = "delete-stock"
    EDIT_STOCK = "edit-stock"
    LIST_STOCKS = "list-stocks"
    BUY_STOCK = "buy-stock"
    LIST_PORTFOLIO = "list-portfolio"

    def __str__(self) -> str:
        return self.value

    @property
    def display(self) -> str:
        return self.value

    @property
    def num_args(self) -> int:
        from stock_tracker.cli.command_registry import required_arg_count
        return required_arg_count(self)

    @property
    def group(self) -> CommandGroup:
        from stock_tracker.cli.command_registry import get_meta
        return get_meta(self).group

    @classmethod
    def parse(cls, token: str) -> "Command":
        from stock_tracker.cli.command_registry import parse_command
        return parse_command(token)
