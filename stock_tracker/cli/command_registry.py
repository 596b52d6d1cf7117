from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from stock_tracker.core.enums import Command, CommandGroup
from stock_tracker.core.exceptions import CommandInvalidError


@dataclass(frozen=True)
class CommandMeta:
    """Metadata for a CLI command.

    This is the single source of truth for:
    - aliases accepted by the parser
    - required argument count
    - usage string
    - short description
    - examples
    """

    command: Command
    group: CommandGroup
    num_args: int
    usage: str
    description: str
    aliases: Tuple[str, ...] = ()
    examples: List[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.command.value


TOP_LEVEL_COMMANDS: List[CommandMeta] = [
    CommandMeta(
        command=Command.INIT,
        group=CommandGroup.TOP_LEVEL,
        num_args=0,
        aliases=("i",),
        usage="init",
        description="Reset all user and stock data and log out (destructive)",
        examples=["init"],
    ),
    CommandMeta(
        command=Command.CONSOLE,
        group=CommandGroup.TOP_LEVEL,
        num_args=0,
        aliases=("c",),
        usage="console",
        description="Enter interactive console mode",
        examples=["console"],
    ),
    CommandMeta(
        command=Command.EXIT,
        group=CommandGroup.TOP_LEVEL,
        num_args=0,
        aliases=("quit", "q"),
        usage="exit",
        description="Leave console mode (console only)",
        examples=["exit", "q"],
    ),
    CommandMeta(
        command=Command.HELP,
        group=CommandGroup.TOP_LEVEL,
        num_args=0,
        aliases=("h", "?"),
        usage="help",
        description="Show available commands",
        examples=["help"],
    ),
]

SESSION_COMMANDS: List[CommandMeta] = [
    CommandMeta(
        command=Command.LOGIN,
        group=CommandGroup.SESSION,
        num_args=1,
        aliases=("li",),
        usage="login <username>",
        description="Log in as an existing user",
        examples=["login alice"],
    ),
    CommandMeta(
        command=Command.LOGOUT,
        group=CommandGroup.SESSION,
        num_args=0,
        aliases=("lo",),
        usage="logout",
        description="Log out the current user",
        examples=["logout"],
    ),
    CommandMeta(
        command=Command.WHOAMI,
        group=CommandGroup.SESSION,
        num_args=0,
        aliases=("w",),
        usage="whoami",
        description="Show the logged in user",
        examples=["whoami"],
    ),
]

USER_COMMANDS: List[CommandMeta] = [
    CommandMeta(
        command=Command.CREATE_USER,
        group=CommandGroup.USER,
        num_args=1,
        aliases=("cu",),
        usage="create-user <username>",
        description="Create a user profile",
        examples=["create-user alice"],
    ),
    CommandMeta(
        command=Command.DELETE_USER,
        group=CommandGroup.USER,
        num_args=1,
        aliases=("du",),
        usage="delete-user <username>",
        description="Delete a user profile (asks for confirmation)",
        examples=["delete-user alice"],
    ),
    CommandMeta(
        command=Command.EDIT_USER,
        group=CommandGroup.USER,
        num_args=3,
        aliases=("eu",),
        usage="edit-user <username> <property> <value>",
        description="Change username, first-name, last-name or middle-initial",
        examples=["edit-user alice fn Alice", "edit-user alice username alicia"],
    ),
    CommandMeta(
        command=Command.LIST_USERS,
        group=CommandGroup.USER,
        num_args=0,
        aliases=("lu",),
        usage="list-users",
        description="List all users",
        examples=["list-users"],
    ),
]

STOCK_COMMANDS: List[CommandMeta] = [
    CommandMeta(
        command=Command.CREATE_STOCK,
        group=CommandGroup.STOCK,
        num_args=1,
        aliases=("cs",),
        usage="create-stock <ticker>",
        description="Create a stock",
        examples=["create-stock FOO"],
    ),
    CommandMeta(
        command=Command.DELETE_STOCK,
        group=CommandGroup.STOCK,
        num_args=1,
        aliases=("ds",),
        usage="delete-stock <ticker>",
        description="Delete a stock (asks for confirmation)",
        examples=["delete-stock FOO"],
    ),
    CommandMeta(
        command=Command.EDIT_STOCK,
        group=CommandGroup.STOCK,
        num_args=3,
        aliases=("es",),
        usage="edit-stock <ticker> <property> <value>",
        description="Change ticker, company-name or value",
        examples=["edit-stock FOO value 12.50", "edit-stock FOO cn \"Foo Inc\""],
    ),
    CommandMeta(
        command=Command.LIST_STOCKS,
        group=CommandGroup.STOCK,
        num_args=0,
        aliases=("ls",),
        usage="list-stocks",
        description="List all stocks",
        examples=["list-stocks"],
    ),
]

PORTFOLIO_COMMANDS: List[CommandMeta] = [
    CommandMeta(
        command=Command.BUY_STOCK,
        group=CommandGroup.PORTFOLIO,
        num_args=2,
        aliases=("bs",),
        usage="buy-stock <ticker> <quantity>",
        description="Buy shares for the logged in user",
        examples=["buy-stock FOO 5"],
    ),
    CommandMeta(
        command=Command.LIST_PORTFOLIO,
        group=CommandGroup.PORTFOLIO,
        num_args=0,
        aliases=("lp",),
        usage="list-portfolio",
        description="Show the logged in user's holdings",
        examples=["list-portfolio"],
    ),
]

COMMAND_GROUPS: Dict[str, Tuple[str, List[CommandMeta]]] = {
    "general": ("GENERAL COMMANDS", TOP_LEVEL_COMMANDS),
    "session": ("SESSION COMMANDS", SESSION_COMMANDS),
    "user": ("USER COMMANDS", USER_COMMANDS),
    "stock": ("STOCK COMMANDS", STOCK_COMMANDS),
    "portfolio": ("PORTFOLIO COMMANDS", PORTFOLIO_COMMANDS),
}

ALL_COMMANDS: List[CommandMeta] = [
    meta for _, commands in COMMAND_GROUPS.values() for meta in commands
]

_META_BY_COMMAND: Dict[Command, CommandMeta] = {meta.command: meta for meta in ALL_COMMANDS}

# token -> command, built from canonical names and aliases
_LOOKUP: Dict[str, Command] = {}
for _meta in ALL_COMMANDS:
    for _token in (_meta.name,) + _meta.aliases:
        if _token in _LOOKUP:
            raise RuntimeError(f"Duplicate command token: {_token}")
        _LOOKUP[_token] = _meta.command


def get_meta(command: Command) -> CommandMeta:
    return _META_BY_COMMAND[command]


def parse_command(token: str) -> Command:
    """Match a raw token (case-insensitive) against names and aliases.

    Raises:
        CommandInvalidError: If the token is not a known verb
    """
    try:
        return _LOOKUP[token.strip().lower()]
    except KeyError:
        raise CommandInvalidError(token) from None


def required_arg_count(command: Command) -> int:
    return _META_BY_COMMAND[command].num_args
