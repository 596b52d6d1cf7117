"""
Command dispatch: one handler per verb
"""
from typing import Callable, Dict

from stock_tracker.cli.commands import admin, portfolio, session, stock, user
from stock_tracker.config import Configuration
from stock_tracker.core.enums import Command
from stock_tracker.core.exceptions import InvalidInputError
from stock_tracker.logger import logger

Handler = Callable[[Configuration], None]

HANDLERS: Dict[Command, Handler] = {
    # Top-level commands
    Command.INIT: admin.init,
    Command.HELP: admin.show_help,
    # Session commands
    Command.LOGIN: session.login,
    Command.LOGOUT: session.logout,
    Command.WHOAMI: session.whoami,
    # User commands
    Command.CREATE_USER: user.create_user,
    Command.DELETE_USER: user.delete_user,
    Command.EDIT_USER: user.edit_user,
    Command.LIST_USERS: user.list_users,
    # Stock commands
    Command.CREATE_STOCK: stock.create_stock,
    Command.DELETE_STOCK: stock.delete_stock,
    Command.EDIT_STOCK: stock.edit_stock,
    Command.LIST_STOCKS: stock.list_stocks,
    # Portfolio commands
    Command.BUY_STOCK: portfolio.buy_stock,
    Command.LIST_PORTFOLIO: portfolio.list_portfolio,
}


def dispatch(config: Configuration) -> None:
    """
    Run the handler for ``config.command``

    ``console`` starts the interactive loop; ``exit`` is only meaningful
    inside it and is rejected here.

    Raises:
        StockTrackerError: Whatever the handler raises, unchanged
    """
    command = config.command
    logger.debug(f"Dispatching {command} with args {config.args}")

    if command is Command.EXIT:
        raise InvalidInputError(f"'{command}' is only available in console mode.")

    if command is Command.CONSOLE:
        from stock_tracker.cli.interactive import console_mode
        console_mode(config)
        return

    HANDLERS[command](config)
