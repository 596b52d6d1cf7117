"""
CLI commands acting on the logged in user's portfolio
"""
from typing import Dict

from stock_tracker.cli.commands.common import parse_int
from stock_tracker.cli.output import console, escape, notify
from stock_tracker.config import Configuration
from stock_tracker.core.exceptions import KeyNotFoundError
from stock_tracker.logger import logger
from stock_tracker.models.stock import Stock
from stock_tracker.models.user import User
from stock_tracker.repositories import MapRepository
from stock_tracker.services import SessionService


def buy_stock(config: Configuration) -> None:
    """
    Add shares of a stock to the logged in user's portfolio

    Repeated purchases of the same ticker accumulate into one unit.
    """
    username = SessionService.initialize(config.state_path).require_user()
    ticker, raw_quantity = config.args[:2]

    stocks = MapRepository.load(config.stock_map_path, Stock)
    stock = stocks.get(ticker)
    if stock is None:
        raise KeyNotFoundError(ticker)

    quantity = parse_int(raw_quantity)
    held = 0

    def purchase(users: Dict[str, User]) -> None:
        nonlocal held
        user = users.get(username)
        if user is None:
            raise KeyNotFoundError(username)
        held = user.add_stock(stock, quantity).quantity

    MapRepository.modify(config.user_map_path, User, purchase)

    logger.info(f"{username} bought {quantity} x {ticker} (now holds {held})")
    notify(f"{quantity} shares of stock {escape(ticker)} purchased by {escape(username)}.")


def list_portfolio(config: Configuration) -> None:
    username = SessionService.initialize(config.state_path).require_user()

    users = MapRepository.load(config.user_map_path, User)
    user = users.get(username)
    if user is None:
        raise KeyNotFoundError(username)

    console.print(f"User profile {escape(username)} has:")
    holdings = user.holdings()
    if not holdings:
        console.print("No holdings")
        return

    for unit in holdings.values():
        console.print(escape(str(unit)))
