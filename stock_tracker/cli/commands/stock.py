"""
CLI commands for the stock catalogue
"""
from typing import Dict

from stock_tracker.cli.commands.common import confirm_delete
from stock_tracker.cli.output import console, escape, notify
from stock_tracker.config import Configuration
from stock_tracker.core.exceptions import (
    InsertConflictError,
    KeyNotFoundError,
    RemoveFailedError,
)
from stock_tracker.logger import logger
from stock_tracker.models.stock import Stock, StockProperty
from stock_tracker.repositories import MapRepository


def create_stock(config: Configuration) -> None:
    ticker = config.args[0]
    stock = Stock.from_ticker(ticker)

    def insert(stocks: Dict[str, Stock]) -> None:
        if ticker in stocks:
            raise InsertConflictError(ticker)
        stocks[ticker] = stock

    MapRepository.modify(config.stock_map_path, Stock, insert)

    logger.info(f"Stock created: {ticker}")
    notify(f"Stock {escape(ticker)} has been added.")


def delete_stock(config: Configuration) -> None:
    ticker = config.args[0]

    if ticker not in MapRepository.load(config.stock_map_path, Stock):
        raise KeyNotFoundError(ticker)

    if not confirm_delete("stock", ticker):
        logger.debug(f"Deletion of stock {ticker} declined")
        return

    def remove(stocks: Dict[str, Stock]) -> None:
        if stocks.pop(ticker, None) is None:
            raise RemoveFailedError(ticker)

    MapRepository.modify(config.stock_map_path, Stock, remove)

    logger.info(f"Stock deleted: {ticker}")
    notify(f"Stock {escape(ticker)} has been deleted.")


def edit_stock(config: Configuration) -> None:
    """
    Set one property of a stock; a ticker change renames the store key

    Portfolios keep the snapshot taken at purchase time and are not
    rewritten.
    """
    ticker, property_name, value = config.args[:3]
    note = ""

    def apply(stocks: Dict[str, Stock]) -> None:
        nonlocal note
        stock = stocks.get(ticker)
        if stock is None:
            raise KeyNotFoundError(ticker)

        prop = Stock.resolve_property(property_name)

        if prop is StockProperty.TICKER:
            if value != ticker and value in stocks:
                raise InsertConflictError(value)
            stock.set_property(prop, value)
            del stocks[ticker]
            stocks[value] = stock
            note = f"Stock {ticker} changed to {value}."
        else:
            stock.set_property(prop, value)
            shown = f"{stock.value:.2f}" if prop is StockProperty.VALUE else value
            note = f"Stock {ticker}'s {prop.value.replace('_', ' ')} changed to {shown}."

    MapRepository.modify(config.stock_map_path, Stock, apply)

    logger.info(note)
    notify(escape(note))


def list_stocks(config: Configuration) -> None:
    stocks = MapRepository.load(config.stock_map_path, Stock)

    if not stocks:
        console.print("No stocks created.")
        return

    console.print("List of stocks:")
    for ticker in sorted(stocks):
        console.print(escape(str(stocks[ticker])))
