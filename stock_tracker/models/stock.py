"""
Stock and StockUnit models
"""
import math
from enum import Enum

from pydantic import BaseModel, Field

from stock_tracker.core.exceptions import InvalidInputError, ParseError
from stock_tracker.models.properties import build_aliases, lookup_property


class StockProperty(str, Enum):
    """Editable stock fields"""
    TICKER = "ticker"
    COMPANY_NAME = "company_name"
    VALUE = "value"


STOCK_PROPERTY_ALIASES = build_aliases({
    StockProperty.TICKER: ("t", "ticker"),
    StockProperty.COMPANY_NAME: ("cn", "name", "company", "company-name"),
    StockProperty.VALUE: ("v", "value", "price"),
})


class Stock(BaseModel):
    """A representative value of one share of a company's stock"""
    ticker: str = Field(..., min_length=1)
    company_name: str = ""
    value: float = Field(0.0, allow_inf_nan=False)  # USD value of one share

    @classmethod
    def from_ticker(cls, ticker: str) -> "Stock":
        if not ticker.strip():
            raise InvalidInputError("Ticker must not be empty.")
        return cls(ticker=ticker)

    @staticmethod
    def resolve_property(name: str) -> StockProperty:
        return lookup_property(name, STOCK_PROPERTY_ALIASES, "stock")

    def set_property(self, prop: StockProperty, raw: str) -> None:
        """
        Assign ``raw`` to ``prop``, parsing numeric fields

        Raises:
            ParseError: value is not a finite number
            InvalidInputError: empty ticker
        """
        if prop is StockProperty.VALUE:
            try:
                value = float(raw)
            except ValueError:
                raise ParseError(raw, "float") from None
            if not math.isfinite(value):
                raise ParseError(raw, "float")
            self.value = value
        elif prop is StockProperty.TICKER:
            if not raw.strip():
                raise InvalidInputError("Ticker must not be empty.")
            self.ticker = raw
        else:
            self.company_name = raw

    def __str__(self) -> str:
        name = self.company_name or "unnamed"
        return f"{self.ticker} ({name}): {self.value:.2f}"


class StockUnit(BaseModel):
    """A quantity of shares of one stock, as snapshotted at purchase"""
    stock: Stock
    quantity: int = Field(..., gt=0)

    def add(self, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidInputError(f"Quantity must be positive, got {quantity}.")
        self.quantity += quantity

    def __str__(self) -> str:
        return f"{self.stock.ticker}: {self.quantity} shares"
