"""
User model with portfolio aggregation
"""
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field

from stock_tracker.core.exceptions import InvalidInputError
from stock_tracker.models.properties import build_aliases, lookup_property
from stock_tracker.models.stock import Stock, StockUnit


class UserProperty(str, Enum):
    """Editable user fields"""
    USERNAME = "username"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    MIDDLE_INITIAL = "middle_initial"


USER_PROPERTY_ALIASES = build_aliases({
    UserProperty.USERNAME: ("u", "un", "username", "user-name"),
    UserProperty.FIRST_NAME: ("fn", "first", "first-name", "firstname"),
    UserProperty.LAST_NAME: ("ln", "last", "last-name", "lastname"),
    UserProperty.MIDDLE_INITIAL: ("mi", "middle", "middle-initial", "middleinitial"),
})


class User(BaseModel):
    """
    A user and their holdings

    ``portfolio`` maps a ticker to the owned StockUnit and stays None
    until the first purchase.
    """
    username: str = Field(..., min_length=1)
    first_name: str = ""
    last_name: str = ""
    middle_initial: str = ""
    portfolio: Optional[Dict[str, StockUnit]] = None

    @classmethod
    def from_username(cls, username: str) -> "User":
        if not username.strip():
            raise InvalidInputError("Username must not be empty.")
        return cls(username=username)

    @staticmethod
    def resolve_property(name: str) -> UserProperty:
        return lookup_property(name, USER_PROPERTY_ALIASES, "user")

    def set_property(self, prop: UserProperty, raw: str) -> None:
        if prop is UserProperty.USERNAME and not raw.strip():
            raise InvalidInputError("Username must not be empty.")
        setattr(self, prop.value, raw)

    def add_stock(self, stock: Stock, quantity: int) -> StockUnit:
        """
        Buy ``quantity`` shares of ``stock``

        The first purchase of a ticker stores a copy of the stock; later
        purchases increment the existing unit.

        Raises:
            InvalidInputError: quantity is not positive (portfolio untouched)
        """
        if quantity <= 0:
            raise InvalidInputError(f"Quantity must be positive, got {quantity}.")

        if self.portfolio is None:
            self.portfolio = {}

        unit = self.portfolio.get(stock.ticker)
        if unit is None:
            unit = StockUnit(stock=stock.model_copy(deep=True), quantity=quantity)
            self.portfolio[stock.ticker] = unit
        else:
            unit.add(quantity)
        return unit

    def holdings(self) -> Dict[str, StockUnit]:
        return dict(sorted((self.portfolio or {}).items()))

    def __str__(self) -> str:
        names = " ".join(part for part in (self.first_name, self.middle_initial, self.last_name) if part)
        return f"{self.username}: {names}" if names else self.username
