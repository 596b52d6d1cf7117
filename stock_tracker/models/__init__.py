"""
Record models persisted in the JSON stores
"""
from stock_tracker.models.stock import Stock, StockUnit, StockProperty
from stock_tracker.models.user import User, UserProperty
from stock_tracker.models.state import SessionState

__all__ = [
    "Stock",
    "StockUnit",
    "StockProperty",
    "User",
    "UserProperty",
    "SessionState",
]
