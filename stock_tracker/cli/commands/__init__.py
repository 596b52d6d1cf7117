"""
CLI command handlers
"""
from stock_tracker.cli.commands import admin, portfolio, session, stock, user

__all__ = ["admin", "portfolio", "session", "stock", "user"]
