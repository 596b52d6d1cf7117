"""
Application services
"""
from stock_tracker.services.session_service import SessionService

__all__ = ["SessionService"]
