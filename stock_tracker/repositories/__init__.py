"""
Persistence repositories
"""
from stock_tracker.repositories.map_repository import MapRepository, write_atomic

__all__ = ["MapRepository", "write_atomic"]
