"""
Core building blocks shared by every layer
"""
from stock_tracker.core.enums import Command, CommandGroup

__all__ = ["Command", "CommandGroup"]
