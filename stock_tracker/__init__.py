"""
Stock Tracker - local user, stock and portfolio bookkeeping from the command line
"""
__version__ = "1.0.0"
