#!/usr/bin/env python
"""
Start the Stock Tracker CLI
"""
import sys
from stock_tracker.cli.main import app, execute

if __name__ == "__main__":
    # Check if running in interactive mode (default) or single-command mode
    if len(sys.argv) == 1:
        # No arguments - start console mode
        sys.exit(execute(["console"]))
    else:
        # Arguments provided - run as single command (for scripts/automation)
        app()
