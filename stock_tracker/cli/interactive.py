"""
Interactive console mode
Re-binds each stdin line and runs it through the normal dispatch path
"""
import shlex
from typing import Optional

from stock_tracker.cli.dispatch import dispatch
from stock_tracker.cli.output import console, escape, show_error
from stock_tracker.config import Configuration
from stock_tracker.core.enums import Command
from stock_tracker.core.exceptions import ConfigurationError, StockTrackerError
from stock_tracker.logger import logger

PROMPT = "> "
PROGRAM_TOKEN = "console"


def read_command_line() -> Optional[str]:
    """Read one line from stdin, None at end of input."""
    try:
        return console.input(PROMPT)
    except EOFError:
        return None


def console_mode(config: Optional[Configuration] = None) -> None:
    """
    Run commands from stdin until ``exit``/``quit``/``q`` or end of input

    Lines that do not bind print "Command not recognized." and the loop
    goes on. Handler errors flagged ``recoverable`` are printed and the
    loop goes on; any other error ends the loop and propagates.
    """
    console.print("Entering console mode...")
    logger.info("Console mode started")

    while True:
        line = read_command_line()
        if line is None:
            console.print()
            break
        if not line.strip():
            continue

        try:
            tokens = shlex.split(line)
        except ValueError:
            console.print("Command not recognized.")
            continue

        try:
            this_config = Configuration.bind([PROGRAM_TOKEN, *tokens])
        except ConfigurationError as e:
            console.print("Command not recognized.")
            console.print(f"[dim]{escape(str(e))}[/dim]")
            continue

        if this_config.command is Command.CONSOLE:
            console.print("Already in console mode.")
            continue
        if this_config.command is Command.EXIT:
            console.print("Exiting...")
            break

        try:
            dispatch(this_config)
        except StockTrackerError as e:
            if not e.recoverable:
                logger.warning(f"Console mode ended by {type(e).__name__}: {e}")
                raise
            logger.warning(f"{this_config.command} failed: {e}")
            show_error(e)

    logger.info("Console mode ended")

