"""
Stock Tracker - CLI Application
"""
from typing import List, Optional, Sequence

import typer
from rich import box
from rich.panel import Panel

from stock_tracker.cli.dispatch import dispatch
from stock_tracker.cli.output import console, err_console, escape
from stock_tracker.config import Configuration, settings
from stock_tracker.core.exceptions import StockTrackerError
from stock_tracker.logger import logger, logger_manager

PROGRAM_NAME = "stock-tracker"

# Create Typer app
app = typer.Typer(
    name=PROGRAM_NAME,
    help="Track users, stocks and portfolios in local JSON stores",
    add_completion=False,
)


def execute(tokens: Sequence[str]) -> int:
    """
    Bind and run one command line (without the program name)

    Returns:
        Process exit status: 0 on success, 1 on any handled error
    """
    try:
        config = Configuration.bind([PROGRAM_NAME, *tokens])
    except StockTrackerError as e:
        err_console.print(f"[red]Problem parsing arguments:[/red] {escape(str(e))}")
        logger.warning(f"Argument binding failed: {e}")
        return 1

    logger_manager.attach_file(config.log_directory)

    try:
        dispatch(config)
    except StockTrackerError as e:
        err_console.print(f"[red]Application error:[/red] {escape(str(e))}")
        logger.warning(f"{config.command} failed with {type(e).__name__}: {e}")
        return 1
    return 0


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        # Options go before the verb; everything after it is passed through
        "allow_interspersed_args": False,
    },
)
def main(
    verb: Optional[str] = typer.Argument(None, help="Command, e.g. create-user or cu (see 'help')"),
    args: Optional[List[str]] = typer.Argument(None, help="Arguments for the command"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log file level (DEBUG, INFO, ...)"),
):
    """
    Stock Tracker CLI

    Run 'help' to list every command and its aliases. Options must come
    before the command; later tokens are passed to it unchanged.
    """
    if version:
        console.print(f"[cyan]{settings.APP_NAME}[/cyan] v{settings.APP_VERSION}")
        raise typer.Exit()

    if log_level:
        try:
            logger_manager.set_level(log_level)
        except ValueError as e:
            err_console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(code=2)

    if verb is None:
        # Show welcome message when no command is provided
        console.print(Panel.fit(
            f"[bold cyan]{settings.APP_NAME}[/bold cyan]\n"
            f"[dim]Version {settings.APP_VERSION}[/dim]\n\n"
            f"[yellow]Run '{PROGRAM_NAME} help' to see available commands[/yellow]",
            box=box.ROUNDED,
            border_style="cyan"
        ))
        raise typer.Exit(code=execute([]))

    code = execute([verb, *(args or [])])
    if code:
        raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
