"""
CLI commands for setup and help
"""
from rich import box
from rich.table import Table

from stock_tracker.cli.command_registry import COMMAND_GROUPS, CommandMeta
from stock_tracker.cli.output import console, escape, notify
from stock_tracker.config import Configuration
from stock_tracker.logger import logger
from stock_tracker.repositories import MapRepository
from stock_tracker.services import SessionService


def init(config: Configuration) -> None:
    """
    Reset both stores to empty maps and log out

    The session file is overwritten rather than read, so a corrupt state
    file is repaired as well.
    """
    MapRepository.reset(config.user_map_path)
    MapRepository.reset(config.stock_map_path)
    SessionService(config.state_path).logout()

    logger.warning(f"All user/stock data reset in {config.configuration_directory}")
    notify("All user/stock data reset/initialized.")


def _describe(meta: CommandMeta) -> str:
    lines = [escape(meta.description)]
    lines.extend(f"[dim]e.g. {escape(example)}[/dim]" for example in meta.examples)
    return "\n".join(lines)


def show_help(config: Configuration) -> None:
    """Display available commands (auto-generated from the registry)"""
    table = Table(title="Available Commands", box=box.ROUNDED)
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Aliases", style="magenta")
    table.add_column("Description", style="white")

    first = True
    for title, commands in COMMAND_GROUPS.values():
        if not first:
            table.add_section()
        table.add_row(f"[bold cyan]{title}[/bold cyan]", "", "", style="cyan")
        for meta in sorted(commands, key=lambda cmd: cmd.name):
            table.add_row(
                escape(meta.usage),
                ", ".join(meta.aliases),
                _describe(meta),
            )
        first = False

    console.print(table)
