"""
Shared rich consoles and small printing helpers
"""
from rich.console import Console
from rich.markup import escape

# Rich console for normal output, and one for error messages
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def notify(message: str) -> None:
    """Print a one-line confirmation."""
    console.print(f"[green]✓[/green] {message}")


def show_error(error: Exception) -> None:
    console.print(f"[red]✗[/red] {escape(str(error))}")


__all__ = ["console", "err_console", "notify", "show_error", "escape"]
