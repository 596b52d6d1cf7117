"""
CLI commands for the login session
"""
from stock_tracker.cli.output import console, escape, notify
from stock_tracker.config import Configuration
from stock_tracker.models.user import User
from stock_tracker.repositories import MapRepository
from stock_tracker.services import SessionService


def login(config: Configuration) -> None:
    username = config.args[0]
    session = SessionService.initialize(config.state_path)
    users = MapRepository.load(config.user_map_path, User)

    session.login(username, users)
    notify(f"Logged in as {escape(username)} successfully.")


def logout(config: Configuration) -> None:
    session = SessionService.initialize(config.state_path)
    session.logout()
    notify("Logged out successfully.")


def whoami(config: Configuration) -> None:
    session = SessionService.initialize(config.state_path)
    if not session.logged_in:
        console.print("[yellow]Not logged in.[/yellow]")
    else:
        console.print(f"Logged in as [bold]{escape(session.current_user)}[/bold].")
