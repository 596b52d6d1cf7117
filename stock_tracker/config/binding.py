"""
Binding of process arguments to a command configuration
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from stock_tracker.config.settings import StorageConfig
from stock_tracker.core.enums import Command
from stock_tracker.core.exceptions import (
    ArgumentsTooFewError,
    DirectoryCreateError,
    HomeDirectoryNotFoundError,
    NoCommandError,
)

USER_MAP_FILE = "UserMap.json"
STOCK_MAP_FILE = "StockMap.json"
STATE_FILE = "State.json"


def resolve_configuration_directory(storage: Optional[StorageConfig] = None) -> Path:
    """
    Resolve the directory holding the JSON stores

    The override variable wins when set and non-empty, otherwise the
    directory lives under the user's home.

    Raises:
        HomeDirectoryNotFoundError: If neither is available
    """
    storage = storage or StorageConfig()
    if storage.configuration_directory:
        return Path(storage.configuration_directory).expanduser()

    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        raise HomeDirectoryNotFoundError() from None
    if str(home) in ("", "~"):
        raise HomeDirectoryNotFoundError()
    return home / storage.default_directory_name


def ensure_directory(path: Path) -> Path:
    """Create ``path`` and its parents if missing."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(path) from e
    return path


@dataclass(frozen=True)
class Configuration:
    """The bound CLI input of one invocation (or one console line)."""

    command: Command
    args: List[str] = field(default_factory=list)
    configuration_directory: Path = field(default_factory=Path)

    @classmethod
    def bind(cls, argv: Iterable[str], storage: Optional[StorageConfig] = None) -> "Configuration":
        """
        Bind ``argv`` (program name first) to a configuration

        Args:
            argv: Raw tokens, the first one being the program name
            storage: Storage settings, read from the environment when omitted

        Returns:
            The bound configuration, with its directory created

        Raises:
            NoCommandError: No verb token after the program name
            CommandInvalidError: Unknown verb
            ArgumentsTooFewError: Fewer trailing tokens than the verb needs
            HomeDirectoryNotFoundError: No directory could be resolved
            DirectoryCreateError: The directory could not be created
        """
        tokens = [str(token) for token in argv][1:]
        if not tokens:
            raise NoCommandError()

        command = Command.parse(tokens[0])
        args = tokens[1:]
        if len(args) < command.num_args:
            raise ArgumentsTooFewError(command.display)

        directory = ensure_directory(resolve_configuration_directory(storage))
        return cls(command=command, args=args, configuration_directory=directory)

    @property
    def user_map_path(self) -> Path:
        return self.configuration_directory / USER_MAP_FILE

    @property
    def stock_map_path(self) -> Path:
        return self.configuration_directory / STOCK_MAP_FILE

    @property
    def state_path(self) -> Path:
        return self.configuration_directory / STATE_FILE

    @property
    def log_directory(self) -> Path:
        return self.configuration_directory / "logs"
