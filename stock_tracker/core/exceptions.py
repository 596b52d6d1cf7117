"""
Custom exceptions for the stock tracker.

All custom exceptions should be defined here for easy discovery
and consistent error handling throughout the application.

Every exception declares whether console mode may recover from it
(``recoverable``). Recoverable errors are user mistakes: console mode
prints them and keeps reading commands. Everything else ends the loop.
"""
from pathlib import Path
from typing import Union


class StockTrackerError(Exception):
    """Base exception for all stock tracker errors."""
    recoverable: bool = False


# ============================================================================
# CONFIGURATION
# ============================================================================

class ConfigurationError(StockTrackerError):
    """Raised when the command line cannot be bound to a configuration."""
    pass


class NoCommandError(ConfigurationError):
    """Raised when no command string follows the program name."""

    def __init__(self):
        super().__init__("No command string provided.")


class ArgumentsTooFewError(ConfigurationError):
    """Raised when a command receives fewer arguments than it requires."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Too few arguments provided for {command}")


class HomeDirectoryNotFoundError(ConfigurationError):
    """Raised when no configuration directory can be resolved."""

    def __init__(self):
        super().__init__(
            "Unexpected error: home directory not found. Consider specifying a "
            "configuration directory by setting \"STOCK_TRACKER_CONFIGURATION_DIRECTORY\""
        )


class DirectoryCreateError(ConfigurationError):
    """Raised when the configuration directory cannot be created."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Creation of directories to {self.path} unsuccessful")


class CommandInvalidError(ConfigurationError):
    """Raised when a command token matches no known verb or alias."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Command string {token!r} not recognized.")


# ============================================================================
# STORE I/O
# ============================================================================

class StoreError(StockTrackerError):
    """Raised when a JSON store cannot be read or written."""

    message = "Store operation on {path} unsuccessful."

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(self.message.format(path=self.path))


class OpenFailedError(StoreError):
    message = "Read from file {path} unsuccessful."


class WriteFailedError(StoreError):
    message = "Write to file at {path} unsuccessful."


class SerializeFailedError(StoreError):
    message = "Serialization for {path} unsuccessful."


class DeserializeFailedError(StoreError):
    message = "Deserialization of JSON file {path} unsuccessful."


# ============================================================================
# MAP TRANSACTIONS
# ============================================================================

class MapError(StockTrackerError):
    """Raised when a keyed record operation cannot be applied."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(message)


class InsertConflictError(MapError):
    def __init__(self, key: str):
        super().__init__(key, f"Insertion failed: key {key} is already occupied.")


class RemoveFailedError(MapError):
    def __init__(self, key: str):
        super().__init__(key, f"Remove at key {key} unsuccessful.")


class KeyNotFoundError(MapError):
    recoverable = True

    def __init__(self, key: str):
        super().__init__(key, f"Key {key} not found.")


# ============================================================================
# SESSION
# ============================================================================

class SessionError(StockTrackerError):
    """Raised when an operation conflicts with the session state."""
    pass


class InvalidUserError(SessionError):
    """Raised when logging in as a username absent from the user store."""
    recoverable = True

    def __init__(self, username: str):
        self.username = username
        super().__init__(
            f"Unexpected error: attempted to login as user {username}, "
            f"but user {username} was not found."
        )


class NoActiveUserError(SessionError):
    """Raised when an operation requires a logged in user."""
    recoverable = True

    def __init__(self):
        super().__init__("Command attempted without logging in.")


# ============================================================================
# INPUT
# ============================================================================

class InputError(StockTrackerError):
    """Raised when user supplied input is rejected."""
    pass


class InvalidInputError(InputError):
    def __init__(self, message: str = "Input not recognized."):
        super().__init__(message)


class ParseError(InputError):
    recoverable = True

    def __init__(self, value: str, expected: str):
        self.value = value
        self.expected = expected
        super().__init__(f"Could not parse {value!r} as {expected}.")
