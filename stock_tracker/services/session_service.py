"""
Session Service
Tracks which user, if any, is logged in between invocations
"""
from pathlib import Path
from typing import Mapping, Optional, Union

from pydantic import ValidationError

from stock_tracker.core.exceptions import (
    DeserializeFailedError,
    InvalidUserError,
    NoActiveUserError,
    OpenFailedError,
    SerializeFailedError,
)
from stock_tracker.logger import logger
from stock_tracker.models.state import SessionState
from stock_tracker.repositories.map_repository import write_atomic


class SessionService:
    """
    Session state bound to its file

    Every mutating call persists immediately. The state is only as fresh
    as its last write; nothing is re-read after ``initialize``.
    """

    def __init__(self, path: Union[str, Path], state: Optional[SessionState] = None):
        self.path = Path(path)
        self.state = state or SessionState()

    @classmethod
    def initialize(cls, path: Union[str, Path]) -> "SessionService":
        """
        Load the state file, or create it with logged-out defaults

        Raises:
            OpenFailedError: The file exists but cannot be read
            DeserializeFailedError: The file is not a valid state document
        """
        path = Path(path)
        if not path.exists():
            service = cls(path)
            service.write()
            logger.debug(f"Session state initialized at {path}")
            return service

        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise OpenFailedError(path) from e
        except UnicodeDecodeError as e:
            raise DeserializeFailedError(path) from e

        try:
            state = SessionState.model_validate_json(raw)
        except ValidationError as e:
            raise DeserializeFailedError(path) from e
        return cls(path, state)

    @property
    def current_user(self) -> Optional[str]:
        return self.state.current_user

    @property
    def logged_in(self) -> bool:
        return self.state.logged_in

    def require_user(self) -> str:
        """Return the current username or raise NoActiveUserError."""
        if self.state.current_user is None:
            raise NoActiveUserError()
        return self.state.current_user

    def login(self, username: str, users: Mapping[str, object]) -> None:
        """
        Log in as ``username`` if it names a record in ``users``

        Raises:
            InvalidUserError: If the username is not a key of ``users``
        """
        if username not in users:
            raise InvalidUserError(username)
        self.set_user(username)
        logger.info(f"User logged in: {username}")

    def set_user(self, username: str) -> None:
        """Set the current user without checking the user store."""
        self.state = SessionState(logged_in=True, current_user=username)
        self.write()

    def logout(self) -> None:
        previous = self.state.current_user
        self.state = SessionState()
        self.write()
        if previous:
            logger.info(f"User logged out: {previous}")

    def write(self) -> None:
        try:
            payload = self.state.model_dump_json(indent=2)
        except (TypeError, ValueError) as e:
            raise SerializeFailedError(self.path) from e
        write_atomic(self.path, payload)
