"""
Persisted session state
"""
from typing import Optional

from pydantic import BaseModel, model_validator


class SessionState(BaseModel):
    """Logged in flag and current username.

    ``current_user`` is set iff ``logged_in`` is true.
    """
    logged_in: bool = False
    current_user: Optional[str] = None

    @model_validator(mode="after")
    def _check_consistency(self) -> "SessionState":
        if self.logged_in != (self.current_user is not None):
            raise ValueError("current_user must be set iff logged_in is true")
        return self
