"""
Typed errors raised by services and repositories.

Each carries the HTTP status the API layer answers with and a message that
is safe to show to the caller.
"""

from typing import Any, Dict, Optional


class NotekeeperError(Exception):
    """Base class for expected, caller-facing failures."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    @property
    def error(self) -> str:
        return self.__class__.__name__


class InvalidInput(NotekeeperError):
    status_code = 400
    default_message = "Invalid input"


class DuplicateUsername(NotekeeperError):
    status_code = 409
    default_message = "Username already exists"


class InvalidCredentials(NotekeeperError):
    status_code = 401
    default_message = "Invalid username or password"


class InvalidToken(NotekeeperError):
    status_code = 401
    default_message = "Invalid or expired token"


class NotFound(NotekeeperError):
    status_code = 404
    default_message = "Note not found"
