"""
Service interfaces for Notekeeper.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ...security import Claims
from ..schemas.auth import LoginResponse, UserPublic
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteResponse


class IAuthService(ABC):
    """Credential service: signup, login and token verification."""

    @abstractmethod
    async def register(self, username: str, password: str) -> UserPublic:
        """Create an account."""
        pass

    @abstractmethod
    async def authenticate(self, username: str, password: str) -> LoginResponse:
        """Check credentials and issue a token."""
        pass

    @abstractmethod
    def verify(self, token: str) -> Claims:
        """Decode a bearer token."""
        pass


class INoteService(ABC):
    """Note service for ownership-scoped CRUD and search."""

    @abstractmethod
    async def create_note(self, user_id: int, title: str, content: Optional[str] = None) -> NoteResponse:
        pass

    @abstractmethod
    async def list_notes(self, user_id: int, query: Optional[str] = None) -> List[NoteResponse]:
        pass

    @abstractmethod
    async def get_note(self, user_id: int, note_id: int) -> NoteResponse:
        pass

    @abstractmethod
    async def update_note(
        self,
        user_id: int,
        note_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> NoteResponse:
        pass

    @abstractmethod
    async def delete_note(self, user_id: int, note_id: int) -> None:
        pass


class IHealthService(ABC):
    """Health service for monitoring."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass
