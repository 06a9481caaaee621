"""Note service implementation."""

from typing import List, Optional

from ...database import Database
from ..exceptions import NotFound
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteResponse
from .interfaces import INoteService


class NoteService(INoteService):
    """Note service implementation.

    A note that does not exist and a note owned by someone else both surface
    as NotFound, so callers cannot probe for other users' note ids.
    """

    def __init__(self, database: Database):
        self.database = database
        self.note_repo = NoteRepository(database)

    async def create_note(self, user_id: int, title: str, content: Optional[str] = None) -> NoteResponse:
        """Create new note."""
        note = await self.note_repo.create_note(user_id, title, content)
        return NoteResponse.model_validate(note)

    async def list_notes(self, user_id: int, query: Optional[str] = None) -> List[NoteResponse]:
        """List the user's notes, filtered by substring when ``query`` is given."""
        if query:
            rows = await self.note_repo.search_notes(user_id, query)
        else:
            rows = await self.note_repo.list_notes(user_id)
        return [NoteResponse.model_validate(row) for row in rows]

    async def get_note(self, user_id: int, note_id: int) -> NoteResponse:
        """Get note by ID."""
        note = await self.note_repo.get_note(user_id, note_id)
        if note is None:
            raise NotFound()
        return NoteResponse.model_validate(note)

    async def update_note(
        self,
        user_id: int,
        note_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> NoteResponse:
        """Update existing note."""
        note = await self.note_repo.update_note(user_id, note_id, title=title, content=content)
        if note is None:
            raise NotFound()
        return NoteResponse.model_validate(note)

    async def delete_note(self, user_id: int, note_id: int) -> None:
        """Delete note."""
        if not await self.note_repo.delete_note(user_id, note_id):
            raise NotFound()
