"""Note repository for database operations.

Every statement here is scoped with ``notes.user_id == :user_id``. Updates and
deletes keep that clause even after a scoped read so a note can never be
touched through its id alone.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import and_, delete, desc, insert, or_, select, update

from ...database import Database
from ..exceptions import InvalidInput
from ..logging import get_logger
from ..models.base import utcnow
from ..models.note import Note

logger = get_logger("repositories.notes")

notes = Note.__table__

TITLE_MAX_LENGTH = 200

# largest value a SQLite INTEGER key can hold
MAX_NOTE_ID = 2**63 - 1


def _validate_title(title: Optional[str]) -> None:
    if not title:
        raise InvalidInput("Title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise InvalidInput(f"Title must be at most {TITLE_MAX_LENGTH} characters")


def _next_timestamp(previous: Optional[datetime]) -> datetime:
    """Current time, nudged past ``previous`` so updated_at always advances."""
    now = utcnow()
    if previous is None:
        return now
    if previous.tzinfo is None:
        # SQLite hands back naive values; they were written as UTC
        previous = previous.replace(tzinfo=timezone.utc)
    if now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


def _valid_id(note_id: int) -> bool:
    return 1 <= note_id <= MAX_NOTE_ID


def _owned(user_id: int, note_id: int):
    return and_(notes.c.id == note_id, notes.c.user_id == user_id)


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, database: Database):
        self.database = database

    async def create_note(
        self, user_id: int, title: str, content: Optional[str] = None
    ) -> Dict[str, Any]:
        """Create a note for the user and return the stored row."""
        _validate_title(title)
        now = utcnow()
        stmt = insert(notes).values(
            user_id=user_id,
            title=title,
            content=content or "",
            created_at=now,
            updated_at=now,
        )
        result = await self.database.execute(stmt)
        note = await self.get_note(user_id, result.last_insert_id)
        logger.info("Created note", extra={"note_id": result.last_insert_id, "user_id": user_id})
        return note

    async def list_notes(self, user_id: int) -> List[Dict[str, Any]]:
        """All notes owned by the user, most recently updated first."""
        stmt = (
            select(notes)
            .where(notes.c.user_id == user_id)
            .order_by(desc(notes.c.updated_at), desc(notes.c.id))
        )
        return await self.database.query_all(stmt)

    async def search_notes(self, user_id: int, query: str) -> List[Dict[str, Any]]:
        """Notes whose title or content contains ``query`` as a literal substring."""
        stmt = select(notes).where(notes.c.user_id == user_id)
        if query:
            stmt = stmt.where(
                or_(
                    notes.c.title.contains(query, autoescape=True),
                    notes.c.content.contains(query, autoescape=True),
                )
            )
        stmt = stmt.order_by(desc(notes.c.updated_at), desc(notes.c.id))
        return await self.database.query_all(stmt)

    async def get_note(self, user_id: int, note_id: int) -> Optional[Dict[str, Any]]:
        """Get note by ID if owned by user."""
        if not _valid_id(note_id):
            return None
        stmt = select(notes).where(_owned(user_id, note_id))
        return await self.database.query_one(stmt)

    async def update_note(
        self,
        user_id: int,
        note_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Merge the supplied fields into the note if owned by user."""
        if title is not None:
            _validate_title(title)

        note = await self.get_note(user_id, note_id)
        if not note:
            return None

        stmt = (
            update(notes)
            .where(_owned(user_id, note_id))
            .values(
                title=note["title"] if title is None else title,
                content=note["content"] if content is None else content,
                updated_at=_next_timestamp(note["updated_at"]),
            )
        )
        result = await self.database.execute(stmt)
        if result.rows_affected == 0:
            # deleted between the read and the write
            return None

        logger.info("Updated note", extra={"note_id": note_id, "user_id": user_id})
        return await self.get_note(user_id, note_id)

    async def delete_note(self, user_id: int, note_id: int) -> bool:
        """Delete note if owned by user."""
        if not _valid_id(note_id):
            return False
        stmt = delete(notes).where(_owned(user_id, note_id))
        result = await self.database.execute(stmt)
        deleted = result.rows_affected > 0
        if deleted:
            logger.info("Deleted note", extra={"note_id": note_id, "user_id": user_id})
        else:
            logger.debug("Note not found or not owned", extra={"note_id": note_id, "user_id": user_id})
        return deleted
