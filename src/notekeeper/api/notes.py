"""Notes API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ..core.schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import Database, get_database
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    q: Optional[str] = Query(None, description="Substring to match in title or content"),
    current_user_id: int = Depends(get_current_user_id),
    database: Database = Depends(get_database),
):
    """List the caller's notes, most recently updated first."""
    note_service = NoteService(database)
    return await note_service.list_notes(current_user_id, q)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    current_user_id: int = Depends(get_current_user_id),
    database: Database = Depends(get_database),
):
    """Create a new note."""
    note_service = NoteService(database)
    return await note_service.create_note(current_user_id, request.title, request.content)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: int,
    current_user_id: int = Depends(get_current_user_id),
    database: Database = Depends(get_database),
):
    """Get a specific note."""
    note_service = NoteService(database)
    return await note_service.get_note(current_user_id, note_id)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: int,
    request: NoteUpdate,
    current_user_id: int = Depends(get_current_user_id),
    database: Database = Depends(get_database),
):
    """Update a note."""
    note_service = NoteService(database)
    return await note_service.update_note(
        current_user_id, note_id, title=request.title, content=request.content
    )


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: int,
    current_user_id: int = Depends(get_current_user_id),
    database: Database = Depends(get_database),
):
    """Delete a note."""
    note_service = NoteService(database)
    await note_service.delete_note(current_user_id, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
