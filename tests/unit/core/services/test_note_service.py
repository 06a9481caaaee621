"""Unit tests for NoteService (notekeeper/core/services/note_service.py)."""

import pytest

from notekeeper.core.exceptions import InvalidInput, NotFound
from notekeeper.core.schemas.notes import NoteResponse
from notekeeper.core.services.note_service import NoteService


@pytest.fixture
def note_service(database):
    return NoteService(database)


async def test_create_and_get(note_service, alice):
    created = await note_service.create_note(alice.id, "A", "body")
    assert isinstance(created, NoteResponse)
    assert created.updated_at.tzinfo is not None

    fetched = await note_service.get_note(alice.id, created.id)
    assert fetched == created


async def test_create_missing_title(note_service, alice):
    with pytest.raises(InvalidInput) as exc_info:
        await note_service.create_note(alice.id, "")
    assert exc_info.value.message == "Title is required"


async def test_update_merges_fields(note_service, alice):
    created = await note_service.create_note(alice.id, "A")
    updated = await note_service.update_note(alice.id, created.id, content="x")

    assert updated.title == "A"
    assert updated.content == "x"
    assert updated.updated_at > created.updated_at


async def test_list_uses_search_only_with_query(note_service, alice):
    await note_service.create_note(alice.id, "alpha")
    await note_service.create_note(alice.id, "beta")

    assert len(await note_service.list_notes(alice.id)) == 2
    assert len(await note_service.list_notes(alice.id, "")) == 2
    assert [n.title for n in await note_service.list_notes(alice.id, "alp")] == ["alpha"]


async def test_not_found_and_foreign_notes_look_the_same(note_service, alice, bob):
    note = await note_service.create_note(alice.id, "mine")

    errors = []
    for call in (
        note_service.get_note(bob.id, note.id),
        note_service.get_note(bob.id, 999),
        note_service.update_note(bob.id, note.id, title="x"),
        note_service.update_note(bob.id, 999, title="x"),
        note_service.delete_note(bob.id, note.id),
        note_service.delete_note(bob.id, 999),
    ):
        with pytest.raises(NotFound) as exc_info:
            await call
        errors.append((exc_info.value.status_code, exc_info.value.message))

    assert len(set(errors)) == 1
    assert (await note_service.get_note(alice.id, note.id)).title == "mine"


async def test_delete(note_service, alice):
    note = await note_service.create_note(alice.id, "bye")
    await note_service.delete_note(alice.id, note.id)

    with pytest.raises(NotFound):
        await note_service.get_note(alice.id, note.id)
