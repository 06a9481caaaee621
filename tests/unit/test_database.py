"""Unit tests for the persistence gateway (notekeeper/database.py)."""

import asyncio

import pytest
from sqlalchemy import insert, select, text

from notekeeper.core.models import Note, User
from notekeeper.database import Database, ExecuteResult

users = User.__table__
notes = Note.__table__


async def test_initialize_creates_tables(database):
    rows = await database.query_all(
        text("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name")
    )
    names = {row["name"] for row in rows}
    assert {"users", "notes"} <= names


async def test_initialize_is_idempotent_under_concurrency(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'notes.sqlite3'}")
    try:
        await asyncio.gather(*(db.initialize() for _ in range(5)))
        assert db.initialized
        # running again on an existing file is a no-op
        await db.initialize()
    finally:
        await db.close()

    reopened = Database(f"sqlite+aiosqlite:///{tmp_path / 'notes.sqlite3'}")
    try:
        await reopened.initialize()
        assert await reopened.query_all(select(users)) == []
    finally:
        await reopened.close()


async def test_execute_reports_insert_id_and_rowcount(database):
    result = await database.execute(insert(users).values(username="alice", password_hash="x"))
    assert isinstance(result, ExecuteResult)
    assert result.last_insert_id == 1
    assert result.rows_affected == 1

    second = await database.execute(insert(users).values(username="bob", password_hash="y"))
    assert second.last_insert_id == 2


async def test_query_one_and_all_return_dicts(database):
    await database.execute(insert(users).values(username="alice", password_hash="x"))

    row = await database.query_one(select(users.c.id, users.c.username).where(users.c.username == "alice"))
    assert row == {"id": 1, "username": "alice"}

    missing = await database.query_one(select(users).where(users.c.username == "nobody"))
    assert missing is None

    rows = await database.query_all(select(users.c.username))
    assert rows == [{"username": "alice"}]


async def test_params_are_bound_not_interpolated(database):
    await database.execute(insert(users).values(username="alice", password_hash="x"))

    hostile = "alice' OR '1'='1"
    rows = await database.query_all(
        text("SELECT id FROM users WHERE username = :username"), {"username": hostile}
    )
    assert rows == []


async def test_foreign_keys_are_enforced(database):
    from sqlalchemy.exc import IntegrityError

    with pytest.raises(IntegrityError):
        await database.execute(insert(notes).values(user_id=999, title="orphan", content=""))


async def test_ping(database):
    await database.ping()
