"""Unit tests for UserRepository against an in-memory database."""

import sqlite3

import pytest
from sqlalchemy.exc import IntegrityError

from notekeeper.core.exceptions import DuplicateUsername
from notekeeper.core.repositories.user_repository import UserRepository, is_unique_violation


class FakeDriverError(Exception):
    def __init__(self, **attrs):
        super().__init__("driver error")
        self.__dict__.update(attrs)


def _integrity_error(**attrs) -> IntegrityError:
    return IntegrityError("INSERT INTO users ...", {}, FakeDriverError(**attrs))


async def test_create_user_returns_public_row(database):
    repo = UserRepository(database)
    user = await repo.create_user("alice", "hash")

    assert user["id"] == 1
    assert user["username"] == "alice"
    assert user["created_at"] is not None
    assert "password_hash" not in user


async def test_duplicate_username_detected_from_store(database):
    repo = UserRepository(database)
    await repo.create_user("alice", "hash1")

    with pytest.raises(DuplicateUsername):
        await repo.create_user("alice", "hash2")


async def test_other_integrity_errors_propagate(database):
    repo = UserRepository(database)

    # violates the username length CHECK, not UNIQUE
    with pytest.raises(IntegrityError):
        await repo.create_user("a" * 51, "hash")


async def test_get_credentials_includes_hash(database):
    repo = UserRepository(database)
    created = await repo.create_user("alice", "stored-hash")

    creds = await repo.get_credentials("alice")
    assert creds == {"id": created["id"], "username": "alice", "password_hash": "stored-hash"}
    assert await repo.get_credentials("nobody") is None


async def test_get_by_id(database):
    repo = UserRepository(database)
    created = await repo.create_user("alice", "hash")

    assert await repo.get_by_id(created["id"]) == created
    assert await repo.get_by_id(999) is None


def test_unique_violation_by_sqlite_code():
    assert is_unique_violation(_integrity_error(sqlite_errorcode=sqlite3.SQLITE_CONSTRAINT_UNIQUE))


def test_unique_violation_by_sqlstate():
    assert is_unique_violation(_integrity_error(sqlstate="23505"))


def test_not_null_violation_is_not_unique():
    assert not is_unique_violation(_integrity_error(sqlite_errorcode=sqlite3.SQLITE_CONSTRAINT_NOTNULL))
    assert not is_unique_violation(_integrity_error(sqlstate="23502"))


def test_message_text_alone_is_not_trusted():
    err = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: users.username"))
    assert not is_unique_violation(err)
