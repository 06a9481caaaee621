"""User repository for database operations."""

import sqlite3
from typing import Any, Dict, Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError

from ...database import Database
from ..exceptions import DuplicateUsername
from ..models.base import utcnow
from ..models.user import User

users = User.__table__

# Columns that may leave the credential layer
PUBLIC_COLUMNS = (users.c.id, users.c.username, users.c.created_at)

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Check the driver's structured error code for a UNIQUE constraint failure."""
    orig = exc.orig
    if getattr(orig, "sqlite_errorcode", None) == sqlite3.SQLITE_CONSTRAINT_UNIQUE:
        return True
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return sqlstate == UNIQUE_VIOLATION_SQLSTATE


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, database: Database):
        self.database = database

    async def create_user(self, username: str, password_hash: str) -> Dict[str, Any]:
        """Insert a user and return its public row.

        Raises DuplicateUsername when the store rejects the username as taken.
        """
        stmt = insert(users).values(
            username=username,
            password_hash=password_hash,
            created_at=utcnow(),
        )
        try:
            result = await self.database.execute(stmt)
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise DuplicateUsername() from exc
            raise

        return await self.get_by_id(result.last_insert_id)

    async def get_by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        """Get public user row by ID."""
        stmt = select(*PUBLIC_COLUMNS).where(users.c.id == user_id)
        return await self.database.query_one(stmt)

    async def get_credentials(self, username: str) -> Optional[Dict[str, Any]]:
        """Get id, username and password hash for login."""
        stmt = select(users.c.id, users.c.username, users.c.password_hash).where(
            users.c.username == username
        )
        return await self.database.query_one(stmt)
