"""
Database models for Notekeeper.

SQLAlchemy declarative models defining the two-table schema. Data access goes
through Core statements built against these tables, executed by the
persistence gateway in ``notekeeper.database``.

Models included:
    - User: account with username/password authentication
    - Note: per-user note with title and content
"""

from .base import BaseModel, utcnow
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "utcnow",
]
