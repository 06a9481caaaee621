"""
User model for authentication.
"""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class User(BaseModel):
    """User account model with username/password auth."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        # Enforce max length and non-empty at DB level (SQLite compatible)
        CheckConstraint("length(username) BETWEEN 1 AND 50", name="ck_users_username_len"),
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"
