# Note model for user content
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel, utcnow


class Note(BaseModel):
    """Note owned by exactly one user."""

    __tablename__ = "notes"

    # owner reference
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    __table_args__ = (
        Index("idx_notes_user_id", "user_id"),
        # listing is always per owner, most recently touched first
        Index("idx_notes_user_updated", "user_id", "updated_at"),
        CheckConstraint("length(title) BETWEEN 1 AND 200", name="ck_notes_title_len"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', user_id={self.user_id})>"
