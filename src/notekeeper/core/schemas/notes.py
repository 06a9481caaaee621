"""
Note schemas.

These schemas define the API contracts for note CRUD operations and search.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .auth import _assume_utc


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(max_length=200, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content, empty if omitted")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Groceries",
                "content": "eggs, milk, coffee",
            }
        }
    )


class NoteUpdate(BaseModel):
    """Note update request schema. Omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, max_length=200, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": "eggs, milk, coffee, bread",
            }
        }
    )


class NoteResponse(BaseModel):
    """Note response schema."""

    id: int = Field(description="Note identifier")
    user_id: int = Field(description="Owner identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last modification timestamp")

    @field_validator("created_at", "updated_at")
    @classmethod
    def timestamps_utc(cls, v: datetime) -> datetime:
        return _assume_utc(v)

    model_config = ConfigDict(from_attributes=True)
