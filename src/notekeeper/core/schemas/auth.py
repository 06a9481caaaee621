"""
Authentication schemas.

These schemas define the API contracts for signup, login and the public
view of a user account.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _assume_utc(value: datetime) -> datetime:
    # SQLite returns naive datetimes; everything is stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CredentialsRequest(BaseModel):
    """Username/password pair shared by signup and login."""

    username: str = Field(description="Username")
    password: str = Field(description="User password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "correct horse battery staple",
            }
        }
    )


class SignupRequest(CredentialsRequest):
    """User signup request schema."""

    username: str = Field(max_length=50, description="Username")
    password: str = Field(max_length=256, description="User password")


class LoginRequest(CredentialsRequest):
    """User login request schema.

    No length limits: over-long input is just an unknown user and gets the
    same 401 as any other failed login.
    """


class UserPublic(BaseModel):
    """User record without the password hash."""

    id: int = Field(description="User identifier")
    username: str = Field(description="Username")
    created_at: datetime = Field(description="Account creation timestamp")

    @field_validator("created_at")
    @classmethod
    def created_at_utc(cls, v: datetime) -> datetime:
        return _assume_utc(v)

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "username": "alice",
                "created_at": "2025-09-13T10:30:00Z",
            }
        },
    )


class LoginResponse(BaseModel):
    """Signed bearer token plus the authenticated user."""

    token: str = Field(description="JWT bearer token, valid for 7 days")
    user: UserPublic = Field(description="User information")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "user": {"id": 1, "username": "alice", "created_at": "2025-09-13T10:30:00Z"},
            }
        }
    )
