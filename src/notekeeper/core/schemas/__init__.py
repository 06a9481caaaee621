"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import LoginRequest, LoginResponse, SignupRequest, UserPublic
from .common import ErrorResponse, HealthCheckResponse, StatusResponse
from .notes import NoteCreate, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "SignupRequest",
    "LoginRequest",
    "LoginResponse",
    "UserPublic",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    # Common schemas
    "ErrorResponse",
    "HealthCheckResponse",
    "StatusResponse",
]
