"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status

from ..config import Settings, get_settings
from ..core.schemas.auth import LoginRequest, LoginResponse, SignupRequest, UserPublic
from ..core.services import AuthService
from ..database import Database, get_database

router = APIRouter(tags=["authentication"])


@router.post("/signup", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
):
    """Register a new user."""
    auth_service = AuthService(database, settings)
    return await auth_service.register(request.username, request.password)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
):
    """Login user and get a JWT."""
    auth_service = AuthService(database, settings)
    return await auth_service.authenticate(request.username, request.password)
