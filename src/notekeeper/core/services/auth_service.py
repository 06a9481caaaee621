"""Authentication service implementation."""

from typing import Optional

from starlette.concurrency import run_in_threadpool

from ...config import Settings, get_settings
from ...database import Database
from ...security import (
    Claims,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_dummy_password,
    verify_password,
)
from ..exceptions import InvalidCredentials, InvalidInput
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginResponse, UserPublic
from .interfaces import IAuthService

logger = get_logger("services.auth")

USERNAME_MAX_LENGTH = 50


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, database: Database, settings: Optional[Settings] = None):
        self.database = database
        self.user_repo = UserRepository(database)
        self.settings = settings or get_settings()

    async def register(self, username: str, password: str) -> UserPublic:
        """Register new user.

        Uniqueness is left to the store: a concurrent duplicate signup loses
        on insert and surfaces as DuplicateUsername.
        """
        if not username or not password:
            raise InvalidInput("Username and password are required")
        if len(username) > USERNAME_MAX_LENGTH:
            raise InvalidInput(f"Username must be at most {USERNAME_MAX_LENGTH} characters")

        # bcrypt is CPU bound, keep it off the event loop
        password_hash = await run_in_threadpool(hash_password, password)
        user = await self.user_repo.create_user(username, password_hash)

        logger.info("Registered user", extra={"user_id": user["id"]})
        return UserPublic.model_validate(user)

    async def authenticate(self, username: str, password: str) -> LoginResponse:
        """Login user and return a signed token."""
        if not username or not password:
            raise InvalidInput("Username and password are required")

        record = await self.user_repo.get_credentials(username)
        if record is None:
            # unknown user: same work, same error as a bad password
            await run_in_threadpool(verify_dummy_password, password)
            matched = False
        else:
            matched = await run_in_threadpool(verify_password, password, record["password_hash"])

        if not matched:
            logger.info("Rejected login attempt")
            raise InvalidCredentials()

        claims = Claims(id=record["id"], username=record["username"])
        token = create_access_token(claims, settings=self.settings)
        user = await self.user_repo.get_by_id(record["id"])

        return LoginResponse(token=token, user=UserPublic.model_validate(user))

    def verify(self, token: str) -> Claims:
        """Validate a bearer token and return its claims."""
        return decode_access_token(token, settings=self.settings)
