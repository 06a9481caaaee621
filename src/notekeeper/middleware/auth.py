"""Authentication middleware."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import Settings, get_settings
from ..core.exceptions import InvalidToken
from ..security import Claims, decode_access_token

MISSING_AUTH_MESSAGE = "Missing or malformed Authorization header"


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Missing headers, other schemes and bad tokens all answer 401.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> str:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials or credentials.scheme.lower() != "bearer" or not credentials.credentials:
            raise InvalidToken(MISSING_AUTH_MESSAGE)
        return credentials.credentials


bearer_scheme = JWTBearer()


async def get_current_user(
    token: str = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Claims:
    """Claims of the authenticated caller."""
    return decode_access_token(token, settings=settings)


async def get_current_user_id(claims: Claims = Depends(get_current_user)) -> int:
    """Get current authenticated user ID."""
    return claims.id
