"""JWT token utilities."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from ..config import Settings, get_settings
from ..core.exceptions import InvalidToken


@dataclass(frozen=True)
class Claims:
    """Decoded token payload."""

    id: int
    username: str


def create_access_token(
    claims: Claims,
    expires_delta: Optional[timedelta] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Sign ``{id, username}`` with an expiry (default from settings)."""
    settings = settings or get_settings()
    if expires_delta is None:
        expires_delta = timedelta(days=settings.access_token_expire_days)

    now = datetime.now(timezone.utc)
    to_encode: Dict[str, Any] = {
        "id": claims.id,
        "username": claims.username,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> Claims:
    """Validate signature and expiry, returning the embedded claims."""
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise InvalidToken() from exc

    user_id = payload.get("id")
    username = payload.get("username")
    if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(username, str):
        raise InvalidToken()
    return Claims(id=user_id, username=username)
