"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, get_current_user, get_current_user_id

__all__ = ["get_current_user", "get_current_user_id", "JWTBearer"]
