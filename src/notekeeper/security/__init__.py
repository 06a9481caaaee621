"""Security utilities."""

from .jwt import Claims, create_access_token, decode_access_token
from .password import hash_password, verify_dummy_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "verify_dummy_password",
    "Claims",
    "create_access_token",
    "decode_access_token",
]
