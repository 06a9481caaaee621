"""Password hashing utilities."""

from passlib.context import CryptContext

from ..config import get_settings

# bcrypt_sha256 avoids bcrypt's 72-byte truncation issue on long passwords
# by pre-hashing with SHA-256 before applying bcrypt.
pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__rounds=get_settings().bcrypt_rounds,
)

# Verified against when the username does not exist so both login failures cost the same
_DUMMY_HASH = pwd_context.hash("notekeeper-dummy-password")


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def verify_dummy_password(plain_password: str) -> bool:
    """Burn one verification for an unknown user. Always False."""
    pwd_context.verify(plain_password, _DUMMY_HASH)
    return False
