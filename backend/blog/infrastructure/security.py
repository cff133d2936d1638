"""Credentials — bcrypt password hashing and JWT access tokens.

Invariants:
    - Passwords are only ever stored as bcrypt hashes
    - Token subject ("sub") is the user id as a string
    - decode_access_token never raises on bad input; it returns None
"""

import logging
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from blog.config import get_settings
from blog.core.domain_types import UserId

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a password with bcrypt at the configured cost factor."""
    if rounds is None:
        rounds = get_settings().password_bcrypt_rounds
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8"),
        )
    except ValueError as e:
        logger.warning(f"Password verification failed: {e}")
        return False


def create_access_token(
    user_id: UserId, expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT for user_id."""
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(
        payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str) -> UserId | None:
    """Return the user id carried by a valid token, or None."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm],
        )
    except JWTError as e:
        logger.warning(f"Token decode failed: {e}")
        return None
    try:
        return UserId(int(payload.get("sub")))
    except (TypeError, ValueError):
        logger.warning("Token subject is not a user id")
        return None
