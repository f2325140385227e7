"""
Nainaland Backend — Password Hashing and Bearer Tokens
========================================================

What:  bcrypt password hashing and HS256 JWT issuance/verification.
Who:   AuthService (login, admin seeding) and the `require_admin` dependency.

Token claims:
    sub  User id as a string (JWT requires a string subject)
    iat  Issue time (UNIX seconds)
    exp  Expiry (UNIX seconds); python-jose rejects expired tokens on decode
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt

from nainaland.config import settings

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a plain password with a fresh bcrypt salt."""
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Constant-time check of a plain password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash (e.g. a record created with a plain-text password)
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a signed, time-limited token for the given user id."""
    now = datetime.now(timezone.utc)
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + lifetime).timestamp()),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Verify signature and expiry and return the claims, or None.

    Any failure (bad signature, expired, malformed, wrong algorithm) is
    reported the same way so callers answer every one of them with 401.
    """
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.debug("Rejected bearer token: %s", str(e))
        return None
