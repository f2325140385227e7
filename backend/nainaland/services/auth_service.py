"""
Nainaland Backend — Authentication Service
============================================

What:  Verifies admin credentials, issues bearer tokens, and resolves a
       presented token back to a stored user.
Who:   POST /api/auth/login and the `require_admin` dependency.

Failure reporting:
    Unknown username and wrong password produce the same
    "Invalid credentials" message, so the endpoint does not reveal which
    usernames exist.
"""

import logging
from typing import Optional

from nainaland.exceptions import AuthenticationError
from nainaland.schemas.user import LoginResponse, User, UserPublic
from nainaland.security import create_access_token, decode_access_token, verify_password
from nainaland.storage import MemStorage

logger = logging.getLogger(__name__)


class AuthService:
    """Login and token resolution for the admin back office."""

    def login(self, storage: MemStorage, username: str, password: str) -> LoginResponse:
        """
        Check username/password and return a fresh token.

        Raises:
            AuthenticationError: Unknown user or wrong password (→ 401)
        """
        user = storage.get_user_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt for username '%s'", username)
            raise AuthenticationError(message="Invalid credentials")

        token = create_access_token(user.id)
        logger.info("User %s logged in", user.id)
        return LoginResponse(token=token, user=UserPublic(id=user.id, username=user.username))

    def authenticate(self, storage: MemStorage, token: Optional[str]) -> User:
        """
        Resolve a bearer token to the user it was issued for.

        A token is accepted only if its signature and expiry verify and its
        subject still exists in this store.

        Raises:
            AuthenticationError: Missing, invalid, or expired token (→ 401)
        """
        if not token:
            raise AuthenticationError(message="Unauthorized: No token provided")

        claims = decode_access_token(token)
        if claims is None:
            raise AuthenticationError(message="Unauthorized: Invalid token")

        try:
            user_id = int(claims.get("sub", ""))
        except (TypeError, ValueError):
            raise AuthenticationError(message="Unauthorized: Invalid token")

        user = storage.get_user(user_id)
        if user is None:
            raise AuthenticationError(
                message="Unauthorized: Invalid token",
                context={"user_id": user_id},
            )
        return user


auth_service = AuthService()
