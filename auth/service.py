"""
Auth service: registration, login and profile lookup.

Routes stay thin: they parse the request, call one of these functions and
shape the response. Errors are raised from ``utils.errors`` and turned
into responses by the app-level handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from auth import store
from auth.jwt import TokenClaims, create_token
from auth.password import MAX_PASSWORD_BYTES, hash_password, password_too_long, verify_password
from database.models import User
from utils.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
BAD_CREDENTIALS_MESSAGE = "Email or password incorrect"


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


async def register(
    session: AsyncSession,
    email: Optional[str],
    password: Optional[str],
    pseudo: Optional[str],
) -> Tuple[User, str]:
    """Create a user and return it with a fresh token."""
    if _blank(email) or not password or _blank(pseudo):
        raise ValidationError("All fields are required (email, password, pseudo)")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    if password_too_long(password):
        raise ValidationError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
        )

    if await store.get_user_by_email(session, email) is not None:
        raise ConflictError(store.EMAIL_IN_USE_MESSAGE)

    user = await store.insert_user(
        session,
        email=email,
        password_hash=hash_password(password),
        pseudo=pseudo,
    )
    token = create_token(str(user.user_id), user.email)
    logger.info("Registered user %s (%s)", user.pseudo, user.user_id)
    return user, token


async def login(
    session: AsyncSession,
    email: Optional[str],
    password: Optional[str],
) -> Tuple[User, str]:
    """Check credentials and return the user with a fresh token."""
    if _blank(email) or not password:
        raise ValidationError("Email and password are required")

    user = await store.get_user_by_email(session, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Failed login for %s", store.normalize_email(email))
        raise AuthenticationError(BAD_CREDENTIALS_MESSAGE)

    token = create_token(str(user.user_id), user.email)
    logger.info("Login: %s (%s)", user.pseudo, user.user_id)
    return user, token


async def get_self(session: AsyncSession, claims: TokenClaims) -> User:
    user = await store.get_user_by_id(session, claims.id)
    if user is None:
        raise NotFoundError("User not found")
    return user
