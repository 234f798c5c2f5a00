"""
Credential store: user lookups and inserts.

Email uniqueness is enforced by the ``users.email`` unique constraint; an
insert that violates it is reported as ``ConflictError`` so concurrent
duplicate registrations end the same way as the pre-check.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User
from utils.errors import ConflictError, InfrastructureError

EMAIL_IN_USE_MESSAGE = "Email already in use"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def public_user(user: User) -> Dict[str, Any]:
    """The view of a user that may leave the server (never the hash)."""
    return {"id": str(user.user_id), "email": user.email, "pseudo": user.pseudo}


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    e = normalize_email(email)
    if not e:
        return None
    try:
        result = await session.execute(select(User).where(User.email == e))
    except SQLAlchemyError as exc:
        raise InfrastructureError(str(exc)) from exc
    return result.scalar_one_or_none()


async def get_user_by_id(session: AsyncSession, user_id: str) -> Optional[User]:
    try:
        uid = uuid.UUID(str(user_id))
    except ValueError:
        return None
    try:
        return await session.get(User, uid)
    except SQLAlchemyError as exc:
        raise InfrastructureError(str(exc)) from exc


async def insert_user(
    session: AsyncSession,
    *,
    email: str,
    password_hash: str,
    pseudo: str,
) -> User:
    """Persist a new user; *password_hash* must already be hashed."""
    user = User(
        user_id=uuid.uuid4(),
        email=normalize_email(email),
        pseudo=pseudo.strip(),
        password_hash=password_hash,
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError as exc:
        raise ConflictError(EMAIL_IN_USE_MESSAGE) from exc
    except SQLAlchemyError as exc:
        raise InfrastructureError(str(exc)) from exc
    return user
