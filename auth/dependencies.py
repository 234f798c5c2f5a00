"""
FastAPI dependencies for authentication.

Provides ``db_session`` and ``get_current_user`` dependencies that
are used across all protected routes.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import TokenClaims, verify_token
from database.session import get_db_session
from utils.errors import AuthenticationError

NO_TOKEN_MESSAGE = (
    "Access denied. No token supplied. "
    "Send the header: Authorization: Bearer <your_token>"
)


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


async def get_current_user(
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> TokenClaims:
    """
    Extract and verify the Bearer token from the Authorization header,
    returning the decoded claims for this request.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthenticationError(NO_TOKEN_MESSAGE)
    return verify_token(authorization[len("Bearer "):])
