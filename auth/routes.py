"""
Auth API routes — register, login, me.

Route prefix: /auth
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from auth import service
from auth.dependencies import db_session, get_current_user
from auth.jwt import TokenClaims
from auth.store import public_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────
# Request fields are optional so that missing values reach the service and
# come back as a 400 with a readable message.


class RegisterRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    pseudo: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserOut(BaseModel):
    id: str
    email: str
    pseudo: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserOut


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Register a new user."""
    user, token = await service.register(session, req.email, req.password, req.pseudo)
    return {
        "message": "Registration successful",
        "token": token,
        "user": public_user(user),
    }


@router.post("/login", response_model=AuthResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Login with email + password."""
    user, token = await service.login(session, req.email, req.password)
    return {
        "message": "Login successful",
        "token": token,
        "user": public_user(user),
    }


@router.get("/me", response_model=UserOut)
async def me(
    claims: TokenClaims = Depends(get_current_user),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Profile of the authenticated user."""
    user = await service.get_self(session, claims)
    return public_user(user)
