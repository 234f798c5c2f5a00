"""
JWT-style token creation and verification.

Tokens are base64url-encoded JSON payloads signed with HMAC-SHA256.
Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
Payload: ``{"id", "email", "iat", "exp"}``.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode

from pydantic import BaseModel

from config.settings import config
from utils.errors import AuthenticationError

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


class TokenClaims(BaseModel):
    id: str
    email: str
    iat: int
    exp: int


def _secret() -> bytes:
    if not config.jwt_secret:
        raise RuntimeError("JWT_SECRET is not configured")
    return config.jwt_secret.encode()


def _sign(raw: bytes) -> str:
    return hmac.new(_secret(), raw, hashlib.sha256).hexdigest()


def create_token(user_id: str, email: str) -> str:
    """Create a signed token for ``user_id`` / ``email`` valid for the configured window."""
    now = int(time.time())
    payload = {
        "id": user_id,
        "email": email,
        "iat": now,
        "exp": now + config.jwt_expiry_seconds,
    }
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return urlsafe_b64encode(raw).decode() + "." + _sign(raw)


def verify_token(token: str) -> TokenClaims:
    """
    Verify token and return its claims.

    Raises ``AuthenticationError`` with one generic message whatever the
    cause (bad format, bad signature, bad payload, expired).
    """
    try:
        parts = token.split(".", 1)
        if len(parts) != 2:
            raise ValueError("bad format")
        raw = urlsafe_b64decode(parts[0].encode())
        if not hmac.compare_digest(parts[1], _sign(raw)):
            raise ValueError("bad signature")
        claims = TokenClaims.model_validate_json(raw)
        if claims.exp <= time.time():
            raise ValueError("token expired")
        return claims
    except (ValueError, TypeError) as exc:
        raise AuthenticationError(INVALID_TOKEN_MESSAGE) from exc
