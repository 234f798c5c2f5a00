"""
Error taxonomy shared by services and routes.

Each error carries the HTTP status it maps to; the handlers registered in
``api.middleware`` turn them into ``{"message": ...}`` responses.
"""

from __future__ import annotations

from fastapi import status


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Missing or invalid input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ApiError):
    """A unique value (email, Pokédex id) is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(ApiError):
    """Bad credentials, or a missing / invalid / expired token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class InfrastructureError(ApiError):
    """Store or data-integrity failure; the message is surfaced as-is."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
