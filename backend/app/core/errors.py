"""HTTP error types raised by dependencies and services.

Each subclass fixes its status code so call sites only pass a message. The
application-level handlers in ``app.main`` render every one of them as
``{"message": ...}``.
"""

from __future__ import annotations

from fastapi import HTTPException, status

AUTH_HEADER_MISSING = "Authorization header missing or invalid"
INVALID_TOKEN = "Invalid JWT token"
INVALID_PAYLOAD = "Invalid request payload"


class BadRequestError(HTTPException):
    """400 - missing auth header or a payload that failed validation."""

    def __init__(self, detail: str = INVALID_PAYLOAD) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedError(HTTPException):
    """401 - token signature, expiry or claims did not verify."""

    def __init__(self, detail: str = INVALID_TOKEN) -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class NotFoundError(HTTPException):
    """404 - trainer, trainee, request or program does not exist."""

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
