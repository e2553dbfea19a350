"""Dependencies for authentication and trainer resolution."""

from __future__ import annotations

import logging
from typing import Any, Callable, Coroutine, Iterator

from fastapi import Depends, Header, Request
from fastapi.routing import APIRoute
from sqlalchemy.orm import Session
from starlette.responses import Response

from ..database import SessionLocal
from ..models import Trainer
from ..services import trainer as trainer_service
from .errors import AUTH_HEADER_MISSING, BadRequestError, UnauthorizedError
from .security import decode_access_token, extract_user_id

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def get_db() -> Iterator[Session]:
    """
    Dependency to get database session.

    Yields:
        Database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _strip_scheme(header_value: str) -> str:
    # Clients send either the raw token or "Bearer <token>"
    if header_value[:len(BEARER_PREFIX)].lower() == BEARER_PREFIX:
        return header_value[len(BEARER_PREFIX):].strip()
    return header_value.strip()


def authenticate(authorization: str | None) -> int:
    """
    Verify an ``Authorization`` header value and return its ``user_id`` claim.

    Raises:
        BadRequestError: If the header is missing or empty
        UnauthorizedError: If the token does not verify or lacks ``user_id``
    """
    token = _strip_scheme(authorization) if authorization else ""
    if not token:
        raise BadRequestError(AUTH_HEADER_MISSING)

    claims = decode_access_token(token)
    if claims is None:
        raise UnauthorizedError()

    user_id = extract_user_id(claims)
    if user_id is None:
        logger.warning("JWT verified but carries no usable user_id claim")
        raise UnauthorizedError()

    return user_id


class AuthenticatedRoute(APIRoute):
    """
    Route that verifies the token before FastAPI reads the request body.

    Without it a malformed JSON body would be reported as a payload error
    even when the token is missing or invalid.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def authenticated_route_handler(request: Request) -> Response:
            authenticate(request.headers.get("Authorization"))
            return await original_route_handler(request)

        return authenticated_route_handler


async def get_current_user_id(
    authorization: str | None = Header(default=None),
) -> int:
    """
    Dependency returning the ``user_id`` claim of the request's JWT.

    Args:
        authorization: Raw ``Authorization`` header

    Returns:
        Authenticated user id
    """
    return authenticate(authorization)


def get_current_trainer(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Trainer:
    """
    Dependency resolving the trainer record of the authenticated user.

    Raises:
        NotFoundError: If the user has no trainer profile
    """
    return trainer_service.get_trainer_by_user_id(db, user_id)
