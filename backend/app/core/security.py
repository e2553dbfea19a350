"""JWT helpers shared by the auth dependency and the token script."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from ..config import settings

logger = logging.getLogger(__name__)


def create_access_token(user_id: int, expires_delta: timedelta | None = None, **extra_claims: Any) -> str:
    """
    Create a signed access token carrying the ``user_id`` claim.

    Args:
        user_id: Id of the user the token identifies
        expires_delta: Token lifetime, defaults to ``access_token_expire_minutes``
        **extra_claims: Additional claims to embed

    Returns:
        Encoded JWT
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode: dict[str, Any] = dict(extra_claims)
    to_encode.update({"user_id": user_id, "exp": datetime.utcnow() + expires_delta})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """
    Verify signature and expiry of a token.

    Returns:
        The claims, or None when the token does not verify
    """
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        logger.warning(f"Rejected JWT: {e}")
        return None


def extract_user_id(claims: dict[str, Any]) -> int | None:
    """Return the numeric ``user_id`` claim, or None when absent or not a number."""
    value = claims.get("user_id")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value != int(value) or value <= 0:
        return None
    return int(value)
