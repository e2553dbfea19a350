from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class Response(BaseModel):
    """Outcome of a create operation."""
    message: str
    success: bool = True
    id: Optional[int] = None


class Message(BaseModel):
    """Error body returned by every non-2xx response."""
    message: str
