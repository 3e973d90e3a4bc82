"""Common schema models shared across the API."""

from typing import Any, Optional

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Error code and human-readable message."""
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Body returned for every failed action."""
    success: bool = False
    error: ErrorDetail


class ActionResponse(BaseModel):
    """Body returned for every successful action.

    ``data`` is omitted for actions that return nothing (deleteAdCopy).
    """
    success: bool = True
    data: Optional[dict[str, Any]] = None
