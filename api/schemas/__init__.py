"""Pydantic schema models for the API."""

from .common import ActionResponse, ErrorDetail, ErrorResponse
from .system import HealthResponse

__all__ = [
    "ActionResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
]
