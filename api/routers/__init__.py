"""API Routers for the Ad Copy Assistant."""

from .actions import router as actions_router
from .system import router as system_router

__all__ = [
    "actions_router",
    "system_router",
]
