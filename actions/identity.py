"""Request-scoped identity for actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from storage import SQLiteStore

from .errors import ActionError, ActionErrorCode


@dataclass(frozen=True)
class User:
    """Authenticated user as resolved by the request layer."""

    id: str


@dataclass
class ActionContext:
    """Everything an action needs besides its input.

    Attributes:
        store: Storage facade used for all reads and writes.
        user: The signed-in user, or None for anonymous requests.
    """

    store: SQLiteStore
    user: Optional[User] = None


def require_user(context: ActionContext) -> User:
    """Return the signed-in user or raise UNAUTHORIZED."""
    user = context.user
    if user is None or not user.id:
        raise ActionError(
            ActionErrorCode.UNAUTHORIZED,
            "You must be signed in to perform this action.",
        )
    return user
