"""Error taxonomy for actions.

Every failure an action reports on purpose is an ``ActionError`` carrying
one of the codes below. Store failures are not wrapped and propagate as-is.
"""

from enum import Enum

from pydantic import ValidationError


class ActionErrorCode(str, Enum):
    """Error codes surfaced to callers, with their HTTP status."""

    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ActionErrorCode.BAD_REQUEST: 400,
    ActionErrorCode.UNAUTHORIZED: 401,
    ActionErrorCode.NOT_FOUND: 404,
    ActionErrorCode.INTERNAL_SERVER_ERROR: 500,
}


class ActionError(Exception):
    """Raised when an action refuses a request."""

    def __init__(self, code: ActionErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code.value, "message": self.message}

    def __repr__(self) -> str:
        return f"ActionError({self.code.value}, {self.message!r})"


def validation_error(exc: ValidationError) -> ActionError:
    """Convert a pydantic ValidationError into a BAD_REQUEST ActionError.

    The message names the offending field (camelCase, as sent) followed by
    pydantic's description of the first error.
    """
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "__root__")
    message = first.get("msg", "Invalid input")
    # model-level validators report "Value error, <msg>"
    message = message.removeprefix("Value error, ")
    if location:
        message = f"{location}: {message}"
    return ActionError(ActionErrorCode.BAD_REQUEST, message)
