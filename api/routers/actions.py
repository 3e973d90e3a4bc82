"""Actions router for the Ad Copy Assistant.

Every action is exposed as ``POST /actions/{name}`` with a JSON object body,
e.g. ``POST /actions/createCampaign {"name": "Spring Sale"}``.
"""

import logging
from dataclasses import is_dataclass
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from actions import ActionContext, ActionError, ActionErrorCode, server
from api.dependencies import get_action_context
from api.schemas import ActionResponse, ErrorResponse
from storage.models import RowModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actions", tags=["Actions"])


def serialize(value: Any) -> Any:
    """Convert action results into JSON-ready values.

    Rows become camelCase dicts with unset optional fields omitted.
    """
    if isinstance(value, RowModel) and is_dataclass(value):
        return jsonable_encoder(value.to_dict(exclude_none=True))
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, list):
        return [serialize(item) for item in value]
    return jsonable_encoder(value)


@router.post(
    "/{action_name}",
    response_model=ActionResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def run_action(
    action_name: str,
    payload: Any = Body(None),
    context: ActionContext = Depends(get_action_context),
):
    """Run the named action with the request body as its input.

    The body is handed to the action unvalidated so identity is always
    checked before the input shape.
    """
    handler = server.get(action_name)
    if handler is None:
        raise ActionError(ActionErrorCode.NOT_FOUND, f"Unknown action: {action_name}")

    try:
        result = await handler(payload, context)
        return JSONResponse(content=serialize(result))
    except ActionError:
        raise
    except Exception as e:
        logger.exception(f"Action {action_name} failed: {e}")
        raise ActionError(ActionErrorCode.INTERNAL_SERVER_ERROR, "Internal server error") from e
