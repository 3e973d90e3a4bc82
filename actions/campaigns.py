"""Campaign actions: create, update and list."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from .identity import ActionContext, require_user
from .inputs import (
    CreateCampaignInput,
    ListCampaignsInput,
    UpdateCampaignInput,
    parse_input,
)
from .ownership import get_owned_campaign, not_found
from .results import action_result, list_result
from .sparse_update import build_update

logger = logging.getLogger(__name__)


async def create_campaign(payload: Any, context: ActionContext) -> dict:
    user = require_user(context)
    data = parse_input(CreateCampaignInput, payload)
    now = datetime.now(timezone.utc)

    campaign = await context.store.campaigns.insert({
        "id": str(uuid.uuid4()),
        "user_id": user.id,
        "name": data.name,
        "objective": data.objective,
        "product_name": data.product_name,
        "target_audience": data.target_audience,
        "notes": data.notes,
        "created_at": now,
        "updated_at": now,
    })

    logger.info(f"Created campaign {campaign.id} for user {user.id}")
    return action_result(campaign=campaign)


async def update_campaign(payload: Any, context: ActionContext) -> dict:
    """Apply a sparse update to a campaign the caller owns."""
    user = require_user(context)
    data = parse_input(UpdateCampaignInput, payload)
    await get_owned_campaign(context.store, data.id, user.id)

    values = build_update(data, datetime.now(timezone.utc), exclude=data.key_fields)
    campaign = await context.store.campaigns.update_owned(data.id, user.id, values)
    if campaign is None:
        raise not_found("Campaign")

    logger.info(f"Updated campaign {campaign.id}: {', '.join(sorted(values))}")
    return action_result(campaign=campaign)


async def list_campaigns(payload: Any, context: ActionContext) -> dict:
    user = require_user(context)
    parse_input(ListCampaignsInput, payload)

    campaigns = await context.store.campaigns.list_for_user(user.id)
    return list_result(campaigns)
