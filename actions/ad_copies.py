"""Ad copy actions.

Every ad copy action first verifies the caller owns the campaign named in
the input; updates and deletes are then filtered by id, campaign and owner
in a single statement.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from .identity import ActionContext, require_user
from .inputs import (
    AdCopyKeyInput,
    CreateAdCopyInput,
    ListAdCopiesInput,
    UpdateAdCopyInput,
    parse_input,
)
from .ownership import get_owned_ad_copy, get_owned_campaign, not_found
from .results import action_result, list_result, ok
from .sparse_update import build_update

logger = logging.getLogger(__name__)


async def create_ad_copy(payload: Any, context: ActionContext) -> dict:
    user = require_user(context)
    data = parse_input(CreateAdCopyInput, payload)
    campaign = await get_owned_campaign(context.store, data.campaign_id, user.id)
    now = datetime.now(timezone.utc)

    ad_copy = await context.store.ad_copies.insert({
        "id": str(uuid.uuid4()),
        "campaign_id": campaign.id,
        "user_id": user.id,
        "platform": data.platform,
        "headline": data.headline,
        "primary_text": data.primary_text,
        "description": data.description,
        "call_to_action": data.call_to_action,
        "tone": data.tone,
        "variant_label": data.variant_label,
        "url": data.url,
        "created_at": now,
        "updated_at": now,
    })

    logger.info(f"Created ad copy {ad_copy.id} in campaign {campaign.id}")
    return action_result(adCopy=ad_copy)


async def update_ad_copy(payload: Any, context: ActionContext) -> dict:
    user = require_user(context)
    data = parse_input(UpdateAdCopyInput, payload)
    await get_owned_ad_copy(context.store, data.id, user.id, campaign_id=data.campaign_id)

    values = build_update(data, datetime.now(timezone.utc), exclude=data.key_fields)
    ad_copy = await context.store.ad_copies.update_owned(
        data.id, data.campaign_id, user.id, values
    )
    if ad_copy is None:
        raise not_found("Ad copy")

    logger.info(f"Updated ad copy {ad_copy.id}: {', '.join(sorted(values))}")
    return action_result(adCopy=ad_copy)


async def delete_ad_copy(payload: Any, context: ActionContext) -> dict:
    user = require_user(context)
    data = parse_input(AdCopyKeyInput, payload)
    await get_owned_campaign(context.store, data.campaign_id, user.id)

    deleted = await context.store.ad_copies.delete_owned(data.id, data.campaign_id, user.id)
    if deleted == 0:
        raise not_found("Ad copy")

    logger.info(f"Deleted ad copy {data.id} from campaign {data.campaign_id}")
    return ok()


async def list_ad_copies(payload: Any, context: ActionContext) -> dict:
    user = require_user(context)
    data = parse_input(ListAdCopiesInput, payload)
    await get_owned_campaign(context.store, data.campaign_id, user.id)

    copies = await context.store.ad_copies.list_for_campaign(data.campaign_id, user.id)
    return list_result(copies)
