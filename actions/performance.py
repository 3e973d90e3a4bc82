"""Performance log actions.

Performance records carry no owner column. Ownership is checked through
the chain ad copy -> campaign on every read and write.
"""

import logging
import uuid
from typing import Any

from .identity import ActionContext, require_user
from .inputs import LogAdPerformanceInput, ListAdPerformanceInput, parse_input
from .ownership import get_owned_ad_copy
from .results import action_result, list_result

logger = logging.getLogger(__name__)


async def log_ad_performance(payload: Any, context: ActionContext) -> dict:
    user = require_user(context)
    data = parse_input(LogAdPerformanceInput, payload)
    ad_copy = await get_owned_ad_copy(context.store, data.ad_copy_id, user.id)

    performance = await context.store.performance.insert({
        "id": str(uuid.uuid4()),
        "ad_copy_id": ad_copy.id,
        "date": data.date,
        "impressions": data.impressions,
        "clicks": data.clicks,
        "conversions": data.conversions,
        "spend": data.spend,
        "currency": data.currency,
        "notes": data.notes,
    })

    logger.info(f"Logged performance {performance.id} for ad copy {ad_copy.id}")
    return action_result(performance=performance)


async def list_ad_performance(payload: Any, context: ActionContext) -> dict:
    user = require_user(context)
    data = parse_input(ListAdPerformanceInput, payload)
    ad_copy = await get_owned_ad_copy(context.store, data.ad_copy_id, user.id)

    records = await context.store.performance.list_for_ad_copy(ad_copy.id)
    return list_result(records)
