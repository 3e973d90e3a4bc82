"""Ownership guards.

A guard fetches a row by id with the owner predicate applied in SQL and
raises NOT_FOUND when nothing matches. A row that does not exist and a row
owned by someone else produce the same error.
"""

import logging
from typing import Optional, TypeVar

from storage import AdCopy, Campaign, SQLiteStore

from .errors import ActionError, ActionErrorCode

logger = logging.getLogger(__name__)

T = TypeVar("T")


def not_found(label: str) -> ActionError:
    return ActionError(ActionErrorCode.NOT_FOUND, f"{label} not found.")


def require_owned(row: Optional[T], label: str, resource_id: str, owner_id: str) -> T:
    """Return ``row`` or raise NOT_FOUND when the owned lookup came back empty.

    Args:
        row: Result of an owner-scoped repository lookup.
        label: Human-readable resource name used in the error message.
        resource_id: Requested id, for logging.
        owner_id: Requesting user, for logging.

    Raises:
        ActionError: NOT_FOUND if ``row`` is None.
    """
    if row is None:
        logger.debug(f"{label} {resource_id} not found for user {owner_id}")
        raise not_found(label)
    return row


async def get_owned_campaign(store: SQLiteStore, campaign_id: str, user_id: str) -> Campaign:
    campaign = await store.campaigns.get_owned(campaign_id, user_id)
    return require_owned(campaign, "Campaign", campaign_id, user_id)


async def get_owned_ad_copy(
    store: SQLiteStore,
    ad_copy_id: str,
    user_id: str,
    campaign_id: Optional[str] = None,
) -> AdCopy:
    """Fetch an owned ad copy and verify its campaign is owned too.

    Walks the chain from the ad copy to its campaign. When ``campaign_id``
    is given the ad copy must also belong to that campaign.
    """
    ad_copy = await store.ad_copies.get_owned(ad_copy_id, user_id, campaign_id=campaign_id)
    ad_copy = require_owned(ad_copy, "Ad copy", ad_copy_id, user_id)
    await get_owned_campaign(store, ad_copy.campaign_id, user_id)
    return ad_copy
