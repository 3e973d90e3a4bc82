"""Campaign repository for the ad_campaigns table.

Every read and write takes the owner as a predicate so a row belonging to
another user is never returned or modified.
"""

from __future__ import annotations

from typing import Any, Optional

from .base import BaseRepository
from ..models import Campaign


class CampaignRepository(BaseRepository[Campaign]):
    """Repository for ad campaign database operations."""

    table = "ad_campaigns"
    model = Campaign

    async def get_owned(self, campaign_id: str, user_id: str) -> Optional[Campaign]:
        """Get a campaign by ID, only if ``user_id`` owns it."""
        return await self.find_one(id=campaign_id, user_id=user_id)

    async def list_for_user(self, user_id: str) -> list[Campaign]:
        """List all campaigns owned by ``user_id``."""
        return await self.find_all(user_id=user_id)

    async def update_owned(
        self,
        campaign_id: str,
        user_id: str,
        values: dict[str, Any],
    ) -> Optional[Campaign]:
        """Apply ``values`` to an owned campaign.

        Returns:
            The updated Campaign, or None if no owned row matched.
        """
        return await self.update_where(values, id=campaign_id, user_id=user_id)
