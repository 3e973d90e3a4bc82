"""Ad copy repository for the ad_copies table."""

from __future__ import annotations

from typing import Any, Optional

from .base import BaseRepository
from ..models import AdCopy


class AdCopyRepository(BaseRepository[AdCopy]):
    """Repository for ad copy database operations.

    Ad copies are scoped by both their campaign and their denormalized
    owner column.
    """

    table = "ad_copies"
    model = AdCopy

    async def get_owned(
        self,
        ad_copy_id: str,
        user_id: str,
        campaign_id: Optional[str] = None,
    ) -> Optional[AdCopy]:
        """Get an owned ad copy, optionally restricted to one campaign."""
        if campaign_id is None:
            return await self.find_one(id=ad_copy_id, user_id=user_id)
        return await self.find_one(id=ad_copy_id, user_id=user_id, campaign_id=campaign_id)

    async def list_for_campaign(self, campaign_id: str, user_id: str) -> list[AdCopy]:
        return await self.find_all(campaign_id=campaign_id, user_id=user_id)

    async def update_owned(
        self,
        ad_copy_id: str,
        campaign_id: str,
        user_id: str,
        values: dict[str, Any],
    ) -> Optional[AdCopy]:
        """Apply ``values`` to an ad copy matched by id, campaign and owner."""
        return await self.update_where(
            values, id=ad_copy_id, campaign_id=campaign_id, user_id=user_id
        )

    async def delete_owned(self, ad_copy_id: str, campaign_id: str, user_id: str) -> int:
        """Delete an ad copy matched by id, campaign and owner.

        Returns:
            Number of rows deleted (0 or 1).
        """
        return await self.delete_where(
            id=ad_copy_id, campaign_id=campaign_id, user_id=user_id
        )
