"""Performance repository for the append-only ad_performance table.

Ownership is not stored on this table; callers verify the ad copy chain
before reading or writing.
"""

from __future__ import annotations

from .base import BaseRepository
from ..models import PerformanceRecord


class PerformanceRepository(BaseRepository[PerformanceRecord]):
    """Repository for ad performance log entries."""

    table = "ad_performance"
    model = PerformanceRecord

    async def list_for_ad_copy(self, ad_copy_id: str) -> list[PerformanceRecord]:
        return await self.find_all(ad_copy_id=ad_copy_id)
