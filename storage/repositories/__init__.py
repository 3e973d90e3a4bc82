"""Repository classes for Ad Copy Assistant storage.

This package provides repository classes that encapsulate database operations
for specific entity types.
"""

from .base import BaseRepository
from .campaign_repository import CampaignRepository
from .ad_copy_repository import AdCopyRepository
from .performance_repository import PerformanceRepository

__all__ = [
    "BaseRepository",
    "CampaignRepository",
    "AdCopyRepository",
    "PerformanceRepository",
]
