"""Ad Copy Assistant - Storage Module.

The storage layer is organized as follows:
- database.py: Connection settings and the canonical schema
- models.py: Dataclass definitions for each table row
- repositories/: Repository classes for each entity type

Example:
    >>> from storage import CampaignRepository, init_database
    >>>
    >>> await init_database(db_path)
    >>> campaigns = CampaignRepository(db_path)
    >>> await campaigns.list_for_user("user-1")
"""

from .database import DB_PATH, get_connection, init_database
from .sqlite_store import SQLiteStore
from .models import AdCopy, Campaign, PerformanceRecord
from .repositories import (
    AdCopyRepository,
    BaseRepository,
    CampaignRepository,
    PerformanceRepository,
)

__all__ = [
    # Storage backend
    "SQLiteStore",
    # Database
    "DB_PATH",
    "get_connection",
    "init_database",
    # Models
    "Campaign",
    "AdCopy",
    "PerformanceRecord",
    # Repositories
    "BaseRepository",
    "CampaignRepository",
    "AdCopyRepository",
    "PerformanceRepository",
]
