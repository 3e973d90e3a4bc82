"""SQLite storage backend for ad copy data.

This module provides the SQLiteStore class which acts as a facade over the
per-table repositories, so actions receive one object for the whole store.

Example:
    >>> from storage import SQLiteStore
    >>>
    >>> store = SQLiteStore(db_path="~/.adcopy/adcopy.db")
    >>> await store.initialize()
    >>>
    >>> campaigns = await store.campaigns.list_for_user("user-1")
"""

from __future__ import annotations

import logging
from pathlib import Path

from .database import DB_PATH, init_database
from .repositories import AdCopyRepository, CampaignRepository, PerformanceRepository

logger = logging.getLogger(__name__)


class SQLiteStore:
    """Async SQLite storage for campaigns, ad copies and performance logs.

    Attributes:
        db_path: Path to the SQLite database file.
        campaigns: Repository for the ad_campaigns table.
        ad_copies: Repository for the ad_copies table.
        performance: Repository for the ad_performance table.
    """

    def __init__(self, db_path: str | Path = DB_PATH) -> None:
        """Initialize the SQLite store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path).expanduser()
        self.campaigns = CampaignRepository(self.db_path)
        self.ad_copies = AdCopyRepository(self.db_path)
        self.performance = PerformanceRepository(self.db_path)

    async def initialize(self) -> None:
        """Create the schema if it does not exist yet."""
        await init_database(self.db_path)
        logger.debug(f"SQLiteStore initialized at {self.db_path}")
