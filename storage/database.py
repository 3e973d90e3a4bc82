"""
Database access module for the Ad Copy Assistant.

This module owns the SQLite connection settings and the canonical schema.
Repositories open a fresh connection per statement through
``get_connection()``, which keeps FastAPI's async handlers free of shared
connection state.

Usage:
    from storage.database import init_database, get_connection

    await init_database(db_path)

    with get_connection(db_path) as conn:
        rows = conn.execute("SELECT * FROM ad_campaigns").fetchall()
"""

import asyncio
import logging
import sqlite3
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

# Default location - use ~/.adcopy for user data
DB_PATH = Path.home() / ".adcopy" / "adcopy.db"


def get_connection(db_path: Union[str, Path] = DB_PATH) -> sqlite3.Connection:
    """Create a new connection for the current context.

    Each call creates a fresh connection. SQLite connections are cheap and
    this avoids sharing a connection across executor threads.
    """
    path = Path(db_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path), timeout=30.0)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")  # Better concurrent reads
    conn.execute("PRAGMA foreign_keys=ON")   # Enforce FK constraints
    return conn


async def init_database(db_path: Union[str, Path] = DB_PATH, reset: bool = False) -> None:
    """Initialize database with schema if needed.

    Called on application startup and by ``scripts/init_database.py``.

    Args:
        db_path: Path to the SQLite database file.
        reset: Drop the application tables before recreating them.
    """
    loop = asyncio.get_running_loop()

    def _init():
        conn = get_connection(db_path)
        try:
            if reset:
                logger.warning(f"Dropping application tables in {db_path}")
                conn.executescript(DROP_SQL)

            tables = conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table'"
            ).fetchall()

            if not tables:
                logger.info("Initializing database schema...")
            conn.executescript(SCHEMA_SQL)
            conn.commit()
            logger.info(f"Database ready at {db_path}")
        finally:
            conn.close()

    await loop.run_in_executor(None, _init)


DROP_SQL = """
DROP TABLE IF EXISTS ad_performance;
DROP TABLE IF EXISTS ad_copies;
DROP TABLE IF EXISTS ad_campaigns;
"""

# The canonical schema
SCHEMA_SQL = """
-- ============================================================
-- Ad Copy Assistant schema
-- ============================================================

-- AD CAMPAIGNS
-- Grouping of ad copies per product or objective, owned by one user
CREATE TABLE IF NOT EXISTS ad_campaigns (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    objective TEXT,          -- "traffic", "leads", "sales"
    product_name TEXT,
    target_audience TEXT,
    notes TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_ad_campaigns_user ON ad_campaigns(user_id);

-- AD COPIES
-- user_id is copied from the campaign at creation time
CREATE TABLE IF NOT EXISTS ad_copies (
    id TEXT PRIMARY KEY,
    campaign_id TEXT NOT NULL REFERENCES ad_campaigns(id),
    user_id TEXT NOT NULL,
    platform TEXT,           -- "google", "facebook", "linkedin", ...
    headline TEXT,
    primary_text TEXT NOT NULL,
    description TEXT,
    call_to_action TEXT,
    tone TEXT,
    variant_label TEXT,      -- "A", "B", "C"
    url TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_ad_copies_campaign ON ad_copies(campaign_id, user_id);
CREATE INDEX IF NOT EXISTS idx_ad_copies_user ON ad_copies(user_id);

-- AD PERFORMANCE
-- Append-only log entries per ad copy
CREATE TABLE IF NOT EXISTS ad_performance (
    id TEXT PRIMARY KEY,
    ad_copy_id TEXT NOT NULL REFERENCES ad_copies(id),
    date TEXT,
    impressions NUMERIC,
    clicks NUMERIC,
    conversions NUMERIC,
    spend NUMERIC,
    currency TEXT,
    notes TEXT
);

CREATE INDEX IF NOT EXISTS idx_ad_performance_copy ON ad_performance(ad_copy_id);
"""
