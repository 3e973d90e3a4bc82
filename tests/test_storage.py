"""Tests for the storage layer.

Run with: pytest tests/test_storage.py -v
"""

import sqlite3
import tempfile
from datetime import date, datetime, timezone
from pathlib import Path

import pytest
import pytest_asyncio

from storage import AdCopy, Campaign, PerformanceRecord, SQLiteStore, get_connection, init_database


NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def temp_store():
    """Create a temporary SQLite store for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = SQLiteStore(db_path=str(Path(tmpdir) / "test.db"))
        await store.initialize()
        yield store


def _campaign_values(campaign_id="c1", user_id="u1", **extra):
    values = {
        "id": campaign_id,
        "user_id": user_id,
        "name": "Black Friday",
        "created_at": NOW,
        "updated_at": NOW,
    }
    values.update(extra)
    return values


class TestModels:
    """Tests for the row dataclasses."""

    def test_to_dict_is_camel_case(self):
        campaign = Campaign(id="c1", user_id="u1", name="n", product_name="Shoes")
        data = campaign.to_dict()
        assert data["userId"] == "u1"
        assert data["productName"] == "Shoes"
        assert data["targetAudience"] is None

    def test_to_dict_exclude_none(self):
        record = PerformanceRecord(id="p1", ad_copy_id="a1", clicks=0)
        assert record.to_dict(exclude_none=True) == {"id": "p1", "adCopyId": "a1", "clicks": 0}

    def test_columns(self):
        assert AdCopy.columns()[:3] == ("id", "campaign_id", "user_id")
        assert "datetime_columns" not in Campaign.columns()


@pytest.mark.asyncio
class TestSchema:
    async def test_tables_created(self, temp_store):
        conn = get_connection(temp_store.db_path)
        try:
            names = {
                row["name"]
                for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
            }
        finally:
            conn.close()
        assert {"ad_campaigns", "ad_copies", "ad_performance"} <= names

    async def test_reset_drops_rows(self, temp_store):
        await temp_store.campaigns.insert(_campaign_values())
        await init_database(temp_store.db_path, reset=True)
        assert await temp_store.campaigns.find_all() == []

    async def test_foreign_keys_enforced(self, temp_store):
        with pytest.raises(sqlite3.IntegrityError):
            await temp_store.ad_copies.insert({
                "id": "a1",
                "campaign_id": "missing",
                "user_id": "u1",
                "primary_text": "text",
                "created_at": NOW,
                "updated_at": NOW,
            })


@pytest.mark.asyncio
class TestBaseRepository:
    """Tests for the generic single-statement operations."""

    async def test_insert_returns_row(self, temp_store):
        campaign = await temp_store.campaigns.insert(_campaign_values(objective="sales"))
        assert isinstance(campaign, Campaign)
        assert campaign.objective == "sales"
        assert campaign.created_at == NOW
        assert campaign.notes is None

    async def test_find_one_applies_every_predicate(self, temp_store):
        await temp_store.campaigns.insert(_campaign_values())
        assert await temp_store.campaigns.get_owned("c1", "u1") is not None
        assert await temp_store.campaigns.get_owned("c1", "u2") is None
        assert await temp_store.campaigns.get_owned("c2", "u1") is None

    async def test_ad_copy_get_owned_scoped_to_campaign(self, temp_store):
        await temp_store.campaigns.insert(_campaign_values())
        await temp_store.campaigns.insert(_campaign_values(campaign_id="c2"))
        await temp_store.ad_copies.insert({
            "id": "a1", "campaign_id": "c1", "user_id": "u1",
            "primary_text": "t", "created_at": NOW, "updated_at": NOW,
        })
        assert await temp_store.ad_copies.get_owned("a1", "u1") is not None
        assert await temp_store.ad_copies.get_owned("a1", "u1", campaign_id="c1") is not None
        assert await temp_store.ad_copies.get_owned("a1", "u1", campaign_id="c2") is None
        assert await temp_store.ad_copies.get_owned("a1", "u2", campaign_id="c1") is None

    async def test_update_where_returns_updated_row(self, temp_store):
        await temp_store.campaigns.insert(_campaign_values(notes="old"))
        later = datetime(2025, 3, 2, tzinfo=timezone.utc)

        updated = await temp_store.campaigns.update_owned("c1", "u1", {"notes": "new", "updated_at": later})
        assert updated.notes == "new"
        assert updated.name == "Black Friday"
        assert updated.updated_at == later

    async def test_update_where_no_match(self, temp_store):
        await temp_store.campaigns.insert(_campaign_values())
        assert await temp_store.campaigns.update_owned("c1", "intruder", {"name": "x"}) is None
        stored = await temp_store.campaigns.get_owned("c1", "u1")
        assert stored.name == "Black Friday"

    async def test_delete_where_counts_rows(self, temp_store):
        await temp_store.campaigns.insert(_campaign_values())
        await temp_store.ad_copies.insert({
            "id": "a1", "campaign_id": "c1", "user_id": "u1",
            "primary_text": "t", "created_at": NOW, "updated_at": NOW,
        })
        assert await temp_store.ad_copies.delete_owned("a1", "c1", "u2") == 0
        assert await temp_store.ad_copies.delete_owned("a1", "c1", "u1") == 1
        assert await temp_store.ad_copies.delete_owned("a1", "c1", "u1") == 0

    async def test_unknown_columns_rejected(self, temp_store):
        with pytest.raises(ValueError):
            await temp_store.campaigns.find_one(**{"id = id OR 1": "x"})
        with pytest.raises(ValueError):
            await temp_store.campaigns.insert({"bogus": 1})

    async def test_update_and_delete_require_arguments(self, temp_store):
        with pytest.raises(ValueError):
            await temp_store.campaigns.update_where({}, id="c1")
        with pytest.raises(ValueError):
            await temp_store.campaigns.delete_where()

    async def test_performance_dates_round_trip(self, temp_store):
        await temp_store.campaigns.insert(_campaign_values())
        await temp_store.ad_copies.insert({
            "id": "a1", "campaign_id": "c1", "user_id": "u1",
            "primary_text": "t", "created_at": NOW, "updated_at": NOW,
        })
        await temp_store.performance.insert({
            "id": "p1", "ad_copy_id": "a1", "date": date(2025, 3, 1), "impressions": 7,
        })
        [record] = await temp_store.performance.list_for_ad_copy("a1")
        assert record.date == date(2025, 3, 1)
        assert record.impressions == 7
