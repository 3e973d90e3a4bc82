"""Data models for Ad Copy Assistant storage.

This module contains the dataclass definitions used across storage
repositories. Column names are snake_case; ``to_dict()`` produces the
camelCase shape returned by the actions.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Any, ClassVar, Optional


def to_camel(name: str) -> str:
    """Convert a snake_case column name to camelCase."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def encode_value(value: Any) -> Any:
    """Convert a Python value into something SQLite stores natively."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class RowModel:
    """Mixin for dataclasses that map one-to-one onto a table row."""

    # Columns holding ISO timestamps / dates that must be parsed on read
    datetime_columns: ClassVar[tuple[str, ...]] = ()
    date_columns: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def columns(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_row(cls, row: sqlite3.Row):
        values = {}
        for name in cls.columns():
            value = row[name]
            if value is not None and name in cls.datetime_columns:
                value = datetime.fromisoformat(value)
            elif value is not None and name in cls.date_columns:
                value = date.fromisoformat(value)
            values[name] = value
        return cls(**values)

    def to_dict(self, exclude_none: bool = False) -> dict[str, Any]:
        """Return the camelCase representation of this row."""
        result = {}
        for name in self.columns():
            value = getattr(self, name)
            if exclude_none and value is None:
                continue
            result[to_camel(name)] = value
        return result


@dataclass
class Campaign(RowModel):
    """Ad campaign record.

    Attributes:
        id: Unique campaign identifier (UUID4 string).
        user_id: Owner of the campaign.
        name: Campaign name, e.g. "Black Friday 2025 - Shoes".
        objective: Campaign objective ("traffic", "leads", "sales").
        product_name: Product being advertised.
        target_audience: Free-form audience description.
        notes: Free-form notes.
        created_at: Record creation timestamp.
        updated_at: Last update timestamp.
    """

    datetime_columns: ClassVar[tuple[str, ...]] = ("created_at", "updated_at")

    id: str
    user_id: str
    name: str
    objective: Optional[str] = None
    product_name: Optional[str] = None
    target_audience: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class AdCopy(RowModel):
    """Ad copy variation belonging to a campaign.

    ``user_id`` duplicates the owning campaign's ``user_id`` and is written
    once, when the ad copy is created.
    """

    datetime_columns: ClassVar[tuple[str, ...]] = ("created_at", "updated_at")

    id: str
    campaign_id: str
    user_id: str
    primary_text: str
    platform: Optional[str] = None
    headline: Optional[str] = None
    description: Optional[str] = None
    call_to_action: Optional[str] = None
    tone: Optional[str] = None
    variant_label: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class PerformanceRecord(RowModel):
    """Performance log entry for an ad copy."""

    date_columns: ClassVar[tuple[str, ...]] = ("date",)

    id: str
    ad_copy_id: str
    date: Optional[date] = None
    impressions: Optional[int] = None
    clicks: Optional[int] = None
    conversions: Optional[int] = None
    spend: Optional[float] = None
    currency: Optional[str] = None
    notes: Optional[str] = None
