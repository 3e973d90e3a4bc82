"""Base repository class for database operations.

Provides the generic single-statement operations every table needs:
insert-with-returning, predicate select, predicate update-with-returning
and predicate delete with an affected-row count. Each call opens its own
connection and runs in the default executor so the event loop is never
blocked on SQLite.
"""

from __future__ import annotations

import asyncio
import sqlite3
from pathlib import Path
from typing import Any, Callable, Generic, Optional, Type, TypeVar

from storage.database import get_connection
from storage.models import encode_value

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """Base repository with common database operations.

    Subclasses set ``table`` and ``model``. Column names used in predicates
    and value mappings are checked against the model's columns before any
    SQL is built.
    """

    table: str = ""
    model: Type[T]

    def __init__(self, db_path: str | Path) -> None:
        """Initialize repository with database path.

        Args:
            db_path: Path to SQLite database file.
        """
        self.db_path = Path(db_path).expanduser()

    def _check_columns(self, names) -> None:
        allowed = self.model.columns()
        unknown = [name for name in names if name not in allowed]
        if unknown:
            raise ValueError(f"Unknown column(s) for {self.table}: {', '.join(unknown)}")

    def _where(self, predicates: dict[str, Any]) -> tuple[str, list[Any]]:
        self._check_columns(predicates)
        if not predicates:
            return "1=1", []
        clause = " AND ".join(f"{name} = ?" for name in predicates)
        return clause, [encode_value(v) for v in predicates.values()]

    async def _run(self, operation: Callable[[sqlite3.Connection], Any]) -> Any:
        """Run ``operation`` with a fresh connection in the executor.

        Commits on success, rolls back on exception.
        """
        loop = asyncio.get_running_loop()

        def _execute():
            conn = get_connection(self.db_path)
            try:
                result = operation(conn)
                conn.commit()
                return result
            except Exception:
                conn.rollback()
                raise
            finally:
                conn.close()

        return await loop.run_in_executor(None, _execute)

    async def insert(self, values: dict[str, Any]) -> T:
        """Insert one row and return it as a model instance."""
        self._check_columns(values)
        columns = ", ".join(values)
        placeholders = ", ".join("?" for _ in values)
        sql = f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders}) RETURNING *"
        params = tuple(encode_value(v) for v in values.values())

        # Drain the cursor so the statement completes before commit
        rows = await self._run(lambda conn: conn.execute(sql, params).fetchall())
        return self.model.from_row(rows[0])

    async def find_one(self, **predicates: Any) -> Optional[T]:
        """Return the first row matching all predicates, or None."""
        clause, params = self._where(predicates)
        sql = f"SELECT * FROM {self.table} WHERE {clause} LIMIT 1"

        rows = await self._run(lambda conn: conn.execute(sql, params).fetchall())
        return self.model.from_row(rows[0]) if rows else None

    async def find_all(self, **predicates: Any) -> list[T]:
        """Return every row matching all predicates in storage order."""
        clause, params = self._where(predicates)
        sql = f"SELECT * FROM {self.table} WHERE {clause}"

        rows = await self._run(lambda conn: conn.execute(sql, params).fetchall())
        return [self.model.from_row(row) for row in rows]

    async def update_where(self, values: dict[str, Any], **predicates: Any) -> Optional[T]:
        """Update rows matching all predicates and return the first updated row.

        Returns None when no row matched.
        """
        if not values:
            raise ValueError("update_where() requires at least one value")
        self._check_columns(values)
        clause, where_params = self._where(predicates)
        assignments = ", ".join(f"{name} = ?" for name in values)
        sql = f"UPDATE {self.table} SET {assignments} WHERE {clause} RETURNING *"
        params = [encode_value(v) for v in values.values()] + where_params

        rows = await self._run(lambda conn: conn.execute(sql, params).fetchall())
        return self.model.from_row(rows[0]) if rows else None

    async def delete_where(self, **predicates: Any) -> int:
        """Delete rows matching all predicates.

        Returns:
            Number of rows affected.
        """
        if not predicates:
            raise ValueError("delete_where() requires at least one predicate")
        clause, params = self._where(predicates)
        sql = f"DELETE FROM {self.table} WHERE {clause}"

        return await self._run(lambda conn: conn.execute(sql, params).rowcount)
