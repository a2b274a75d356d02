"""Generic table repository implementing the backend data resource contract.

Every table supports the same four calls:
- row-set fetch with equality filters, ordering and a limit
- single-row insert
- single-row update by identifier
- single-row delete by identifier

Column names are checked against the repository's declared columns before
they reach SQL; values are always bound as parameters.
"""

import logging
from datetime import date, datetime
from enum import Enum
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel

from src.db.turso import TursoClient
from src.errors import NotFoundError
from src.models.base import utc_now

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def to_db_value(value: Any) -> Any:
    """Convert a Python value to something libSQL can bind."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    return value


class TableRepository(Generic[M]):
    """CRUD access to a single table, returning pydantic models."""

    table: str
    model: type[M]
    columns: tuple[str, ...]

    def __init__(self, db_client: TursoClient):
        """Initialize repository with database client.

        Args:
            db_client: TursoClient instance for database operations
        """
        self._db = db_client

    def _check_column(self, column: str) -> str:
        if column not in self.columns:
            msg = f"Unknown column '{column}' for table {self.table}"
            raise ValueError(msg)
        return column

    def _where(self, filters: dict[str, Any] | None) -> tuple[str, list[Any]]:
        if not filters:
            return "", []
        clauses = []
        params: list[Any] = []
        for column, value in filters.items():
            self._check_column(column)
            if value is None:
                clauses.append(f"{column} IS NULL")
            else:
                clauses.append(f"{column} = ?")
                params.append(to_db_value(value))
        return " WHERE " + " AND ".join(clauses), params

    def _to_model(self, row: dict[str, Any]) -> M:
        return self.model.model_validate(row)

    def _to_row(self, entity: M) -> dict[str, Any]:
        data = entity.model_dump()
        return {column: to_db_value(data.get(column)) for column in self.columns}

    async def select(
        self,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[M]:
        """Fetch rows matching all equality filters.

        Args:
            filters: column -> value; None matches NULL
            order_by: Column to sort by
            descending: Sort direction
            limit: Maximum rows to return

        Returns:
            Matching rows as models
        """
        where_sql, params = self._where(filters)
        sql = f"SELECT * FROM {self.table}{where_sql}"
        if order_by:
            direction = "DESC" if descending else "ASC"
            sql += f" ORDER BY {self._check_column(order_by)} {direction}"
        if limit is not None:
            sql += " LIMIT ?"
            params.append(limit)
        rows = await self._db.fetch_all(sql, params)
        return [self._to_model(row) for row in rows]

    async def get(self, entity_id: UUID | str) -> M | None:
        """Fetch a single row by id."""
        row = await self._db.fetch_one(
            f"SELECT * FROM {self.table} WHERE id = ?",
            [str(entity_id)],
        )
        return self._to_model(row) if row else None

    async def require(self, entity_id: UUID | str) -> M:
        """Fetch a single row by id or raise NotFoundError."""
        entity = await self.get(entity_id)
        if entity is None:
            msg = f"{self.table} row {entity_id} not found"
            raise NotFoundError(msg)
        return entity

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        """Count rows matching all equality filters."""
        where_sql, params = self._where(filters)
        result = await self._db.execute(
            f"SELECT COUNT(*) FROM {self.table}{where_sql}",
            params,
        )
        return result.rows[0][0] if result.rows else 0

    async def insert(self, entity: M) -> M:
        """Insert a single row and return it."""
        row = self._to_row(entity)
        columns = ", ".join(row)
        placeholders = ", ".join("?" for _ in row)
        await self._db.execute(
            f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders})",
            list(row.values()),
        )
        logger.debug(f"Inserted {self.table} row {row.get('id')}")
        return entity

    async def update(self, entity_id: UUID | str, changes: dict[str, Any]) -> M:
        """Update a single row by id in one statement and return the new row.

        Raises:
            NotFoundError: No row with that id
        """
        if "updated_at" in self.columns and "updated_at" not in changes:
            changes = {**changes, "updated_at": utc_now()}
        assignments = ", ".join(f"{self._check_column(c)} = ?" for c in changes)
        params = [to_db_value(v) for v in changes.values()]
        params.append(str(entity_id))
        result = await self._db.execute(
            f"UPDATE {self.table} SET {assignments} WHERE id = ?",
            params,
        )
        if result.rows_affected == 0:
            msg = f"{self.table} row {entity_id} not found"
            raise NotFoundError(msg)
        return await self.require(entity_id)

    async def delete(self, entity_id: UUID | str) -> None:
        """Permanently delete a single row by id.

        Raises:
            NotFoundError: No row with that id
        """
        result = await self._db.execute(
            f"DELETE FROM {self.table} WHERE id = ?",
            [str(entity_id)],
        )
        if result.rows_affected == 0:
            msg = f"{self.table} row {entity_id} not found"
            raise NotFoundError(msg)
        logger.debug(f"Deleted {self.table} row {entity_id}")
