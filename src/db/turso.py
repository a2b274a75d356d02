"""Turso/libSQL database client wrapper."""

import logging
import sqlite3
from typing import Any

from libsql_client import Client, LibsqlError, ResultSet, create_client

from src.config import settings
from src.errors import BackendError, BackendUnavailableError

logger = logging.getLogger(__name__)


def rows_as_dicts(result: ResultSet) -> list[dict[str, Any]]:
    """Convert a result set into a list of column -> value dicts."""
    columns = list(result.columns)
    return [
        {column: row[index] for index, column in enumerate(columns)}
        for row in result.rows
    ]


class TursoClient:
    """Wrapper for Turso/libSQL async client.

    Supports both cloud Turso (with auth token) and local SQLite files.
    Driver errors are translated into portal errors so callers only ever
    see ``BackendError`` (statement rejected) or ``BackendUnavailableError``
    (transport failure).
    """

    def __init__(
        self,
        url: str | None = None,
        auth_token: str | None = None,
    ):
        """Initialize client with connection parameters.

        Args:
            url: Database URL. Defaults to settings or local file.
            auth_token: Auth token for Turso cloud. Defaults to settings.
        """
        self.url = url or settings.turso_database_url or "file:portal.db"
        self.auth_token = auth_token or settings.turso_auth_token
        self._client: Client | None = None

    async def connect(self) -> None:
        """Establish database connection."""
        if self._client is not None:
            return

        if self.auth_token and self.url.startswith("libsql://"):
            self._client = create_client(
                url=self.url,
                auth_token=self.auth_token,
            )
        else:
            self._client = create_client(url=self.url)

        logger.info(f"Connected to database: {self.url}")

    def _require_client(self) -> Client:
        if not self._client:
            msg = "Not connected. Call connect() first."
            raise RuntimeError(msg)
        return self._client

    async def execute(
        self,
        sql: str,
        params: list[Any] | None = None,
    ) -> ResultSet:
        """Execute a SQL statement.

        Args:
            sql: SQL query with ? placeholders
            params: Query parameters

        Returns:
            ResultSet with rows and metadata

        Raises:
            BackendError: The database rejected the statement
            BackendUnavailableError: The database could not be reached
        """
        client = self._require_client()
        try:
            return await client.execute(sql, params or [])
        except (LibsqlError, sqlite3.Error) as e:
            logger.warning(f"Statement rejected: {e}")
            raise BackendError(str(e)) from e
        except OSError as e:
            logger.error(f"Database unreachable: {e}")
            raise BackendUnavailableError(str(e)) from e

    async def fetch_all(
        self,
        sql: str,
        params: list[Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Execute a query and return rows as dicts."""
        return rows_as_dicts(await self.execute(sql, params))

    async def fetch_one(
        self,
        sql: str,
        params: list[Any] | None = None,
    ) -> dict[str, Any] | None:
        """Execute a query and return the first row as a dict, if any."""
        rows = await self.fetch_all(sql, params)
        return rows[0] if rows else None

    async def close(self) -> None:
        """Close the database connection."""
        if self._client:
            await self._client.close()
            self._client = None
            logger.info("Database connection closed")

    async def is_healthy(self) -> bool:
        """Check if database connection is healthy."""
        try:
            if not self._client:
                return False
            result = await self._client.execute("SELECT 1")
            return len(result.rows) == 1
        except Exception:
            return False
