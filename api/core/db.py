"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. FastAPI opens it on startup, keeps it on
`app.state.database` and closes it on shutdown (see `api/main.py`).
Repositories receive the handle as their first argument instead of reaching
for a module global, so tests can hand them a substitute.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from . import config

logger = logging.getLogger(__name__)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(
        cls,
        dsn: str | None = None,
        *,
        min_size: int | None = None,
        max_size: int | None = None,
        command_timeout: float | None = None,
    ) -> "Database":
        pool = await asyncpg.create_pool(
            dsn=dsn or config.database_url(),
            min_size=config.pool_min_size() if min_size is None else min_size,
            max_size=config.pool_max_size() if max_size is None else max_size,
            command_timeout=config.command_timeout_s() if command_timeout is None else command_timeout,
        )
        logger.info("db_pool_opened min_size=%s max_size=%s", pool.get_min_size(), pool.get_max_size())
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()
        logger.info("db_pool_closed")

    @property
    def pool(self) -> asyncpg.Pool:
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self._pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self._pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]
