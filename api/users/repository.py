"""
Users persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.errors import UserNotFoundError


async def list_users(database: Database) -> list[dict[str, Any]]:
    return await database.fetch_all(
        """
        SELECT username, name, avatar_url
        FROM users
        ORDER BY username ASC
        """
    )


async def get_user_by_username(database: Database, username: str) -> dict[str, Any]:
    row = await database.fetch_one(
        """
        SELECT username, name, avatar_url
        FROM users
        WHERE username = $1
        """,
        username,
    )
    if row is None:
        raise UserNotFoundError()
    return row


async def insert_user(
    database: Database,
    *,
    username: str,
    name: str,
    avatar_url: str | None = None,
) -> dict[str, Any]:
    """
    Insert a user. A duplicate username surfaces as a unique violation.
    """
    row = await database.fetch_one(
        """
        INSERT INTO users (username, name, avatar_url)
        VALUES ($1, $2, $3)
        RETURNING username, name, avatar_url
        """,
        username,
        name,
        avatar_url,
    )
    if row is None:
        raise RuntimeError("Failed to insert user.")
    return row
