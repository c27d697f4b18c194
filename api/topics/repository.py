"""
Topics persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database


async def list_topics(database: Database) -> list[dict[str, Any]]:
    return await database.fetch_all(
        """
        SELECT slug, description
        FROM topics
        ORDER BY slug ASC
        """
    )


async def topic_exists(database: Database, slug: str) -> bool:
    row = await database.fetch_one(
        """
        SELECT 1 AS ok
        FROM topics
        WHERE slug = $1
        LIMIT 1
        """,
        slug,
    )
    return row is not None


async def insert_topic(database: Database, *, slug: str, description: str) -> dict[str, Any]:
    """
    Insert a topic. A duplicate slug surfaces as a unique violation.
    """
    row = await database.fetch_one(
        """
        INSERT INTO topics (slug, description)
        VALUES ($1, $2)
        RETURNING slug, description
        """,
        slug,
        description,
    )
    if row is None:
        raise RuntimeError("Failed to insert topic.")
    return row
