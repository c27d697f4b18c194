"""
Comments persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import params
from core.db import Database
from core.errors import CommentNotFoundError

COMMENT_COLUMNS = "comment_id, article_id, author, body, votes, created_at"


async def list_comments_by_article(
    database: Database,
    article_id: int,
    *,
    limit: int,
    page: int,
) -> list[dict[str, Any]]:
    """
    One page of an article's comments, newest first.
    """
    return await database.fetch_all(
        f"""
        SELECT {COMMENT_COLUMNS}
        FROM comments
        WHERE article_id = $1
        ORDER BY created_at DESC, comment_id DESC
        LIMIT $2
        OFFSET $3
        """,
        article_id,
        limit,
        params.page_offset(limit=limit, page=page),
    )


async def insert_comment(
    database: Database,
    *,
    article_id: int,
    username: str,
    body: str,
) -> dict[str, Any]:
    """
    Insert a comment. Unknown article or author surface as a foreign-key violation.
    """
    row = await database.fetch_one(
        f"""
        INSERT INTO comments (article_id, author, body)
        VALUES ($1, $2, $3)
        RETURNING {COMMENT_COLUMNS}
        """,
        article_id,
        username,
        body,
    )
    if row is None:
        raise RuntimeError("Failed to insert comment.")
    return row


async def increment_comment_votes(database: Database, comment_id: int, inc_votes: int) -> dict[str, Any]:
    row = await database.fetch_one(
        f"""
        UPDATE comments
        SET votes = votes + $1
        WHERE comment_id = $2
        RETURNING {COMMENT_COLUMNS}
        """,
        inc_votes,
        comment_id,
    )
    if row is None:
        raise CommentNotFoundError()
    return row


async def delete_comment(database: Database, comment_id: int) -> None:
    row = await database.fetch_one(
        """
        DELETE FROM comments
        WHERE comment_id = $1
        RETURNING comment_id
        """,
        comment_id,
    )
    if row is None:
        raise CommentNotFoundError()
