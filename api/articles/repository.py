"""
Articles persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.errors import ArticleNotFoundError, TopicNotFoundError
from topics import repository as topics_repository

from .queries import ArticleListQuery, build_list_articles

ARTICLE_COLUMNS = "article_id, title, topic, author, body, created_at, votes, article_img_url"


async def get_article_by_id(database: Database, article_id: int) -> dict[str, Any]:
    row = await database.fetch_one(
        """
        SELECT
          a.article_id,
          a.title,
          a.topic,
          a.author,
          a.body,
          a.created_at,
          a.votes,
          a.article_img_url,
          COUNT(c.comment_id)::text AS comment_count
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        WHERE a.article_id = $1
        GROUP BY a.article_id
        """,
        article_id,
    )
    if row is None:
        raise ArticleNotFoundError()
    return row


async def article_exists(database: Database, article_id: int) -> bool:
    row = await database.fetch_one(
        """
        SELECT 1 AS ok
        FROM articles
        WHERE article_id = $1
        LIMIT 1
        """,
        article_id,
    )
    return row is not None


async def list_articles(database: Database, query: ArticleListQuery) -> list[dict[str, Any]]:
    """
    One page of articles plus `comment_count` and `total_count`.

    An empty page is a valid answer, unless it was filtered by a topic that
    does not exist at all.
    """
    sql, args = build_list_articles(query)
    rows = await database.fetch_all(sql, *args)
    if not rows and query.topic is not None:
        if not await topics_repository.topic_exists(database, query.topic):
            raise TopicNotFoundError()
    return rows


async def insert_article(
    database: Database,
    *,
    author: str,
    title: str,
    body: str,
    topic: str,
    article_img_url: str | None = None,
) -> dict[str, Any]:
    """
    Insert an article. Unknown author/topic surface as a foreign-key violation.
    """
    args: list[Any] = [author, title, body, topic]
    columns = "author, title, body, topic"
    values = "$1, $2, $3, $4"
    # Leaving the column out keeps its table default.
    if article_img_url is not None:
        args.append(article_img_url)
        columns += ", article_img_url"
        values += ", $5"

    row = await database.fetch_one(
        f"""
        INSERT INTO articles ({columns})
        VALUES ({values})
        RETURNING {ARTICLE_COLUMNS}
        """,
        *args,
    )
    if row is None:
        raise RuntimeError("Failed to insert article.")
    row["comment_count"] = 0
    return row


async def increment_article_votes(database: Database, article_id: int, inc_votes: int) -> dict[str, Any]:
    row = await database.fetch_one(
        f"""
        UPDATE articles
        SET votes = votes + $1
        WHERE article_id = $2
        RETURNING {ARTICLE_COLUMNS}
        """,
        inc_votes,
        article_id,
    )
    if row is None:
        raise ArticleNotFoundError()
    return row


async def delete_article(database: Database, article_id: int) -> None:
    """
    Delete an article; its comments go with it via ON DELETE CASCADE.
    """
    row = await database.fetch_one(
        """
        DELETE FROM articles
        WHERE article_id = $1
        RETURNING article_id
        """,
        article_id,
    )
    if row is None:
        raise ArticleNotFoundError()
