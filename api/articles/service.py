"""
Articles request handling.

Validation always runs before the first repository call, so a malformed id,
page number or sort key never costs a round trip to Postgres.
"""

from __future__ import annotations

from typing import Any

from core import params
from core.db import Database

from . import queries, repository, schemas


async def list_articles(
    database: Database,
    *,
    topic: str | None,
    sort_by: str | None,
    order: str | None,
    limit: str | None,
    page: str | None,
) -> list[dict[str, Any]]:
    query = queries.normalize_list_query(
        topic=topic,
        sort_by=sort_by,
        order=order,
        limit=limit,
        page=page,
    )
    return await repository.list_articles(database, query)


async def get_article(database: Database, raw_article_id: str) -> dict[str, Any]:
    article_id = params.parse_id(raw_article_id)
    return await repository.get_article_by_id(database, article_id)


async def create_article(database: Database, payload: Any) -> dict[str, Any]:
    request = params.parse_body(schemas.NewArticleRequest, payload)
    return await repository.insert_article(
        database,
        author=request.author,
        title=request.title,
        body=request.body,
        topic=request.topic,
        article_img_url=request.article_img_url,
    )


async def vote_on_article(database: Database, raw_article_id: str, payload: Any) -> dict[str, Any]:
    article_id = params.parse_id(raw_article_id)
    request = params.parse_body(schemas.VotesUpdateRequest, payload)
    return await repository.increment_article_votes(database, article_id, request.inc_votes)


async def remove_article(database: Database, raw_article_id: str) -> None:
    article_id = params.parse_id(raw_article_id)
    await repository.delete_article(database, article_id)
