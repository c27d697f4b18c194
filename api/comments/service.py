"""
Comments request handling.
"""

from __future__ import annotations

from typing import Any

from articles import repository as articles_repository
from core import params
from core.db import Database
from core.errors import ArticleNotFoundError

from . import repository, schemas


async def list_article_comments(
    database: Database,
    raw_article_id: str,
    *,
    limit: str | None,
    page: str | None,
) -> list[dict[str, Any]]:
    """
    A page of comments for an article.

    An empty page only becomes a 404 when the article itself is missing; an
    existing article without comments (or a page past the end) is `[]`.
    """
    article_id = params.parse_id(raw_article_id)
    parsed_limit = params.parse_limit(limit)
    parsed_page = params.parse_page(page)

    comments = await repository.list_comments_by_article(
        database,
        article_id,
        limit=parsed_limit,
        page=parsed_page,
    )
    if not comments and not await articles_repository.article_exists(database, article_id):
        raise ArticleNotFoundError()
    return comments


async def add_comment(database: Database, raw_article_id: str, payload: Any) -> dict[str, Any]:
    article_id = params.parse_id(raw_article_id)
    request = params.parse_body(schemas.NewCommentRequest, payload)
    return await repository.insert_comment(
        database,
        article_id=article_id,
        username=request.username,
        body=request.body,
    )


async def vote_on_comment(database: Database, raw_comment_id: str, payload: Any) -> dict[str, Any]:
    comment_id = params.parse_id(raw_comment_id)
    request = params.parse_body(schemas.VotesUpdateRequest, payload)
    return await repository.increment_comment_votes(database, comment_id, request.inc_votes)


async def remove_comment(database: Database, raw_comment_id: str) -> None:
    comment_id = params.parse_id(raw_comment_id)
    await repository.delete_comment(database, comment_id)
