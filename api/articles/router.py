"""
Article endpoints.

Path ids and query values arrive as plain strings; `service` owns parsing
them so the error precedence stays in one place.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from core.db import Database
from core.dependencies import get_database

from . import service

router = APIRouter(prefix="/api/articles")


@router.get("", summary="List articles; supports topic, sort_by, order, limit and p queries.")
async def get_articles(
    topic: str | None = Query(default=None),
    sort_by: str | None = Query(default=None),
    order: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    p: str | None = Query(default=None),
    database: Database = Depends(get_database),
) -> dict:
    articles = await service.list_articles(
        database,
        topic=topic,
        sort_by=sort_by,
        order=order,
        limit=limit,
        page=p,
    )
    return {"articles": articles}


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create an article.")
async def post_article(
    payload: Any = Body(default=None),
    database: Database = Depends(get_database),
) -> dict:
    article = await service.create_article(database, payload)
    return {"article": article}


@router.get("/{article_id}", summary="Fetch one article with its comment_count.")
async def get_article(article_id: str, database: Database = Depends(get_database)) -> dict:
    article = await service.get_article(database, article_id)
    return {"article": article}


@router.patch("/{article_id}", summary="Add inc_votes to an article's votes.")
async def patch_article(
    article_id: str,
    payload: Any = Body(default=None),
    database: Database = Depends(get_database),
) -> dict:
    article = await service.vote_on_article(database, article_id, payload)
    return {"article": article}


@router.delete(
    "/{article_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an article and its comments.",
)
async def delete_article(article_id: str, database: Database = Depends(get_database)) -> Response:
    await service.remove_article(database, article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
