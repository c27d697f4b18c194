"""
Comment endpoints, including the ones nested under an article.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from core.db import Database
from core.dependencies import get_database

from . import service

router = APIRouter(prefix="/api")


@router.get("/articles/{article_id}/comments", summary="List an article's comments; supports limit and p.")
async def get_article_comments(
    article_id: str,
    limit: str | None = Query(default=None),
    p: str | None = Query(default=None),
    database: Database = Depends(get_database),
) -> dict:
    comments = await service.list_article_comments(database, article_id, limit=limit, page=p)
    return {"comments": comments}


@router.post(
    "/articles/{article_id}/comments",
    status_code=status.HTTP_201_CREATED,
    summary="Add a comment from {username, body}.",
)
async def post_article_comment(
    article_id: str,
    payload: Any = Body(default=None),
    database: Database = Depends(get_database),
) -> dict:
    comment = await service.add_comment(database, article_id, payload)
    return {"comment": comment}


@router.patch("/comments/{comment_id}", summary="Add inc_votes to a comment's votes.")
async def patch_comment(
    comment_id: str,
    payload: Any = Body(default=None),
    database: Database = Depends(get_database),
) -> dict:
    comment = await service.vote_on_comment(database, comment_id, payload)
    return {"comment": comment}


@router.delete(
    "/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a comment.",
)
async def delete_comment(comment_id: str, database: Database = Depends(get_database)) -> Response:
    await service.remove_comment(database, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
