"""
Topic endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from core import params
from core.db import Database
from core.dependencies import get_database

from . import repository, schemas

router = APIRouter(prefix="/api/topics")


@router.get("", summary="List all topics.")
async def get_topics(database: Database = Depends(get_database)) -> dict:
    topics = await repository.list_topics(database)
    return {"topics": topics}


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a topic from {slug, description}.")
async def post_topic(
    payload: Any = Body(default=None),
    database: Database = Depends(get_database),
) -> dict:
    request = params.parse_body(schemas.NewTopicRequest, payload)
    topic = await repository.insert_topic(
        database,
        slug=request.slug,
        description=request.description,
    )
    return {"topic": topic}
