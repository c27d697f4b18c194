"""
User endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from core import params
from core.db import Database
from core.dependencies import get_database

from . import repository, schemas

router = APIRouter(prefix="/api/users")


@router.get("", summary="List all users.")
async def get_users(database: Database = Depends(get_database)) -> dict:
    users = await repository.list_users(database)
    return {"users": users}


@router.get("/{username}", summary="Fetch one user by username.")
async def get_user(username: str, database: Database = Depends(get_database)) -> dict:
    user = await repository.get_user_by_username(database, username)
    return {"user": user}


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a user from {username, name, avatar_url?}.")
async def post_user(
    payload: Any = Body(default=None),
    database: Database = Depends(get_database),
) -> dict:
    request = params.parse_body(schemas.NewUserRequest, payload)
    user = await repository.insert_user(
        database,
        username=request.username,
        name=request.name,
        avatar_url=request.avatar_url,
    )
    return {"user": user}
