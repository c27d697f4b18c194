"""
Syntactic checks for client-supplied identifiers, paging numbers and bodies.

These run before anything touches storage: a malformed value is a format
error, never a lookup failure.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, Field, StrictInt, ValidationError

from . import config
from .errors import InvalidFormatError, MalformedBodyError

# Bounds of a Postgres INTEGER / SERIAL column.
MIN_INT = -2_147_483_648
MAX_ID = 2_147_483_647

# A votes delta that fits the INTEGER votes column.
VoteIncrement = Annotated[StrictInt, Field(ge=MIN_INT, le=MAX_ID)]

_DIGITS = re.compile(r"[0-9]+")

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse_digits(raw: str | None) -> int:
    value = raw or ""
    if not _DIGITS.fullmatch(value):
        raise InvalidFormatError()
    number = int(value)
    if number > MAX_ID:
        raise InvalidFormatError()
    return number


def parse_id(raw: str | None) -> int:
    """Validate an `article_id` / `comment_id` path segment."""
    return _parse_digits(raw)


def parse_limit(raw: str | None) -> int:
    if raw is None:
        return config.default_page_limit()
    return _parse_digits(raw)


def parse_page(raw: str | None) -> int:
    if raw is None:
        return 1
    page = _parse_digits(raw)
    if page < 1:
        raise InvalidFormatError()
    return page


def page_offset(*, limit: int, page: int) -> int:
    return (page - 1) * limit


def parse_body(model: type[ModelT], payload: Any) -> ModelT:
    """
    Validate a JSON body against a schema with an exact key set.

    Schemas forbid extra keys, so unknown keys fail the same way missing or
    mistyped ones do.
    """
    if not isinstance(payload, dict):
        raise MalformedBodyError()
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MalformedBodyError() from exc
