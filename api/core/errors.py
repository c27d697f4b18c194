"""
Typed API failures.

Validators and repositories raise these the moment a problem is detected.
Turning them into responses is the job of `core/error_handlers.py`; nothing
else should build error responses by hand.
"""

from __future__ import annotations

from fastapi import status

INVALID_FORMAT = "request included invalid format"
INVALID_SORT_BY = "invalid sort_by query"
INVALID_ORDER = "invalid order query"
MALFORMED_BODY = "request body incorrect"
PROPERTIES_NOT_FOUND = "1 or more properties not found"
KEY_EXISTS = "key already exists"
INVALID_PATH = "invalid path"
INTERNAL_ERROR = "internal server error"


class ApiError(Exception):
    """Base class: every subclass pins an HTTP status and a stable message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = INTERNAL_ERROR

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


# Client input that never reaches storage.


class InvalidFormatError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = INVALID_FORMAT


class InvalidSortByError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = INVALID_SORT_BY


class InvalidOrderError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = INVALID_ORDER


class MalformedBodyError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = MALFORMED_BODY


# Definitive absence or conflict reported by storage.


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "not found"


class ArticleNotFoundError(NotFoundError):
    message = "article not found"


class CommentNotFoundError(NotFoundError):
    message = "comment not found"


class TopicNotFoundError(NotFoundError):
    message = "topic not found"


class UserNotFoundError(NotFoundError):
    message = "user not found"


class PropertiesNotFoundError(NotFoundError):
    message = PROPERTIES_NOT_FOUND


class AlreadyExistsError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = KEY_EXISTS
