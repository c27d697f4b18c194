"""
Failure classification.

`classify` maps any raised exception to a `(status, message)` pair. It is
pure: the same exception type and state always yields the same answer, and
storage driver text never ends up in the message.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import errors

logger = logging.getLogger(__name__)

# SQLSTATE codes the API knows how to explain to a client.
_SQLSTATE_OUTCOMES: dict[str, tuple[int, str]] = {
    "22P02": (status.HTTP_400_BAD_REQUEST, errors.INVALID_FORMAT),  # invalid_text_representation
    "22003": (status.HTTP_400_BAD_REQUEST, errors.INVALID_FORMAT),  # numeric_value_out_of_range
    "23502": (status.HTTP_400_BAD_REQUEST, errors.MALFORMED_BODY),  # not_null_violation
    "23503": (status.HTTP_404_NOT_FOUND, errors.PROPERTIES_NOT_FOUND),  # foreign_key_violation
    "23505": (status.HTTP_400_BAD_REQUEST, errors.KEY_EXISTS),  # unique_violation
}

_INTERNAL = (status.HTTP_500_INTERNAL_SERVER_ERROR, errors.INTERNAL_ERROR)


def _classify_validation(exc: RequestValidationError) -> tuple[int, str]:
    for err in exc.errors():
        loc = err.get("loc") or ()
        if loc and loc[0] == "body":
            return status.HTTP_400_BAD_REQUEST, errors.MALFORMED_BODY
    return status.HTTP_400_BAD_REQUEST, errors.INVALID_FORMAT


def classify(exc: BaseException) -> tuple[int, str]:
    if isinstance(exc, errors.ApiError):
        return exc.status_code, exc.message

    if isinstance(exc, asyncpg.PostgresError):
        sqlstate = str(getattr(exc, "sqlstate", "") or "")
        if sqlstate in _SQLSTATE_OUTCOMES:
            return _SQLSTATE_OUTCOMES[sqlstate]
        # Class 22 (data exception): a client value the column cannot hold.
        if sqlstate.startswith("22"):
            return status.HTTP_400_BAD_REQUEST, errors.INVALID_FORMAT
        return _INTERNAL

    if isinstance(exc, RequestValidationError):
        return _classify_validation(exc)

    if isinstance(exc, StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return exc.status_code, errors.INVALID_PATH
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            return _INTERNAL
        return exc.status_code, str(exc.detail)

    return _INTERNAL


def _respond(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": message})


async def handle_api_error(request: Request, exc: Exception) -> JSONResponse:
    status_code, message = classify(exc)
    logger.debug("client_error path=%s status=%s msg=%s", request.url.path, status_code, message)
    return _respond(status_code, message)


async def handle_storage_error(request: Request, exc: Exception) -> JSONResponse:
    status_code, message = classify(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "storage_error path=%s sqlstate=%s",
            request.url.path,
            getattr(exc, "sqlstate", None),
            exc_info=exc,
        )
    else:
        logger.debug(
            "storage_rejected path=%s sqlstate=%s status=%s",
            request.url.path,
            getattr(exc, "sqlstate", None),
            status_code,
        )
    return _respond(status_code, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error path=%s", request.url.path, exc_info=exc)
    return _respond(*_INTERNAL)


def register(app: FastAPI) -> None:
    app.add_exception_handler(errors.ApiError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_api_error)
    app.add_exception_handler(asyncpg.PostgresError, handle_storage_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
