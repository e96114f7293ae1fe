"""Shared error response for the directory data endpoints."""

import logging

from fastapi import status
from fastapi.responses import JSONResponse

from modules.directory.schemas import ErrorResponse


def _sqlstate(exc: Exception) -> str | None:
    # asyncpg errors surface through SQLAlchemy's DBAPIError.orig
    orig = getattr(exc, "orig", exc)
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def query_error_response(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    include_details: bool = True,
) -> JSONResponse:
    """Log a failed query and build the HTTP 500 body."""
    logger.exception(
        f"{message}: {exc} (code={_sqlstate(exc)}, detail={getattr(exc, 'detail', None)})"
    )
    body = ErrorResponse(error=message, details=str(exc) if include_details else None)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(exclude_none=True),
    )
