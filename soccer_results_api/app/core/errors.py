"""
Error types shared across the application and their HTTP mapping.

Only storage failures are modelled as exceptions.  A lookup that finds
nothing is an absent result (``None``) in the store and service layers
and becomes a 404 in the endpoints.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class StorageError(Exception):
    """The persistence layer could not complete an operation.

    Stores raise it with the underlying driver exception chained as
    ``__cause__``.
    """


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Translate an unhandled ``StorageError`` into a 500 response."""
    logger = logging.getLogger(__name__)
    logger.error(
        "Storage failure while handling %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the application's exception handlers to ``app``."""
    app.add_exception_handler(StorageError, storage_error_handler)
