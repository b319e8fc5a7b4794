"""Application-wide exception handlers.

Routing misses (404/405) and `HTTPException`s keep FastAPI's default
`{"detail": ...}` responses. Only exceptions nothing else handled are caught
here and turned into a plain 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error."


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Record an unexpected failure and answer with the standard 500 payload.

    Starlette re-raises the exception once this response is sent, and the ASGI
    server logs the traceback then; this entry only ties it to the request.
    """
    logger.error("Unhandled %s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_DETAIL},
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(Exception, unhandled_exception_handler)
