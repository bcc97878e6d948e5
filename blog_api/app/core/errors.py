"""
Application‑wide exception handlers.

Request validation failures are reported as HTTP 400 with the message
of the first failing rule, e.g. ``{"detail": "Read time must be a
positive integer"}``.  Messages raised by our own validators are
passed through as written; built‑in pydantic errors are prefixed with
the offending field name.  Only request validation is a client error:
a pydantic ``ValidationError`` raised while the store or a service
builds a model is a bug, and like any other unhandled exception it is
logged and answered with a generic HTTP 500 body.
"""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Location prefixes FastAPI adds in front of the field name.
_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}


def first_error_message(errors: Sequence[Any]) -> str:
    """Turn the first pydantic error into a short human readable message."""
    if not errors:
        return "Invalid request"
    error = errors[0]
    if error.get("type") == "value_error":
        ctx = error.get("ctx") or {}
        if "error" in ctx:
            return str(ctx["error"])
    loc = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_ROOTS]
    msg = error.get("msg", "Invalid value")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    message = first_error_message(errors)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
