"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Anything that escapes a
route (request validation, unknown routes, unhandled errors) is rendered
as an ERROR result envelope with HTTP 200, like the routes' own failures.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import AdminException
from app.schemas.result import ResultEnvelope, error

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "request validation failed"
INTERNAL_ERROR_MESSAGE = "internal server error"


def _envelope_response(envelope: ResultEnvelope) -> JSONResponse:
    """Serialize an envelope with the transport-level OK status."""
    return JSONResponse(status_code=200, content=envelope.model_dump(mode="json"))


def _admin_exception_handler(request: Request, exc: AdminException) -> JSONResponse:
    """Domain exception raised outside a route's own catch scope (e.g. in a dependency)."""
    logger.info("%s %s: %s", request.method, request.url.path, exc.to_dict())
    return _envelope_response(error(exc.message))


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Name the offending fields; the raw pydantic errors go to the log only."""
    fields = sorted(
        {".".join(str(part) for part in e.get("loc", ())[1:]) or "body" for e in exc.errors()}
    )
    logger.info(
        "%s %s: validation failed %s", request.method, request.url.path, exc.errors()
    )
    return _envelope_response(error(f"{VALIDATION_FAILED_MESSAGE}: {', '.join(fields)}"))


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown route, wrong method, etc.: ERROR envelope carrying the detail."""
    return _envelope_response(error(str(exc.detail)))


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log with traceback; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    message = str(exc) if get_settings().debug else INTERNAL_ERROR_MESSAGE
    return _envelope_response(error(message))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: AdminException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(AdminException, _admin_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
