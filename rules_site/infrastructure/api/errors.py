"""Exception handlers — every error body is ``{"error": ...}``."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rules_site.domain.errors import StoreUnavailable
from rules_site.infrastructure.api.cors import CORS_HEADERS

logger = logging.getLogger(__name__)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
    return JSONResponse({"error": message}, status_code=exc.status_code, headers=exc.headers)


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request body on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse({"error": "Invalid request body"}, status_code=400)


async def _store_unavailable(request: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.error("Counter store unavailable on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        {"error": "Internal server error", "details": str(exc)},
        status_code=500,
    )


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    # Rendered outside the middleware stack, so CORS headers are set here.
    return JSONResponse(
        {"error": "Internal server error", "details": str(exc)},
        status_code=500,
        headers=CORS_HEADERS,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(StoreUnavailable, _store_unavailable)
    app.add_exception_handler(Exception, _unexpected_error)
