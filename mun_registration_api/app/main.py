"""
Main entrypoint for the MUN Registration API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn mun_registration_api.app.main:app --reload

Every failure is returned as ``{"success": false, "message": ...,
"error_code": ...}`` so that clients can surface ``message`` directly.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.exceptions import (
    AuthenticationFailedError,
    DuplicateRegistrationError,
    NotFoundError,
    RegistrationAPIError,
    StoreError,
    ValidationError,
)
from .core.logging_config import setup_logging
from .core.security import AdminCredentialVerifier


logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    DuplicateRegistrationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AuthenticationFailedError: status.HTTP_401_UNAUTHORIZED,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_body(message: str, error_code: str, errors=None) -> dict:
    body = {"success": False, "message": message, "error_code": error_code}
    if errors is not None:
        body["errors"] = errors
    return body


def register_error_handlers(app: FastAPI) -> None:
    """Translate exceptions into the JSON error envelope."""

    @app.exception_handler(RegistrationAPIError)
    async def handle_registration_error(request: Request, exc: RegistrationAPIError) -> JSONResponse:
        status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
        if isinstance(exc, StoreError):
            logger.error("Store failure during %s on %s: %s", exc.operation, request.url.path, exc.details)
        return JSONResponse(
            status_code=status_code,
            content=_error_body(exc.message, exc.error_code, getattr(exc, "errors", None)),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")),
                "message": err.get("msg", "Invalid value"),
            }
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Invalid request data", "VALIDATION_ERROR", errors),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail), "HTTP_ERROR"),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Server error", "INTERNAL_ERROR"),
        )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, registers error handlers, mounts the API router
    under ``/api`` and applies database migrations on startup.
    """
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first run.
        init_db()
        if not settings.admin_auth_required:
            logger.warning("Admin endpoints are not protected; set ADMIN_AUTH_REQUIRED=true to require a token")
        if not AdminCredentialVerifier(settings).configured:
            logger.warning("No admin password configured; set ADMIN_PASSWORD or ADMIN_PASSWORD_HASH to enable admin login")

    return app


app = create_app()
