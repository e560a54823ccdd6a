"""
Product API - FastAPI Application

Main entry point for the application.
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated, AsyncGenerator

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import JSONResponse

from product_api import __version__
from product_api.api.deps import (
    NotAuthenticated,
    claims_from_request,
    is_protected_path,
    resolve_settings,
)
from product_api.api.responses import problem_response, unauthorized_response
from product_api.api.router import router as api_router
from product_api.core.config import Settings, get_settings
from product_api.core.database import close_db, init_db
from product_api.core.logging import configure_logging


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    settings = app.state.settings

    # Startup
    logger.info(f"Starting Product API ({settings.ENVIRONMENT})")
    if settings.CREATE_TABLES_ON_STARTUP:
        await init_db()
    yield
    # Shutdown
    logger.info("Shutting down Product API")
    await close_db()


async def not_authenticated_handler(request: Request, exc: NotAuthenticated) -> Response:
    """Protected routes answer a failed bearer check with an empty 401."""
    return unauthorized_response()


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    """
    Report malformed input as 400 instead of FastAPI's default 422.

    Body decoding runs before route dependencies, so protected paths check
    the bearer token here first and answer 401 when it is not valid.
    """
    if is_protected_path(request.url.path):
        if claims_from_request(request, resolve_settings(request.app)) is None:
            return unauthorized_response()

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Invalid request data.",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log the traceback and answer with problem details."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return problem_response("An unexpected error occurred.", str(exc), resolve_settings(request.app))


async def health_check(settings: Annotated[Settings, Depends(get_settings)]) -> dict:
    """
    Health check endpoint.

    Returns:
        dict: Health status and environment info.
    """
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "version": __version__,
    }


async def root(request: Request) -> dict:
    """
    Root endpoint.

    Returns:
        dict: Welcome message and API documentation links.
    """
    return {
        "message": "Welcome to Product API",
        "docs": request.app.docs_url,
        "health": "/health",
    }


def create_app(settings: Settings) -> FastAPI:
    """
    Build the application for the given settings.

    Interactive docs are only served outside production.
    """
    docs_enabled = not settings.is_production

    app = FastAPI(
        title="Product API",
        description="JWT-protected CRUD service for products.",
        version=__version__,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    if settings.FORCE_HTTPS:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials="*" not in settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotAuthenticated, not_authenticated_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include API routers
    app.include_router(api_router)

    app.add_api_route("/health", health_check, methods=["GET"], tags=["Health"])
    app.add_api_route("/", root, methods=["GET"], tags=["Root"])

    return app


settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = create_app(settings)
