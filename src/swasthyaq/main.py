"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from swasthyaq.api.v1.router import api_router
from swasthyaq.config import get_settings
from swasthyaq.core.exceptions import (
    StorageError,
    http_exception_handler,
    storage_exception_handler,
    unhandled_exception_handler,
)
from swasthyaq.core.logging import get_logger, setup_logging
from swasthyaq.core.security import security_headers_middleware
from swasthyaq.dependencies import close_store

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None
    """
    settings = get_settings()
    logger.info("Starting up SwasthyaQ API (storage=%s)", settings.storage_backend)
    yield
    await close_store()
    logger.info("Shutting down SwasthyaQ API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Parliamentary question tracking API",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_credentials,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )

    # Add security headers middleware
    app.middleware("http")(security_headers_middleware)

    # Register exception handlers
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()
