"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.cache.redis_cache import create_redis_client
from src.adapters.repository.postgres import run_migrations
from src.adapters.tokens.jwt_issuer import JwtTokenIssuer
from src.api.errors import register_exception_handlers
from src.api.v1 import router as v1_router
from src.config.logging_config import configure_logging
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "auth",
        "description": "Phone-number verification and registration",
    },
    {
        "name": "users",
        "description": "The authenticated user's profile and delivery locations",
    },
    {"name": "xozmaks", "description": "Business listings"},
    {"name": "categories", "description": "Listing categories"},
    {"name": "sub-categories", "description": "Listing sub-categories"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates database connection pool and runs migrations on startup
    - Creates the redis client and the token issuer on startup
    - Closes both clients on shutdown
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Starting application...")
    logger.info("Connecting to database...")

    # Create connection pool with explicit sizing
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )

    logger.info("Running database migrations...")
    run_migrations(pool)

    # Store long-lived clients in app state for dependency injection
    app.state.pool = pool
    app.state.redis = create_redis_client(settings.redis_url)
    app.state.token_issuer = JwtTokenIssuer(
        settings.jwt_secret_key,
        access_ttl=timedelta(seconds=settings.access_token_ttl_seconds),
        refresh_ttl=timedelta(seconds=settings.refresh_token_ttl_seconds),
    )
    if settings.verification_bypass_code:
        logger.warning("Verification bypass code is enabled")

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    app.state.redis.close()
    pool.close()
    logger.info("Database connection pool closed")


app = FastAPI(
    title="delivery-admin",
    description="Delivery Admin API - Phone registration, user profiles and xozmak catalog",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database and cache validation.

    Returns 200 OK if the application, database and cache are healthy.
    Raises exception if either connection fails.
    """
    pool = request.app.state.pool
    with pool.connection() as conn:
        conn.execute("SELECT 1")

    request.app.state.redis.ping()

    return {"status": "healthy"}
