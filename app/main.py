"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from app.core.config import settings
from app.domain.community.errors import DatastoreError
from app.interfaces.community.dependencies import bootstrap_question_schema
from app.interfaces.community.router import router as community_router
from app.interfaces.health import router as health_router
from app.interfaces.learning.router import router as learning_router
from app.interfaces.learning.sitemap_router import router as sitemap_router
from app.interfaces.market.router import router as market_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: bootstrap the questions schema if enabled."""
    try:
        if bootstrap_question_schema():
            logger.info("Questions schema ensured")
    except DatastoreError as exc:
        logger.warning("Questions schema bootstrap skipped: %s", exc.reason)

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(
        level=settings.log_level,
        secrets=(settings.coingecko_api_key, settings.supabase_db_url),
    )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(market_router, prefix=API_PREFIX)
    app.include_router(learning_router, prefix=API_PREFIX)
    app.include_router(community_router, prefix=API_PREFIX)
    app.include_router(sitemap_router)

    if not settings.is_datastore_configured():
        logger.warning("Questions datastore not configured, /api/ask will return 503")
    if not settings.coingecko_api_key:
        logger.info("No market-data API key, prices use the public tier")

    return app


app = create_app()
