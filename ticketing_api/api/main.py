"""
Ticketing API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           TICKETING API                                     │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:   CORS  →  exception handlers ({"data": null, "errors": …})   │
│                              │                                              │
│                              ▼                                              │
│   Routers:      /users  /venues  /events  /tickets  /orders  /health        │
│                              │                                              │
│                              ▼                                              │
│   Dependencies: DbSession   Cache   CurrentUser/AdminUser   *Service        │
│                              │                                              │
│                              ▼                                              │
│   Services → Repositories (QuerySpec) → PostgreSQL                          │
│          ↘ RedisCache (venue/event reads)                                   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connectivity verified (startup fails without it)
3. Application serves requests
4. Application stops → lifespan shutdown
5. Redis pool and database connections closed

Usage:
======
    # Run with uvicorn
    uvicorn ticketing_api.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from ticketing_api.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ticketing_api.config.settings import settings
from ticketing_api.shared.adapters.redis_adapter import get_cache
from ticketing_api.shared.db import init_db, close_db
from ticketing_api.shared.core.logging import logger
from ticketing_api.api.middleware import setup_exception_handlers, setup_request_context
from ticketing_api.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify the database connection pool
    - Report whether Redis is reachable (caching degrades, startup continues)

    Shutdown:
    - Close the Redis pool
    - Close database connections
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Ticketing API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()

    cache = get_cache()
    if cache.enabled and not await cache.ping():
        logger.warning("Redis unreachable, serving without cache", redis_url=settings.REDIS_URL)

    logger.info("Ticketing API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Ticketing API")

    await cache.close()
    await close_db()

    logger.info("Ticketing API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Event ticketing: venues, events, tickets and orders",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)
    setup_request_context(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
