"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database schema initialisation on startup

No business logic belongs here. Run with::

    uvicorn restful_users.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from restful_users.core.config import settings
from restful_users.infrastructure.database import create_schema, get_engine
from restful_users.interfaces.health import router as health_router
from restful_users.interfaces.users.router import router as users_router
from restful_users.shared.errors.handlers import register_error_handlers
from restful_users.shared.logging import configure_logging
from restful_users.shared.security.headers import SecurityHeadersMiddleware
from restful_users.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the users table exists."""
    create_schema(get_engine())
    logger.info(
        "%s %s started (min user age: %d)",
        settings.project_name,
        settings.version,
        settings.min_user_age,
    )

    yield

    get_engine().dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

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
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(users_router, prefix=API_PREFIX)

    return app


app = create_app()
