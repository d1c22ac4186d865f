"""FastAPI application factory."""

import logging
from typing import Callable, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ledgerkeeper.config import Settings, load_settings
from ledgerkeeper.database.base import Database
from ledgerkeeper.database.factories import create_database
from ledgerkeeper.logging_config import setup_logging
from ledgerkeeper.web.rate_limit import RateLimitExceeded, SlidingWindowRateLimiter
from ledgerkeeper.web.routes import finance, health

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database_factory: Optional[Callable[[], Database]] = None,
    rate_limiter: Optional[SlidingWindowRateLimiter] = None,
    configure_logging: bool = True,
) -> FastAPI:
    """Build the ledgerkeeper API.

    Args:
        settings: Settings (defaults to the environment)
        database_factory: Returns a fresh Database handle per request. Defaults
            to sessions on one engine built from the settings.
        rate_limiter: Limiter shared by this app's finance routes
        configure_logging: Install the console log handler

    Returns:
        FastAPI app
    """
    settings = settings or load_settings()
    if configure_logging:
        setup_logging(settings.log_level)

    if database_factory is None:
        root_db = create_database(database_url=settings.database_url, database_path=settings.db_path)
        database_factory = root_db.new_handle
        logger.info("Using database %s", root_db.database_url)

    app = FastAPI(
        title="ledgerkeeper API",
        description="Recalculates stored account balances from their transaction ledgers",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.database_factory = database_factory
    app.state.rate_limiter = rate_limiter or SlidingWindowRateLimiter(
        settings.rate_limit, settings.rate_window_seconds
    )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_exceeded(request: Request, exc: RateLimitExceeded):
        logger.warning("Rate limit exceeded for %s on %s", exc.key, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content={"success": False, "error": "Too many requests"},
            headers={"Retry-After": str(max(1, round(exc.retry_after)))},
        )

    app.include_router(health.router)
    app.include_router(finance.router)
    return app
