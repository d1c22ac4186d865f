"""Request-scoped dependencies for the web app.

Everything a handler needs is read from ``request.app.state`` so each app
instance carries its own database factory, settings and rate limiter.
"""

from typing import Iterator

from fastapi import Depends, Request

from ledgerkeeper.config import Settings
from ledgerkeeper.database.base import Database
from ledgerkeeper.domain.balance_writer import BalanceWriter
from ledgerkeeper.domain.reconciliation import ReconciliationService
from ledgerkeeper.web.rate_limit import SlidingWindowRateLimiter


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Iterator[Database]:
    """Yield a database handle for the duration of one request."""
    db = request.app.state.database_factory()
    try:
        yield db
    finally:
        db.disconnect()


def get_rate_limiter(request: Request) -> SlidingWindowRateLimiter:
    return request.app.state.rate_limiter


def enforce_rate_limit(
    request: Request,
    limiter: SlidingWindowRateLimiter = Depends(get_rate_limiter),
) -> None:
    """Count the request against its client's window.

    Raises:
        RateLimitExceeded: Rendered as HTTP 429 by the app's exception handler
    """
    client = request.client.host if request.client else "unknown"
    limiter.hit(client)


def get_reconciliation_service(
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> ReconciliationService:
    return ReconciliationService(db, writer=BalanceWriter(db, retries=settings.write_retries))
