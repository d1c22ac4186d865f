"""Balance writer: persists a recalculated account balance."""

import logging
from datetime import datetime, UTC
from decimal import Decimal
from typing import Callable

from ledgerkeeper.database.base import Database
from ledgerkeeper.domain.errors import BalanceWriteError, NotFoundError, balance_write_failed

logger = logging.getLogger(__name__)


class BalanceWriter:
    """Writes balances together with their audit timestamp."""

    def __init__(
        self,
        db: Database,
        retries: int = 0,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ):
        """Initialize balance writer.

        Args:
            db: Database instance
            retries: Extra attempts after a failed write (missing accounts are
                never retried)
            clock: Source of the audit timestamp
        """
        if retries < 0:
            raise ValueError("retries must be zero or greater")
        self.db = db
        self.retries = retries
        self.clock = clock

    def write(self, account_id: int, balance: Decimal) -> datetime:
        """Persist a balance for an account.

        Args:
            account_id: Account ID
            balance: Newly computed balance

        Returns:
            The audit timestamp that was written

        Raises:
            BalanceWriteError: If the account is missing or every attempt failed
        """
        attempt = 0
        while True:
            updated_at = self.clock()
            try:
                self.db.update_account_balance(account_id, balance, updated_at)
                return updated_at
            except NotFoundError as exc:
                raise BalanceWriteError(balance_write_failed(account_id, str(exc))) from exc
            except Exception as exc:
                if attempt >= self.retries:
                    raise BalanceWriteError(balance_write_failed(account_id, str(exc))) from exc
                attempt += 1
                logger.warning(
                    "Retrying balance update for account %s (attempt %d of %d): %s",
                    account_id,
                    attempt,
                    self.retries,
                    exc,
                )
