"""Ledger reader: loads an account's posted transactions.

The ledger of an account may live in more than one physical table. Sources
are tried in order and the first one that yields rows is authoritative; rows
from different sources are never merged.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ledgerkeeper.database.base import Database, PRIMARY_TABLE, LEGACY_TABLE
from ledgerkeeper.domain.entities import Transaction
from ledgerkeeper.domain.errors import TransactionsUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionSource:
    """A named ledger table to read transactions from."""

    name: str
    table: str


DEFAULT_SOURCES: tuple[TransactionSource, ...] = (
    TransactionSource(name="primary", table=PRIMARY_TABLE),
    TransactionSource(name="legacy", table=LEGACY_TABLE),
)


class LedgerReader:
    """Reads an account's ledger from an ordered list of sources."""

    def __init__(self, db: Database, sources: Optional[Sequence[TransactionSource]] = None):
        """Initialize ledger reader.

        Args:
            db: Database instance
            sources: Sources in priority order (defaults to primary, then legacy)
        """
        self.db = db
        self.sources = tuple(sources) if sources is not None else DEFAULT_SOURCES
        if not self.sources:
            raise ValueError("LedgerReader needs at least one transaction source")

    def read(self, account_id: int) -> list[Transaction]:
        """Return every posted transaction of an account.

        Args:
            account_id: Account ID

        Returns:
            Transactions from the first source that has any

        Raises:
            TransactionsUnavailableError: If no source yielded rows and the
                last source tried failed
        """
        errors: dict[str, str] = {}
        last_failed = False

        for source in self.sources:
            try:
                transactions = self.db.list_transactions(account_id, table=source.table)
            except Exception as exc:
                logger.warning(
                    "Error fetching transactions from %s for account %s: %s",
                    source.table,
                    account_id,
                    exc,
                )
                errors[source.name] = str(exc) or exc.__class__.__name__
                last_failed = True
                continue

            last_failed = False
            if transactions:
                logger.debug(
                    "Read %d transactions for account %s from %s",
                    len(transactions),
                    account_id,
                    source.table,
                )
                return transactions
            logger.info("No transactions for account %s in %s", account_id, source.table)

        if last_failed:
            raise TransactionsUnavailableError(account_id, errors)
        return []
