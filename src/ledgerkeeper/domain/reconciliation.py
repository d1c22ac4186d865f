"""Account balance reconciliation domain service."""

import logging
from decimal import Decimal
from typing import Optional

from ledgerkeeper.database.base import Database
from ledgerkeeper.domain.balance import compute_balance, summarize_transactions
from ledgerkeeper.domain.balance_writer import BalanceWriter
from ledgerkeeper.domain.entities import (
    Account,
    BatchReport,
    ReconciliationResult,
    TransactionSummary,
)
from ledgerkeeper.domain.errors import AccountListingError, NotFoundError, account_not_found
from ledgerkeeper.domain.ledger_reader import LedgerReader

logger = logging.getLogger(__name__)


class ReconciliationService:
    """Recomputes stored balances from each account's ledger."""

    def __init__(
        self,
        db: Database,
        reader: Optional[LedgerReader] = None,
        writer: Optional[BalanceWriter] = None,
    ):
        """Initialize reconciliation service.

        Args:
            db: Database instance
            reader: Ledger reader (defaults to primary then legacy table)
            writer: Balance writer (defaults to no retries)
        """
        self.db = db
        self.reader = reader or LedgerReader(db)
        self.writer = writer or BalanceWriter(db)

    def recalculate_all(self) -> BatchReport:
        """Recalculate the balance of every account.

        Failures are isolated per account: each one becomes a failed result
        and the batch moves on to the next account.

        Returns:
            BatchReport with one result per account

        Raises:
            AccountListingError: If the accounts cannot be listed
        """
        logger.info("Starting account balance recalculation")
        try:
            accounts = self.db.list_accounts()
        except Exception as exc:
            logger.error("Error fetching accounts: %s", exc)
            raise AccountListingError(str(exc) or exc.__class__.__name__) from exc

        logger.info("Found %d accounts to recalculate", len(accounts))
        results = tuple(self._reconcile_isolated(account) for account in accounts)
        report = BatchReport(results=results)
        logger.info(report.message)
        return report

    def recalculate_account(self, account_id: int) -> ReconciliationResult:
        """Recalculate a single account's balance.

        Args:
            account_id: Account ID

        Returns:
            ReconciliationResult for the account

        Raises:
            NotFoundError: If the account does not exist
        """
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return self._reconcile_isolated(account)

    def preview_balance(self, account: Account) -> Decimal:
        """Compute an account's balance from its ledger without writing it."""
        return compute_balance(account.opening_balance, self.reader.read(account.id))

    def summarize(self, account_id: int) -> TransactionSummary:
        """Summarize an account's ledger by transaction type.

        Raises:
            NotFoundError: If the account does not exist
            TransactionsUnavailableError: If the ledger cannot be read
        """
        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))
        return summarize_transactions(self.reader.read(account_id))

    def _reconcile(self, account: Account) -> ReconciliationResult:
        transactions = self.reader.read(account.id)
        new_balance = compute_balance(account.opening_balance, transactions)
        if transactions:
            logger.info(
                "Calculated balance for account %s: %s from %d transactions",
                account.id,
                new_balance,
                len(transactions),
            )
        else:
            logger.info(
                "No transactions found for account %s, using opening balance: %s",
                account.id,
                new_balance,
            )
        self.writer.write(account.id, new_balance)
        return ReconciliationResult(
            account_id=account.id,
            account_name=account.name,
            success=True,
            new_balance=new_balance,
        )

    def _reconcile_isolated(self, account: Account) -> ReconciliationResult:
        try:
            return self._reconcile(account)
        except Exception as exc:
            logger.error("Error recalculating balance for account %s (%s): %s", account.id, account.name, exc)
            return ReconciliationResult(
                account_id=account.id,
                account_name=account.name,
                success=False,
                error=str(exc) or "Unknown error",
            )
