"""Transaction domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal
from ledgerkeeper.database.base import Database, PRIMARY_TABLE
from ledgerkeeper.domain.balance import signed_amount
from ledgerkeeper.domain.entities import Transaction as TransactionEntity, TransactionType
from ledgerkeeper.domain.errors import NotFoundError, ValidationError, account_not_found


class TransactionService:
    """Service for posting and listing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        account_id: int,
        amount: Decimal,
        transaction_type: TransactionType | str,
        date: Optional[date] = None,
        description: Optional[str] = None,
        table: str = PRIMARY_TABLE,
    ) -> int:
        """Post a transaction to an account.

        The stored amount is signed from the transaction type: income and
        transfers in are positive, expenditure and transfers out negative.

        Args:
            account_id: Account ID
            amount: Transaction amount (sign is ignored)
            transaction_type: Transaction type
            date: Transaction date (defaults to today)
            description: Optional description
            table: Ledger table to post to

        Returns:
            Transaction ID

        Raises:
            NotFoundError: If the account doesn't exist
            ValidationError: If the type is unknown or the amount is zero
        """
        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        try:
            transaction_type = TransactionType(transaction_type)
        except ValueError:
            known = ", ".join(kind.value for kind in TransactionType)
            raise ValidationError(
                f"Unknown transaction type '{transaction_type}'. Expected one of: {known}"
            )

        stored_amount = signed_amount(amount, transaction_type)
        if stored_amount == 0:
            raise ValidationError("Transaction amount cannot be zero")

        return self.db.create_transaction(
            account_id=account_id,
            date=date or date_today(),
            amount=stored_amount,
            transaction_type=transaction_type,
            description=description,
            table=table,
        )

    def get_transaction(
        self, transaction_id: int, table: str = PRIMARY_TABLE
    ) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID
            table: Ledger table to look in

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id, table=table)

    def list_transactions(self, account_id: int, table: str = PRIMARY_TABLE) -> list[TransactionEntity]:
        """List an account's transactions in one ledger table, newest first."""
        return self.db.list_transactions(account_id, table=table)

    def delete_transaction(self, transaction_id: int, table: str = PRIMARY_TABLE) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        self.db.delete_transaction(transaction_id, table=table)


def date_today() -> date:
    return date.today()
