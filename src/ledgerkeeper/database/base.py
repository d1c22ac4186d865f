"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerkeeper.domain.entities import Account, AccountType, Transaction, TransactionType

# Physical ledger tables. New transactions are posted to the primary table;
# the legacy table still holds history for older accounts.
PRIMARY_TABLE = "account_tx_table"
LEGACY_TABLE = "account_transactions"


class Database(ABC):
    """Abstract database interface for ledgerkeeper."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        name: str,
        opening_balance: Decimal = Decimal("0"),
        account_type: AccountType = AccountType.BANK,
    ) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    @abstractmethod
    def delete_account(self, account_id: int) -> None:
        """Delete an account."""
        pass

    @abstractmethod
    def get_account_transaction_count(self, account_id: int) -> int:
        """Count transactions for an account across every ledger table."""
        pass

    @abstractmethod
    def update_account_balance(self, account_id: int, balance: Decimal, updated_at: datetime) -> None:
        """Set the stored balance and its audit timestamp in a single update.

        Raises:
            NotFoundError: If no account has the given ID
        """
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        account_id: int,
        date: date,
        amount: Decimal,
        transaction_type: TransactionType,
        description: Optional[str] = None,
        table: str = PRIMARY_TABLE,
    ) -> int:
        """Create a transaction in the given ledger table. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int, table: str = PRIMARY_TABLE) -> Optional[Transaction]:
        """Get transaction by ID from the given ledger table."""
        pass

    @abstractmethod
    def list_transactions(self, account_id: int, table: str = PRIMARY_TABLE) -> list[Transaction]:
        """List every transaction of an account in the given ledger table."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int, table: str = PRIMARY_TABLE) -> None:
        """Delete a transaction from the given ledger table."""
        pass
