"""Account domain service."""

from decimal import Decimal
from typing import Optional
from ledgerkeeper.database.base import Database
from ledgerkeeper.domain.entities import Account as AccountEntity, AccountType
from ledgerkeeper.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    account_delete_blocked,
    account_not_found,
    duplicate_account_name,
)


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        name: str,
        opening_balance: Decimal = Decimal("0"),
        account_type: AccountType | str = AccountType.BANK,
    ) -> int:
        """Create a new account.

        Args:
            name: Account name
            opening_balance: Balance recorded when the account was opened
            account_type: Kind of account

        Returns:
            Account ID

        Raises:
            ValidationError: If the name is empty or the type is unknown
            ConflictError: If account name already exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Account name cannot be empty")

        try:
            account_type = AccountType(account_type)
        except ValueError:
            known = ", ".join(kind.value for kind in AccountType)
            raise ValidationError(f"Unknown account type '{account_type}'. Expected one of: {known}")

        # Check if account with same name exists
        for acc in self.db.list_accounts():
            if acc.name == name:
                raise ConflictError(duplicate_account_name(name))

        return self.db.create_account(
            name=name, opening_balance=opening_balance, account_type=account_type
        )

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts.

        Returns:
            List of account entities
        """
        return self.db.list_accounts()

    def delete_account(self, account_id: int) -> None:
        """Delete an account.

        Args:
            account_id: Account ID to delete

        Raises:
            NotFoundError: If account not found
            DependencyError: If the account still has transactions
        """
        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        transaction_count = self.db.get_account_transaction_count(account_id)
        if transaction_count > 0:
            raise DependencyError(account_delete_blocked(account_id, transaction_count))

        self.db.delete_account(account_id)
