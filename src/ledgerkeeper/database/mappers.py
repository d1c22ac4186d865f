"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so both ledger tables map onto the
same domain Transaction entity.
"""

from decimal import Decimal

from ledgerkeeper.domain import entities as domain
from ledgerkeeper.database.models import Account as ORMAccount, TransactionColumns


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        account_type=domain.AccountType(orm_account.account_type),
        opening_balance=(
            orm_account.opening_balance if orm_account.opening_balance is not None else Decimal("0")
        ),
        balance=orm_account.balance,
        created_at=orm_account.created_at,
        updated_at=orm_account.updated_at,
    )


def transaction_to_domain(orm_transaction: TransactionColumns) -> domain.Transaction:
    """Convert a row from either ledger table to a domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        account_id=orm_transaction.account_id,
        date=orm_transaction.date,
        amount=orm_transaction.amount,
        transaction_type=domain.TransactionType(orm_transaction.transaction_type),
        description=orm_transaction.description,
        created_at=orm_transaction.created_at,
    )
