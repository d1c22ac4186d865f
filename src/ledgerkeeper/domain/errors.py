"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class TransactionsUnavailableError(DomainError):
    """Every transaction source failed for an account."""

    def __init__(self, account_id: int, source_errors: dict[str, str]):
        self.account_id = account_id
        self.source_errors = dict(source_errors)
        super().__init__(transactions_unavailable(account_id, self.source_errors))


class BalanceWriteError(DomainError):
    """Persisting a recalculated balance failed."""


class AccountListingError(DomainError):
    """Accounts could not be enumerated; the whole batch is aborted."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def duplicate_account_name(name: str) -> str:
    """Return message for duplicate account name."""
    return f"Account with name '{name}' already exists"


def transactions_unavailable(account_id: int, source_errors: dict[str, str]) -> str:
    """Return message when no transaction source could be read."""
    details = "; ".join(f"{name}: {error}" for name, error in source_errors.items())
    message = f"Transactions unavailable for account {account_id}"
    if details:
        message += f" ({details})"
    return message


def balance_write_failed(account_id: int, reason: str) -> str:
    """Return message for a failed balance update."""
    return f"Error updating balance for account {account_id}: {reason}"


def account_delete_blocked(account_id: int, transaction_count: int) -> str:
    """Return message when account still has posted transactions."""
    return (
        f"Cannot delete account {account_id}: it has {transaction_count} "
        f"transaction{'s' if transaction_count != 1 else ''}. "
        "Please delete them first."
    )
