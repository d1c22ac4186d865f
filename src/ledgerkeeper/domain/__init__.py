"""Domain layer for ledgerkeeper application."""

_SERVICES = {
    "AccountService": "ledgerkeeper.domain.account",
    "TransactionService": "ledgerkeeper.domain.transaction",
    "LedgerReader": "ledgerkeeper.domain.ledger_reader",
    "BalanceWriter": "ledgerkeeper.domain.balance_writer",
    "ReconciliationService": "ledgerkeeper.domain.reconciliation",
}

__all__ = list(_SERVICES)


# Services import the database layer, which imports domain entities, so they
# are resolved lazily to avoid a circular import.
def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
