"""Shared pytest fixtures for ledgerkeeper tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from ledgerkeeper.config import Settings
from ledgerkeeper.database.factories import create_sqlite_database
from ledgerkeeper.domain.account import AccountService
from ledgerkeeper.domain.entities import Transaction, TransactionType
from ledgerkeeper.domain.reconciliation import ReconciliationService
from ledgerkeeper.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def reconciliation_service(temp_db):
    """Create a ReconciliationService with a temporary database."""
    return ReconciliationService(temp_db)


@pytest.fixture
def sample_account(account_service):
    """Create a sample account with an opening balance of 100.00."""
    account_id = account_service.create_account(
        name="Main Offering", opening_balance=Decimal("100.00")
    )
    return account_service.get_account(account_id)


@pytest.fixture
def make_transaction():
    """Build in-memory domain transactions for pure-function tests."""
    counter = iter(range(1, 10_000))

    def _make(amount, transaction_type=TransactionType.INCOME, account_id=1):
        return Transaction(
            id=next(counter),
            account_id=account_id,
            date=date(2024, 1, 15),
            amount=Decimal(amount),
            transaction_type=transaction_type,
            description=None,
            created_at=None,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def web_client(temp_db):
    """Create a FastAPI test client serving the temporary database."""
    from fastapi.testclient import TestClient
    from ledgerkeeper.web.app import create_app

    app = create_app(
        settings=Settings(db_path=temp_db.database_path, rate_limit=1000),
        database_factory=lambda: temp_db,
        configure_logging=False,
    )
    with TestClient(app) as client:
        yield client
