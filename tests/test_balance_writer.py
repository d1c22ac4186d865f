"""Tests for the balance writer."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from ledgerkeeper.domain.balance_writer import BalanceWriter
from ledgerkeeper.domain.errors import BalanceWriteError, NotFoundError

FIXED_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)


class FlakyDb:
    """Fails the first ``failures`` balance updates."""

    def __init__(self, failures=0, error=None):
        self.failures = failures
        self.error = error or RuntimeError("database is locked")
        self.attempts = 0
        self.writes = []

    def update_account_balance(self, account_id, balance, updated_at):
        self.attempts += 1
        if self.attempts <= self.failures:
            raise self.error
        self.writes.append((account_id, balance, updated_at))


def test_write_stores_balance_and_timestamp():
    db = FlakyDb()
    writer = BalanceWriter(db, clock=lambda: FIXED_TIME)

    assert writer.write(5, Decimal("120.00")) == FIXED_TIME
    assert db.writes == [(5, Decimal("120.00"), FIXED_TIME)]


def test_write_without_retries_fails_on_first_error():
    db = FlakyDb(failures=1)

    with pytest.raises(BalanceWriteError, match="Error updating balance for account 5: database is locked"):
        BalanceWriter(db).write(5, Decimal("1"))
    assert db.attempts == 1


def test_write_retries_transient_errors():
    db = FlakyDb(failures=2)

    BalanceWriter(db, retries=2).write(5, Decimal("1"))

    assert db.attempts == 3
    assert len(db.writes) == 1


def test_write_gives_up_after_retries():
    db = FlakyDb(failures=5)

    with pytest.raises(BalanceWriteError):
        BalanceWriter(db, retries=2).write(5, Decimal("1"))
    assert db.attempts == 3


def test_missing_account_is_not_retried():
    db = FlakyDb(failures=5, error=NotFoundError("Account 5 not found"))

    with pytest.raises(BalanceWriteError, match="Account 5 not found"):
        BalanceWriter(db, retries=3).write(5, Decimal("1"))
    assert db.attempts == 1


def test_negative_retries_rejected():
    with pytest.raises(ValueError):
        BalanceWriter(FlakyDb(), retries=-1)


def test_write_against_database(temp_db, sample_account):
    BalanceWriter(temp_db, clock=lambda: FIXED_TIME).write(sample_account.id, Decimal("321.09"))

    account = temp_db.get_account(sample_account.id)
    assert account.balance == Decimal("321.09")
    assert account.updated_at.replace(tzinfo=None) == FIXED_TIME.replace(tzinfo=None)


def test_write_missing_account_against_database(temp_db):
    with pytest.raises(BalanceWriteError, match="Account 404 not found"):
        BalanceWriter(temp_db).write(404, Decimal("1"))
