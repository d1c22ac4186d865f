"""Tests for the reconciliation service."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from ledgerkeeper.database.base import LEGACY_TABLE
from ledgerkeeper.domain.balance_writer import BalanceWriter
from ledgerkeeper.domain.entities import Account, AccountType, TransactionType
from ledgerkeeper.domain.errors import AccountListingError, NotFoundError
from ledgerkeeper.domain.reconciliation import ReconciliationService


def make_account(account_id, name, opening_balance="0.00"):
    return Account(
        id=account_id,
        name=name,
        account_type=AccountType.BANK,
        opening_balance=Decimal(opening_balance),
        balance=None,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        updated_at=None,
    )


class InMemoryDb:
    """Minimal database double for the orchestrator."""

    def __init__(self, accounts, transactions=None, failing_writes=(), listing_error=None):
        self.accounts = {account.id: account for account in accounts}
        self.transactions = transactions or {}
        self.failing_writes = set(failing_writes)
        self.listing_error = listing_error
        self.writes = {}

    def list_accounts(self):
        if self.listing_error is not None:
            raise self.listing_error
        return list(self.accounts.values())

    def get_account(self, account_id):
        return self.accounts.get(account_id)

    def list_transactions(self, account_id, table=None):
        if table == LEGACY_TABLE:
            return []
        return self.transactions.get(account_id, [])

    def update_account_balance(self, account_id, balance, updated_at):
        if account_id in self.failing_writes:
            raise RuntimeError("connection reset")
        self.writes[account_id] = balance


def test_recalculate_all_reports_every_account(make_transaction):
    accounts = [make_account(1, "Main Offering", "100.00"), make_account(2, "Building Fund", "0.00")]
    transactions = {
        1: [
            make_transaction("50.00", TransactionType.INCOME, account_id=1),
            make_transaction("-20.00", TransactionType.EXPENDITURE, account_id=1),
            make_transaction("-10.00", TransactionType.TRANSFER_OUT, account_id=1),
        ],
        2: [make_transaction("75.50", TransactionType.TRANSFER_IN, account_id=2)],
    }
    db = InMemoryDb(accounts, transactions)

    report = ReconciliationService(db).recalculate_all()

    assert report.succeeded == 2
    assert report.failed == 0
    assert report.message == "Recalculated balances for 2 accounts"
    assert db.writes == {1: Decimal("120.00"), 2: Decimal("75.50")}
    assert [result.new_balance for result in report.results] == [Decimal("120.00"), Decimal("75.50")]


def test_one_write_failure_does_not_stop_the_batch():
    accounts = [make_account(i, f"Account {i}") for i in range(1, 6)]
    db = InMemoryDb(accounts, failing_writes={3})

    report = ReconciliationService(db).recalculate_all()

    assert len(report.results) == 5
    assert report.succeeded == 4
    assert report.failed == 1
    assert report.message == "Recalculated balances for 4 accounts (1 failed)"
    failed = [result for result in report.results if not result.success]
    assert failed[0].account_id == 3
    assert "connection reset" in failed[0].error
    assert set(db.writes) == {1, 2, 4, 5}


def test_empty_ledger_still_writes_opening_balance():
    db = InMemoryDb([make_account(1, "Petty Cash", "500.00")])

    report = ReconciliationService(db).recalculate_all()

    assert report.results[0].new_balance == Decimal("500.00")
    assert db.writes == {1: Decimal("500.00")}


def test_unreadable_ledger_is_isolated():
    class BrokenLedgerDb(InMemoryDb):
        def list_transactions(self, account_id, table=None):
            if account_id == 1:
                raise RuntimeError("timeout")
            return []

    db = BrokenLedgerDb([make_account(1, "A"), make_account(2, "B", "10.00")])

    report = ReconciliationService(db).recalculate_all()

    assert [result.success for result in report.results] == [False, True]
    assert "Transactions unavailable for account 1" in report.results[0].error
    assert db.writes == {2: Decimal("10.00")}


def test_listing_failure_aborts_the_batch():
    db = InMemoryDb([make_account(1, "A")], listing_error=RuntimeError("permission denied"))

    with pytest.raises(AccountListingError, match="permission denied"):
        ReconciliationService(db).recalculate_all()
    assert db.writes == {}


def test_no_accounts():
    report = ReconciliationService(InMemoryDb([])).recalculate_all()

    assert report.results == ()
    assert report.message == "No accounts found to recalculate"


def test_result_dict_shapes():
    db = InMemoryDb([make_account(1, "A"), make_account(2, "B")], failing_writes={2})

    ok, failed = (result.to_dict() for result in ReconciliationService(db).recalculate_all().results)

    assert ok == {"account_id": 1, "account_name": "A", "success": True, "new_balance": Decimal("0.00")}
    assert set(failed) == {"account_id", "account_name", "success", "error"}


def test_recalculate_account_with_retrying_writer():
    class OnceFlakyDb(InMemoryDb):
        attempts = 0

        def update_account_balance(self, account_id, balance, updated_at):
            self.attempts += 1
            if self.attempts == 1:
                raise RuntimeError("deadlock detected")
            super().update_account_balance(account_id, balance, updated_at)

    db = OnceFlakyDb([make_account(1, "A", "42.00")])
    service = ReconciliationService(db, writer=BalanceWriter(db, retries=1))

    result = service.recalculate_account(1)

    assert result.success
    assert db.writes == {1: Decimal("42.00")}


def test_recalculate_unknown_account():
    with pytest.raises(NotFoundError):
        ReconciliationService(InMemoryDb([])).recalculate_account(99)


def test_recalculate_all_against_database(temp_db, account_service, transaction_service):
    main_id = account_service.create_account("Main Offering", opening_balance=Decimal("100.00"))
    fund_id = account_service.create_account("Building Fund", opening_balance=Decimal("500.00"))
    transaction_service.create_transaction(main_id, Decimal("50.00"), TransactionType.INCOME)
    transaction_service.create_transaction(main_id, Decimal("20.00"), TransactionType.EXPENDITURE)
    transaction_service.create_transaction(main_id, Decimal("10.00"), TransactionType.TRANSFER_OUT)

    report = ReconciliationService(temp_db).recalculate_all()

    assert report.failed == 0
    assert temp_db.get_account(main_id).balance == Decimal("120.00")
    fund = temp_db.get_account(fund_id)
    assert fund.balance == Decimal("500.00")
    assert fund.updated_at is not None


def test_summarize(temp_db, sample_account, transaction_service, reconciliation_service):
    transaction_service.create_transaction(sample_account.id, Decimal("50"), TransactionType.INCOME)
    transaction_service.create_transaction(sample_account.id, Decimal("20"), TransactionType.EXPENDITURE)

    summary = reconciliation_service.summarize(sample_account.id)

    assert summary.total_inflow == Decimal("50")
    assert summary.total_outflow == Decimal("20")
    assert summary.count == 2


def test_preview_balance_does_not_write(temp_db, sample_account, transaction_service, reconciliation_service):
    transaction_service.create_transaction(sample_account.id, Decimal("5"), TransactionType.INCOME)

    assert reconciliation_service.preview_balance(sample_account) == Decimal("105.00")
    assert temp_db.get_account(sample_account.id).balance is None


def test_missing_primary_table_falls_back_for_every_account(temp_db, account_service, transaction_service):
    from ledgerkeeper.database.models import AccountTransaction

    main_id = account_service.create_account("Main Offering", opening_balance=Decimal("100.00"))
    welfare_id = account_service.create_account("Welfare", opening_balance=Decimal("5.00"))
    transaction_service.create_transaction(
        main_id, Decimal("25.00"), TransactionType.INCOME, table=LEGACY_TABLE
    )
    AccountTransaction.__table__.drop(temp_db.session_factory.kw["bind"])

    report = ReconciliationService(temp_db).recalculate_all()

    assert report.failed == 0
    assert temp_db.get_account(main_id).balance == Decimal("125.00")
    assert temp_db.get_account(welfare_id).balance == Decimal("5.00")
