"""Domain model entities for ledgerkeeper.

These are pure data classes representing business concepts, independent of
database schema. The persistence layer maps its rows onto them, so the
reconciliation logic never touches ORM objects.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Kind of finance account."""

    CASH = "cash"
    BANK = "bank"
    MOBILE_MONEY = "mobile_money"
    OTHER = "other"


class TransactionType(str, Enum):
    """Direction of a posted transaction."""

    INCOME = "income"
    EXPENDITURE = "expenditure"
    TRANSFER_IN = "transfer_in"
    TRANSFER_OUT = "transfer_out"

    @property
    def is_inflow(self) -> bool:
        return self in (TransactionType.INCOME, TransactionType.TRANSFER_IN)


@dataclass(frozen=True)
class Account:
    """Finance account domain entity."""

    id: int
    name: str
    account_type: AccountType
    opening_balance: Decimal
    balance: Optional[Decimal]
    created_at: datetime
    updated_at: Optional[datetime]


@dataclass(frozen=True)
class Transaction:
    """Posted transaction domain entity.

    ``amount`` already carries its sign: inflows are positive and
    outflows negative.
    """

    id: int
    account_id: int
    date: date
    amount: Decimal
    transaction_type: TransactionType
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class ReconciliationResult:
    """Outcome of recalculating one account's balance."""

    account_id: int
    account_name: str
    success: bool
    new_balance: Optional[Decimal] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "account_id": self.account_id,
            "account_name": self.account_name,
            "success": self.success,
        }
        if self.success:
            data["new_balance"] = self.new_balance
        else:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class BatchReport:
    """Aggregated outcome of a reconciliation run over all accounts."""

    results: tuple[ReconciliationResult, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if not result.success)

    @property
    def message(self) -> str:
        if not self.results:
            return "No accounts found to recalculate"
        message = f"Recalculated balances for {self.succeeded} accounts"
        if self.failed > 0:
            message += f" ({self.failed} failed)"
        return message


@dataclass(frozen=True)
class TransactionSummary:
    """Ledger totals grouped by transaction type.

    Outflow totals are reported as positive magnitudes. ``total_loan_inflow``
    is the part of ``total_inflow`` received as loans and is not counted
    again in ``net``.
    """

    total_inflow: Decimal = Decimal("0")
    total_outflow: Decimal = Decimal("0")
    total_transfers_in: Decimal = Decimal("0")
    total_transfers_out: Decimal = Decimal("0")
    total_loan_inflow: Decimal = Decimal("0")
    count: int = 0

    @property
    def net(self) -> Decimal:
        return (
            self.total_inflow
            + self.total_transfers_in
            - self.total_outflow
            - self.total_transfers_out
        )
