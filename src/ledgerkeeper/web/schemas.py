"""Request and response models for the finance API.

Amounts are exact ``Decimal`` values in the domain and become JSON numbers
here.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from ledgerkeeper.domain.entities import ReconciliationResult, TransactionSummary


def _money(value: Optional[Decimal]) -> Optional[float]:
    return None if value is None else float(value)


class AccountResultModel(BaseModel):
    """One account's outcome in a batch recalculation."""

    account_id: int
    account_name: str
    success: bool
    new_balance: Optional[float] = None
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: ReconciliationResult) -> "AccountResultModel":
        return cls(
            account_id=result.account_id,
            account_name=result.account_name,
            success=result.success,
            new_balance=_money(result.new_balance),
            error=result.error,
        )


class RecalculateAllResponse(BaseModel):
    """Body of a successful batch recalculation."""

    success: bool = True
    message: str
    results: list[AccountResultModel]

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "success": True,
            "message": "Recalculated balances for 1 accounts (1 failed)",
            "results": [
                {"account_id": 1, "account_name": "Main Offering", "success": True, "new_balance": 1234.56},
                {"account_id": 2, "account_name": "Building Fund", "success": False, "error": "..."},
            ],
        }
    })


class RecalculateAccountRequest(BaseModel):
    """Body of a single-account recalculation request."""

    account_id: Optional[int] = Field(default=None, description="Account to recalculate")


class RecalculateAccountResponse(BaseModel):
    success: bool = True
    balance: float
    message: str


class AccountBalanceData(BaseModel):
    id: int
    name: str
    balance: float


class AccountBalanceResponse(BaseModel):
    data: AccountBalanceData


class TransactionSummaryResponse(BaseModel):
    """Ledger totals of one account by transaction type."""

    account_id: int
    total_inflow: float
    total_outflow: float
    total_transfers_in: float
    total_transfers_out: float
    total_loan_inflow: float
    net: float
    count: int

    @classmethod
    def from_summary(cls, account_id: int, summary: TransactionSummary) -> "TransactionSummaryResponse":
        return cls(
            account_id=account_id,
            total_inflow=float(summary.total_inflow),
            total_outflow=float(summary.total_outflow),
            total_transfers_in=float(summary.total_transfers_in),
            total_transfers_out=float(summary.total_transfers_out),
            total_loan_inflow=float(summary.total_loan_inflow),
            net=float(summary.net),
            count=summary.count,
        )
