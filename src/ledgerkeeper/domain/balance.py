"""Balance calculation over an account's ledger."""

from decimal import Decimal
from typing import Iterable, Union

from ledgerkeeper.domain.entities import Transaction, TransactionSummary, TransactionType

Number = Union[Decimal, int, float, str]

# Text the loan workflow puts in the description of loan proceeds
LOAN_MARKER = "Loan from"


def to_decimal(value: Number | None) -> Decimal:
    """Convert a monetary value to Decimal without binary float drift.

    Floats are routed through ``str`` so 0.1 becomes Decimal("0.1").
    None is treated as zero.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def compute_balance(opening_balance: Number, transactions: Iterable[Transaction]) -> Decimal:
    """Compute an account balance from its opening balance and ledger.

    Amounts are summed exactly as stored; the sign already encodes the
    direction of each transaction.

    Args:
        opening_balance: Starting balance of the account
        transactions: Posted transactions of the account

    Returns:
        opening_balance plus the sum of all transaction amounts
    """
    balance = to_decimal(opening_balance)
    for txn in transactions:
        balance += to_decimal(txn.amount)
    return balance


def signed_amount(amount: Number, transaction_type: TransactionType) -> Decimal:
    """Return the stored amount for a transaction of the given type.

    Inflows are stored positive and outflows negative, whatever sign the
    caller supplied.
    """
    magnitude = abs(to_decimal(amount))
    return magnitude if transaction_type.is_inflow else -magnitude


def is_loan_inflow(transaction: Transaction) -> bool:
    """Income recorded by the loan workflow, described as "Loan from <lender>"."""
    return (
        transaction.transaction_type is TransactionType.INCOME
        and LOAN_MARKER in (transaction.description or "")
    )


def summarize_transactions(transactions: Iterable[Transaction]) -> TransactionSummary:
    """Group ledger totals by transaction type.

    Loan income counts towards ``total_inflow`` and is also reported on its
    own as ``total_loan_inflow``.
    """
    totals = {kind: Decimal("0") for kind in TransactionType}
    loan_inflow = Decimal("0")
    count = 0
    for txn in transactions:
        magnitude = abs(to_decimal(txn.amount))
        totals[txn.transaction_type] += magnitude
        if is_loan_inflow(txn):
            loan_inflow += magnitude
        count += 1

    return TransactionSummary(
        total_inflow=totals[TransactionType.INCOME],
        total_outflow=totals[TransactionType.EXPENDITURE],
        total_transfers_in=totals[TransactionType.TRANSFER_IN],
        total_transfers_out=totals[TransactionType.TRANSFER_OUT],
        total_loan_inflow=loan_inflow,
        count=count,
    )
