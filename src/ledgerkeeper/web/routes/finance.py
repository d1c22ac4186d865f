"""Account balance API routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from ledgerkeeper.domain.errors import AccountListingError, NotFoundError, TransactionsUnavailableError
from ledgerkeeper.domain.reconciliation import ReconciliationService
from ledgerkeeper.web.dependencies import enforce_rate_limit, get_reconciliation_service
from ledgerkeeper.web.schemas import (
    AccountBalanceData,
    AccountBalanceResponse,
    AccountResultModel,
    RecalculateAccountRequest,
    RecalculateAccountResponse,
    RecalculateAllResponse,
    TransactionSummaryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/finance",
    tags=["Finance"],
    dependencies=[Depends(enforce_rate_limit)],
)


@router.api_route(
    "/recalculate-all-account-balances",
    methods=["GET", "POST"],
    response_model=RecalculateAllResponse,
    response_model_exclude_none=True,
)
def recalculate_all_account_balances(
    service: ReconciliationService = Depends(get_reconciliation_service),
):
    """Recalculate every account's balance from its transactions."""
    try:
        report = service.recalculate_all()
    except AccountListingError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": str(e)},
        )

    return RecalculateAllResponse(
        message=report.message,
        results=[AccountResultModel.from_result(result) for result in report.results],
    )


@router.post("/recalculate-account-balance", response_model=RecalculateAccountResponse)
def recalculate_account_balance(
    payload: Optional[RecalculateAccountRequest] = None,
    service: ReconciliationService = Depends(get_reconciliation_service),
):
    """Recalculate one account's balance."""
    if payload is None or payload.account_id is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Account ID is required"},
        )

    try:
        result = service.recalculate_account(payload.account_id)
    except NotFoundError as e:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "message": str(e)},
        )

    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": result.error},
        )

    return RecalculateAccountResponse(
        balance=float(result.new_balance),
        message=f"Account balance recalculated successfully: {result.new_balance}",
    )


@router.get("/account-balance", response_model=AccountBalanceResponse)
def get_account_balance(
    account_id: int = Query(...),
    service: ReconciliationService = Depends(get_reconciliation_service),
):
    """Current balance of an account.

    An account that was never reconciled has no stored balance; its balance
    is then computed from the ledger without being saved.
    """
    account = service.db.get_account(account_id)
    if account is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": f"Account {account_id} not found"},
        )

    balance = account.balance
    if balance is None:
        logger.info("Account %s has no stored balance, calculating from transactions", account_id)
        try:
            balance = service.preview_balance(account)
        except TransactionsUnavailableError as e:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Failed to calculate account balance", "details": str(e)},
            )

    return AccountBalanceResponse(
        data=AccountBalanceData(id=account.id, name=account.name, balance=float(balance))
    )


@router.get("/account-summary", response_model=TransactionSummaryResponse)
def get_account_summary(
    account_id: int = Query(...),
    service: ReconciliationService = Depends(get_reconciliation_service),
):
    """Inflow, outflow and transfer totals of an account's ledger."""
    try:
        summary = service.summarize(account_id)
    except NotFoundError as e:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(e)})
    except TransactionsUnavailableError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to summarize transactions", "details": str(e)},
        )
    return TransactionSummaryResponse.from_summary(account_id, summary)
