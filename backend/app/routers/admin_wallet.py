"""Admin wallet API endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.auth import AdminPrincipal, get_current_admin
from app.core.database import get_db
from app.repositories.wallet_transaction_repository import LedgerRow
from app.schemas.common import SuccessResponse
from app.schemas.wallet import WalletCreditCreate, WalletCreditResponse, WalletSummaryResponse
from app.schemas.wallet_transaction import (
    WalletTransactionPage,
    WalletTransactionResponse,
    WalletTransactionUser,
)
from app.services.wallet_service import WalletService

router = APIRouter(dependencies=[Depends(get_current_admin)])

_AUTH_RESPONSES: dict[int | str, dict[str, str]] = {
    401: {"description": "Missing, invalid or expired admin token"},
    403: {"description": "Token does not carry the admin role"},
}


def _ledger_item(row: LedgerRow) -> WalletTransactionResponse:
    txn = row.transaction
    user = None
    if row.user_found:
        user = WalletTransactionUser(id=txn.user_id, email=row.user_email, name=row.user_name)
    return WalletTransactionResponse(
        id=txn.id,
        user_id=txn.user_id,
        user=user,
        type=txn.type,
        amount=txn.amount,
        currency=txn.currency,
        reason=txn.reason,
        description=txn.description,
        balance_before=txn.balance_before,
        balance_after=txn.balance_after,
        created_by=txn.created_by,
        created_by_user_id=txn.created_by_user_id,
        metadata=txn.meta,
        created_at=txn.created_at,
    )


@router.get(
    "/summary",
    response_model=SuccessResponse[WalletSummaryResponse],
    summary="Get wallet summary",
    responses=_AUTH_RESPONSES,
)
async def get_wallet_summary(
    db: Session = Depends(get_db),
) -> SuccessResponse[WalletSummaryResponse]:
    """Aggregate wallet balances across all users."""
    summary = WalletService(db).get_summary()
    return SuccessResponse(
        data=WalletSummaryResponse(
            total_users=summary.total_users,
            users_with_balance=summary.users_with_balance,
            total_wallet_balance=summary.total_wallet_balance,
            avg_wallet_balance=summary.avg_wallet_balance,
            max_wallet_balance=summary.max_wallet_balance,
        )
    )


@router.post(
    "/credits",
    response_model=SuccessResponse[WalletCreditResponse],
    summary="Credit a user's wallet",
    responses={
        **_AUTH_RESPONSES,
        400: {"description": "Invalid userId or amount"},
        404: {"description": "User not found"},
    },
)
async def add_wallet_credits(
    data: WalletCreditCreate,
    db: Session = Depends(get_db),
    admin: AdminPrincipal = Depends(get_current_admin),
) -> SuccessResponse[WalletCreditResponse]:
    """Credit a user's wallet and append the matching ledger entry."""
    result = WalletService(db).issue_credit(
        user_id=data.user_id,
        amount=data.amount,
        note=data.note,
        actor_id=admin.user_id,
    )
    return SuccessResponse(
        data=WalletCreditResponse(
            user_id=result.user_id,
            amount=result.amount,
            note=result.note,
            wallet_balance=result.wallet_balance,
            created_at=result.created_at,
        )
    )


@router.get(
    "/transactions",
    response_model=SuccessResponse[WalletTransactionPage],
    summary="List wallet transactions",
    responses={**_AUTH_RESPONSES, 400: {"description": "Invalid userId or cursor"}},
)
async def list_wallet_transactions(
    user_id: str | None = Query(default=None, alias="userId"),
    limit: str | None = Query(default=None),
    cursor: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> SuccessResponse[WalletTransactionPage]:
    """List ledger entries newest first, paginated by cursor."""
    page = WalletService(db).list_transactions(user_id=user_id, limit=limit, cursor=cursor)
    return SuccessResponse(
        data=WalletTransactionPage(
            items=[_ledger_item(row) for row in page.items],
            next_cursor=page.next_cursor,
        )
    )
