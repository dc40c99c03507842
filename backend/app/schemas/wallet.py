"""Wallet schemas."""

from datetime import datetime
from uuid import UUID

from app.schemas.common import CamelModel


class WalletSummaryResponse(CamelModel):
    total_users: int
    users_with_balance: int
    total_wallet_balance: int
    avg_wallet_balance: float
    max_wallet_balance: int


class WalletCreditCreate(CamelModel):
    # Parsed and range-checked by WalletService.
    user_id: str | None = None
    amount: float | str | None = None
    note: str | None = None


class WalletCreditResponse(CamelModel):
    user_id: UUID
    amount: int
    note: str | None = None
    wallet_balance: int
    created_at: datetime
