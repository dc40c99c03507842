"""WalletTransaction schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from app.models.wallet_transaction import TransactionActor, TransactionReason, TransactionType
from app.schemas.common import CamelModel


class WalletTransactionCreate(BaseModel):
    user_id: UUID
    type: TransactionType
    amount: int = Field(gt=0)
    currency: str = Field(default="INR", min_length=3, max_length=3)
    reason: str = Field(
        default=TransactionReason.ADMIN_ADJUSTMENT.value, min_length=1, max_length=50
    )
    description: str | None = None
    balance_before: int = Field(ge=0)
    balance_after: int = Field(ge=0)
    created_by: TransactionActor = TransactionActor.SYSTEM
    created_by_user_id: UUID | None = None
    metadata: dict[str, Any] | None = None


class WalletTransactionUser(CamelModel):
    id: UUID
    email: str | None = None
    name: str | None = None


class WalletTransactionResponse(CamelModel):
    id: int
    user_id: UUID
    user: WalletTransactionUser | None = None
    type: str
    amount: int
    currency: str
    reason: str
    description: str | None = None
    balance_before: int
    balance_after: int
    created_by: str
    created_by_user_id: UUID | None = None
    metadata: dict[str, Any] | None = None
    created_at: datetime | None = None


class WalletTransactionPage(CamelModel):
    items: list[WalletTransactionResponse]
    next_cursor: str | None = None
