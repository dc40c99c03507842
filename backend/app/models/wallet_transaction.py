"""WalletTransaction model: the append-only wallet ledger."""

from enum import Enum

from sqlalchemy import JSON, BigInteger, Column, DateTime, ForeignKey, String, Text, func

from app.core.database import Base
from app.models.shared import LedgerIdType, UUIDType


class TransactionType(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


class TransactionReason(str, Enum):
    ADMIN_ADJUSTMENT = "ADMIN_ADJUSTMENT"


class TransactionActor(str, Enum):
    ADMIN = "ADMIN"
    SYSTEM = "SYSTEM"
    USER = "USER"


class WalletTransaction(Base):
    """One balance change with its before/after snapshot. Never updated."""

    __tablename__ = "wallet_transactions"

    # Monotonic identity; doubles as the pagination cursor.
    id = Column(LedgerIdType, primary_key=True, autoincrement=True)
    user_id = Column(
        UUIDType, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    type = Column(String(10), nullable=False)
    amount = Column(BigInteger, nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    reason = Column(String(50), nullable=False)
    description = Column(Text, nullable=True)
    balance_before = Column(BigInteger, nullable=False)
    balance_after = Column(BigInteger, nullable=False)
    created_by = Column(String(20), nullable=False, default=TransactionActor.SYSTEM.value)
    created_by_user_id = Column(UUIDType, nullable=True)
    # "metadata" is reserved on declarative classes.
    meta = Column("metadata", JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
