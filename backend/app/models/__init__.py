from app.models.user import User, UserRole
from app.models.wallet_transaction import (
    TransactionActor,
    TransactionReason,
    TransactionType,
    WalletTransaction,
)

__all__ = [
    "TransactionActor",
    "TransactionReason",
    "TransactionType",
    "User",
    "UserRole",
    "WalletTransaction",
]
