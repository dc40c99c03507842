from app.repositories.user_repository import UserRepository
from app.repositories.wallet_transaction_repository import WalletTransactionRepository

__all__ = [
    "UserRepository",
    "WalletTransactionRepository",
]
