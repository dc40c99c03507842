from app.schemas.common import ErrorResponse, SuccessResponse
from app.schemas.wallet import WalletCreditCreate, WalletCreditResponse, WalletSummaryResponse
from app.schemas.wallet_transaction import (
    WalletTransactionCreate,
    WalletTransactionPage,
    WalletTransactionResponse,
    WalletTransactionUser,
)

__all__ = [
    "ErrorResponse",
    "SuccessResponse",
    "WalletCreditCreate",
    "WalletCreditResponse",
    "WalletSummaryResponse",
    "WalletTransactionCreate",
    "WalletTransactionPage",
    "WalletTransactionResponse",
    "WalletTransactionUser",
]
