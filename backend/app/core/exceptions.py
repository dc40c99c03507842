"""Wallet ledger error taxonomy."""


class WalletError(Exception):
    """Base class for wallet ledger errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WalletError):
    """Raised when request input is malformed or out of range."""

    status_code = 400


class NotFoundError(WalletError):
    """Raised when the referenced user does not exist."""

    status_code = 404


class TransactionError(WalletError):
    """Raised when the atomic balance/ledger write fails and is rolled back."""

    status_code = 500
