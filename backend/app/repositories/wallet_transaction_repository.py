"""WalletTransaction repository for data access."""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.user import User
from app.models.wallet_transaction import WalletTransaction
from app.schemas.wallet_transaction import WalletTransactionCreate


@dataclass
class LedgerRow:
    """A ledger entry joined with its owner's minimal profile."""

    transaction: WalletTransaction
    user_email: str | None
    user_name: str | None
    user_found: bool


class WalletTransactionRepository:
    """Repository for WalletTransaction model."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, data: WalletTransactionCreate) -> WalletTransaction:
        """Stage a new ledger entry. Flushes but does not commit."""
        txn = WalletTransaction(
            user_id=data.user_id,
            type=data.type.value,
            amount=data.amount,
            currency=data.currency,
            reason=data.reason,
            description=data.description,
            balance_before=data.balance_before,
            balance_after=data.balance_after,
            created_by=data.created_by.value,
            created_by_user_id=data.created_by_user_id,
            meta=data.metadata,
        )
        self.db.add(txn)
        self.db.flush()
        return txn

    def get_by_user_id(self, user_id: UUID) -> list[WalletTransaction]:
        """Get a user's ledger entries, oldest first."""
        return (
            self.db.query(WalletTransaction)
            .filter(WalletTransaction.user_id == user_id)
            .order_by(WalletTransaction.id.asc())
            .all()
        )

    def count(self, user_id: UUID | None = None) -> int:
        """Count ledger entries, optionally for one user."""
        query = self.db.query(func.count(WalletTransaction.id))
        if user_id is not None:
            query = query.filter(WalletTransaction.user_id == user_id)
        return query.scalar() or 0

    def get_page(
        self,
        limit: int,
        user_id: UUID | None = None,
        before_id: int | None = None,
    ) -> list[LedgerRow]:
        """Get one keyset page of ledger entries, newest first.

        ``before_id`` is an exclusive upper bound on the entry id.
        """
        query = self.db.query(
            WalletTransaction,
            User.email.label("user_email"),
            User.name.label("user_name"),
            User.id.label("owner_id"),
        ).outerjoin(User, User.id == WalletTransaction.user_id)

        if user_id is not None:
            query = query.filter(WalletTransaction.user_id == user_id)
        if before_id is not None:
            query = query.filter(WalletTransaction.id < before_id)

        rows = query.order_by(WalletTransaction.id.desc()).limit(limit).all()
        return [
            LedgerRow(
                transaction=row[0],
                user_email=row.user_email,
                user_name=row.user_name,
                user_found=row.owner_id is not None,
            )
            for row in rows
        ]
