"""User repository for data access."""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import case, update
from sqlalchemy import func as sa_func
from sqlalchemy.orm import Session

from app.models.user import User, UserRole


@dataclass
class WalletSummary:
    total_users: int
    users_with_balance: int
    total_wallet_balance: int
    avg_wallet_balance: float
    max_wallet_balance: int


@dataclass
class BalanceChange:
    balance_before: int
    balance_after: int


class UserRepository:
    """Repository for User model."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: UUID) -> User | None:
        """Get a user by ID."""
        return self.db.query(User).filter(User.id == user_id).first()

    def create(
        self,
        email: str,
        name: str | None = None,
        role: UserRole = UserRole.USER,
        wallet_balance: int = 0,
    ) -> User:
        """Create a new user."""
        user = User(email=email, name=name, role=role.value, wallet_balance=wallet_balance)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def wallet_summary(self) -> WalletSummary:
        """Aggregate wallet balances over all users in a single query.

        The average only counts users holding a positive balance.
        """
        balance = sa_func.coalesce(User.wallet_balance, 0)
        is_holder = case((balance > 0, 1), else_=0)
        holder_balance = case((balance > 0, balance), else_=0)

        row = self.db.query(
            sa_func.count(User.id).label("total_users"),
            sa_func.coalesce(sa_func.sum(is_holder), 0).label("users_with_balance"),
            sa_func.coalesce(sa_func.sum(balance), 0).label("total_wallet_balance"),
            sa_func.coalesce(sa_func.max(balance), 0).label("max_wallet_balance"),
            sa_func.coalesce(sa_func.sum(holder_balance), 0).label("holder_balance"),
        ).one()

        holders = int(row.users_with_balance or 0)
        holder_total = int(row.holder_balance or 0)
        return WalletSummary(
            total_users=int(row.total_users or 0),
            users_with_balance=holders,
            total_wallet_balance=int(row.total_wallet_balance or 0),
            avg_wallet_balance=holder_total / holders if holders else 0,
            max_wallet_balance=int(row.max_wallet_balance or 0),
        )

    def apply_wallet_delta(self, user_id: UUID, delta: int) -> BalanceChange | None:
        """Atomically add ``delta`` to a user's wallet, clamping the result at zero.

        Locks the user row, then updates the balance with a single SQL
        expression. Does not commit; the caller owns the transaction.
        Returns None if the user does not exist.
        """
        balance_before = (
            self.db.query(User.wallet_balance)
            .filter(User.id == user_id)
            .with_for_update()
            .scalar()
        )
        if balance_before is None:
            return None

        new_balance = User.wallet_balance + delta
        self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(wallet_balance=case((new_balance < 0, 0), else_=new_balance))
            .execution_options(synchronize_session=False)
        )
        balance_after = (
            self.db.query(User.wallet_balance).filter(User.id == user_id).scalar()
        )
        return BalanceChange(
            balance_before=int(balance_before),
            balance_after=int(balance_after),
        )
