"""Wallet service: admin credits, balance statistics and the ledger listing."""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import NotFoundError, TransactionError, ValidationError
from app.models.shared import utc_now
from app.models.wallet_transaction import TransactionActor, TransactionReason, TransactionType
from app.repositories.user_repository import UserRepository, WalletSummary
from app.repositories.wallet_transaction_repository import (
    LedgerRow,
    WalletTransactionRepository,
)
from app.schemas.wallet_transaction import WalletTransactionCreate

logger = logging.getLogger(__name__)

DEFAULT_CREDIT_DESCRIPTION = "Admin wallet credit"
MAX_LEDGER_ID = 2**63 - 1


def _clean(value: Any) -> str:
    return "" if value is None else str(value).strip()


def to_finite_number(value: Any) -> float | None:
    """Coerce a number or numeric string to a finite float, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def round_half_up(number: float) -> int:
    return math.floor(number + 0.5)


def parse_user_id(value: Any) -> UUID:
    try:
        return UUID(_clean(value))
    except ValueError:
        raise ValidationError("Invalid userId") from None


def parse_optional_user_id(value: Any) -> UUID | None:
    if not _clean(value):
        return None
    return parse_user_id(value)


def parse_amount(value: Any) -> int:
    """Parse a credit amount: finite, rounded, positive and within the credit cap."""
    number = to_finite_number(value)
    amount = None if number is None else round_half_up(number)
    if amount is None or amount <= 0:
        raise ValidationError("amount must be a positive number")
    if amount > settings.WALLET_MAX_CREDIT_AMOUNT:
        raise ValidationError("amount is too large")
    return amount


def normalize_note(value: Any) -> str | None:
    return _clean(value)[: settings.WALLET_NOTE_MAX_LENGTH] or None


def parse_limit(value: Any) -> int:
    number = to_finite_number(value)
    if number is None:
        return settings.WALLET_DEFAULT_PAGE_SIZE
    return min(settings.WALLET_MAX_PAGE_SIZE, max(1, round_half_up(number)))


def parse_cursor(value: Any) -> int | None:
    raw = _clean(value)
    if not raw:
        return None
    if (
        not (raw.isascii() and raw.isdigit())
        or len(raw) > len(str(MAX_LEDGER_ID))
        or not 0 < int(raw) <= MAX_LEDGER_ID
    ):
        raise ValidationError("Invalid cursor")
    return int(raw)


@dataclass
class CreditResult:
    """Outcome of a committed wallet credit."""

    user_id: UUID
    amount: int
    note: str | None
    wallet_balance: int
    created_at: datetime
    transaction_id: int


@dataclass
class TransactionPage:
    items: list[LedgerRow]
    next_cursor: str | None


class WalletService:
    """Service for wallet ledger business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)
        self.txn_repo = WalletTransactionRepository(db)

    def get_summary(self) -> WalletSummary:
        """Aggregate wallet statistics across all users."""
        return self.user_repo.wallet_summary()

    def issue_credit(
        self,
        user_id: Any,
        amount: Any,
        note: Any = None,
        actor_id: UUID | None = None,
    ) -> CreditResult:
        """Credit a user's wallet and record the ledger entry in one transaction.

        All input is validated before anything is written. The balance is
        incremented in the database rather than read-modified-written here, so
        concurrent credits for the same user serialize on the row lock and
        their ledger rows chain before/after values.

        Raises:
            ValidationError: malformed user id, or amount out of range.
            NotFoundError: no user with that id; nothing is written.
            TransactionError: the write failed and was rolled back.
        """
        target_id = parse_user_id(user_id)
        credit = parse_amount(amount)
        clean_note = normalize_note(note)

        try:
            change = self.user_repo.apply_wallet_delta(target_id, credit)
            if change is None:
                self.db.rollback()
                logger.warning("Wallet credit rejected: user %s not found", target_id)
                raise NotFoundError("User not found")

            txn = self.txn_repo.create(
                WalletTransactionCreate(
                    user_id=target_id,
                    type=TransactionType.CREDIT,
                    amount=credit,
                    currency=settings.WALLET_CURRENCY,
                    reason=TransactionReason.ADMIN_ADJUSTMENT.value,
                    description=clean_note or DEFAULT_CREDIT_DESCRIPTION,
                    balance_before=change.balance_before,
                    balance_after=change.balance_after,
                    created_by=TransactionActor.ADMIN,
                    created_by_user_id=actor_id,
                )
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Wallet credit for user %s rolled back", target_id)
            raise TransactionError("Wallet credit failed") from e

        logger.info(
            "Credited %d to wallet of user %s (balance %d -> %d) by admin %s",
            credit,
            target_id,
            change.balance_before,
            change.balance_after,
            actor_id,
        )
        return CreditResult(
            user_id=target_id,
            amount=credit,
            note=clean_note,
            wallet_balance=change.balance_after,
            created_at=txn.created_at or utc_now(),
            transaction_id=txn.id,  # type: ignore[arg-type]
        )

    def list_transactions(
        self,
        user_id: Any = None,
        limit: Any = None,
        cursor: Any = None,
    ) -> TransactionPage:
        """Get one page of the ledger, newest first.

        ``cursor`` is the id of the last entry of the previous page; the next
        page starts strictly below it.
        """
        owner_id = parse_optional_user_id(user_id)
        page_size = parse_limit(limit)
        before_id = parse_cursor(cursor)

        rows = self.txn_repo.get_page(page_size, user_id=owner_id, before_id=before_id)
        next_cursor = str(rows[-1].transaction.id) if rows else None
        return TransactionPage(items=rows, next_cursor=next_cursor)
