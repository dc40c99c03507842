"""Column types and helpers shared by the wallet models."""

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import BigInteger, Integer, String, TypeDecorator
from sqlalchemy.engine import Dialect

# SQLite only auto-increments INTEGER PRIMARY KEY columns.
LedgerIdType = BigInteger().with_variant(Integer, "sqlite")


class UUIDType(TypeDecorator[uuid.UUID]):
    """UUID stored as its 36-character string form.

    Accepts UUID objects or strings on bind; always returns UUID objects.
    """

    impl = String(36)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return value
        return str(value if isinstance(value, uuid.UUID) else uuid.UUID(str(value)))

    def process_result_value(self, value: Any, dialect: Dialect) -> uuid.UUID | None:
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)
