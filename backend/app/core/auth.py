from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from fastapi import HTTPException, Request

from app.core.config import settings

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class AdminPrincipal:
    """The authenticated admin behind a request."""

    user_id: UUID
    email: str | None = None


def encode_admin_token(
    user_id: UUID,
    role: str = ADMIN_ROLE,
    email: str | None = None,
    expires_in: timedelta = timedelta(hours=12),
) -> str:
    """Sign a bearer token for the admin API."""
    payload = {
        "sub": str(user_id),
        "role": role,
        "email": email,
        "exp": datetime.now(UTC) + expires_in,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_admin_token(token: str) -> AdminPrincipal:
    """Decode an admin bearer token.

    Raises jwt.ExpiredSignatureError or jwt.InvalidTokenError on a bad token and
    PermissionError when the token does not carry the admin role.
    """
    payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    try:
        user_id = UUID(str(payload["sub"]))
    except (KeyError, ValueError):
        raise jwt.InvalidTokenError("Invalid token subject") from None
    if payload.get("role") != ADMIN_ROLE:
        raise PermissionError("Admin access required")
    return AdminPrincipal(user_id=user_id, email=payload.get("email"))


def get_current_admin(request: Request) -> AdminPrincipal:
    """Resolve the admin principal from the Authorization header."""
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise HTTPException(status_code=401, detail="Authorization header is required")

    if not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = auth_header[7:]
    if not token:
        raise HTTPException(status_code=401, detail="Token is required")

    try:
        return decode_admin_token(token)
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token has expired") from None
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token") from None
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e)) from None
