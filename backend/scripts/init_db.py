"""Create the wallet ledger tables and optionally an admin user.

Run: python -m scripts.init_db [--admin-email EMAIL] [--admin-name NAME]
Prints a bearer token for the admin when one is created.
"""

import argparse
import logging

from app.core.auth import encode_admin_token
from app.core.database import SessionLocal, init_db
from app.core.logging import configure_logging
from app.models.user import User, UserRole
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--admin-email", default=None)
    parser.add_argument("--admin-name", default="Admin")
    args = parser.parse_args()

    configure_logging()
    init_db()
    logger.info("Created tables: users, wallet_transactions")

    if not args.admin_email:
        return

    db = SessionLocal()
    try:
        admin = db.query(User).filter(User.email == args.admin_email).first()
        if admin is None:
            admin = UserRepository(db).create(
                email=args.admin_email, name=args.admin_name, role=UserRole.ADMIN
            )
            logger.info("Created admin user %s", admin.id)
        print(encode_admin_token(admin.id, email=admin.email))  # type: ignore[arg-type]
    finally:
        db.close()


if __name__ == "__main__":
    main()
