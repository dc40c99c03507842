"""Shared test fixtures for all test modules."""

import contextlib
import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core import database as db_module
from app.core.auth import encode_admin_token
from app.core.database import Base
from app.main import app
from app.models.user import UserRole
from app.repositories.user_repository import UserRepository

# Create an in-memory SQLite engine with StaticPool so all connections
# share the same database state and there are no file-locking issues.
_test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_test_engine)

ADMIN_ID = uuid.UUID("00000000-0000-0000-0000-0000000000ad")


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and truncate all data after.

    Patches the module-level engine and SessionLocal so all application code
    uses the in-memory test database.
    """
    original_engine = db_module.engine
    original_session = db_module.SessionLocal
    db_module.engine = _test_engine
    db_module.SessionLocal = _TestSessionLocal

    Base.metadata.create_all(bind=_test_engine)

    yield
    with _test_engine.connect() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            with contextlib.suppress(OperationalError):
                conn.execute(table.delete())
        conn.commit()

    db_module.engine = original_engine
    db_module.SessionLocal = original_session


@pytest.fixture
def db_session():
    """Create a database session for direct repository testing."""
    gen = db_module.get_db()
    db = next(gen)
    try:
        yield db
    finally:
        for _ in gen:
            pass


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {encode_admin_token(ADMIN_ID, email='admin@test.com')}"}


@pytest.fixture
def make_user(db_session):
    """Factory creating users with a given wallet balance."""
    repo = UserRepository(db_session)

    def _make(wallet_balance: int = 0, name: str | None = "Test User", role=UserRole.USER):
        return repo.create(
            email=f"user_{uuid.uuid4().hex[:12]}@test.com",
            name=name,
            role=role,
            wallet_balance=wallet_balance,
        )

    return _make
