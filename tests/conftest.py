import os

# Must be set before tracker.config is imported
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from sqlalchemy.orm import Session

from tracker.core.constants import ParcelStatus
from tracker.database import SessionLocal, engine, create_all_tables, drop_all_tables
from tracker.models import Parcel
from tracker.repositories import ParcelRepository


@pytest.fixture(autouse=True)
def schema():
    """Fresh parcel table for every test (in-memory SQLite, one shared connection)."""
    create_all_tables(engine)
    yield
    drop_all_tables(engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def repo(db_session: Session) -> ParcelRepository:
    return ParcelRepository(db_session)


@pytest.fixture
def parcel_factory():
    def _create(client: int = 1000, status: str = ParcelStatus.REGISTERED.value,
                address: str = "test", created_at: str = "2024-01-15T10:30:00Z") -> Parcel:
        return Parcel(client=client, status=status, address=address, created_at=created_at)
    return _create
