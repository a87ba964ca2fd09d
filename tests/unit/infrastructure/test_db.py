"""Unit tests for database engine and session setup."""

import pytest

from app.adapters.outbound.persistence import SqlCallRepository, SqlCustomerRepository
from app.adapters.outbound.persistence.models import Base
from app.domain.entities.call import Call
from app.domain.entities.customer import Customer
from app.infrastructure import db
from app.infrastructure.config.settings import settings


@pytest.fixture
def fresh_db(monkeypatch):
    """Reset the lazily created engine and session factory."""
    monkeypatch.setattr(db, "_engine", None)
    monkeypatch.setattr(db, "_SessionLocal", None)


def test_session_requires_database_url(fresh_db, monkeypatch):
    """Test that opening a session without DATABASE_URL fails."""
    monkeypatch.setattr(settings, "database_url", "")

    with pytest.raises(ValueError, match="DATABASE_URL is required"):
        db.get_db_session()


@pytest.mark.asyncio
async def test_in_memory_sqlite_is_shared_between_sessions(fresh_db, monkeypatch):
    """Test that repositories using separate sessions see the same in-memory database."""
    monkeypatch.setattr(settings, "database_url", "sqlite:///:memory:")
    Base.metadata.create_all(db._get_engine())

    customer = Customer.create("Acme")
    customer.set_variable("plan", "basic")
    await SqlCustomerRepository().save(customer)
    call = Call.create(customer.customer_id)
    await SqlCallRepository().save(call)

    assert await SqlCustomerRepository().find_by_id(customer.customer_id) == customer
    assert await SqlCallRepository().find_by_id(call.call_id) == call
