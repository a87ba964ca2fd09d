"""Unit tests for SQL customer repository using SQLite in-memory."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.adapters.outbound.persistence.models import Base, CustomerVariableModel
from app.adapters.outbound.persistence.sql_customer_repository import SqlCustomerRepository
from app.domain.entities.customer import Customer, CustomerVariable


@pytest.fixture
def sqlite_engine():
    """Create SQLite in-memory engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session_factory(sqlite_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)


@pytest.fixture
def repository(session_factory, monkeypatch):
    """Create SQL repository with SQLite in-memory database for testing."""

    def get_test_db_session():
        return session_factory()

    monkeypatch.setattr(
        "app.adapters.outbound.persistence.sql_customer_repository.get_db_session",
        get_test_db_session,
    )

    return SqlCustomerRepository()


def _variable_rows(session_factory, customer_id):
    session = session_factory()
    try:
        return (
            session.query(CustomerVariableModel)
            .filter(CustomerVariableModel.customer_id == customer_id)
            .all()
        )
    finally:
        session.close()


@pytest.mark.asyncio
async def test_save_and_find_round_trip(repository):
    """Test that a saved customer is read back with its variables."""
    customer = Customer.create("Acme", "000")
    customer.set_variable("plan", "premium")
    customer.set_variable("region", "eu")

    await repository.save(customer)
    loaded = await repository.find_by_id(customer.customer_id)

    assert loaded == customer
    assert loaded.get_variable("plan").id == customer.get_variable("plan").id


@pytest.mark.asyncio
async def test_find_missing_customer(repository):
    """Test that an unknown id returns None."""
    assert await repository.find_by_id("missing") is None


@pytest.mark.asyncio
async def test_save_upserts_customer_and_replaces_variables(repository, session_factory):
    """Test that re-saving updates the row and leaves only the current variables."""
    customer = Customer.create("Acme", "000")
    customer.set_variable("plan", "basic")
    customer.set_variable("region", "eu")
    await repository.save(customer)

    updated = Customer(customer.customer_id, "Acme Corp", None)
    updated.set_variable("plan", "premium")
    await repository.save(updated)

    loaded = await repository.find_by_id(customer.customer_id)
    assert loaded.name == "Acme Corp"
    assert loaded.phone_number is None
    assert loaded.variables_dict() == {"plan": "premium"}
    assert len(await repository.find_all()) == 1

    rows = _variable_rows(session_factory, customer.customer_id)
    assert [(row.key, row.value) for row in rows] == [("plan", "premium")]


@pytest.mark.asyncio
async def test_save_same_entity_twice_is_idempotent(repository):
    """Test that saving an unchanged customer again does not duplicate variables."""
    customer = Customer.create("Acme")
    customer.set_variable("plan", "basic")

    await repository.save(customer)
    await repository.save(customer)

    loaded = await repository.find_by_id(customer.customer_id)
    assert loaded.variables_dict() == {"plan": "basic"}


@pytest.mark.asyncio
async def test_find_all_groups_variables_by_customer(repository):
    """Test listing returns each customer with only its own variables."""
    first = Customer.create("Acme")
    first.set_variable("plan", "basic")
    second = Customer.create("Globex")
    second.set_variable("plan", "premium")
    second.set_variable("tier", "gold")
    third = Customer.create("Initech")

    for customer in (first, second, third):
        await repository.save(customer)

    loaded = {c.customer_id: c for c in await repository.find_all()}

    assert loaded[first.customer_id].variables_dict() == {"plan": "basic"}
    assert loaded[second.customer_id].variables_dict() == {"plan": "premium", "tier": "gold"}
    assert loaded[third.customer_id].list_variables() == []


@pytest.mark.asyncio
async def test_delete_removes_customer_and_variables(repository, session_factory):
    """Test that delete removes the customer row and its variable rows."""
    customer = Customer.create("Acme")
    customer.set_variable("plan", "basic")
    await repository.save(customer)

    await repository.delete(customer.customer_id)

    assert await repository.find_by_id(customer.customer_id) is None
    assert _variable_rows(session_factory, customer.customer_id) == []


@pytest.mark.asyncio
async def test_delete_missing_customer_is_noop(repository):
    """Test that deleting an unknown id does not raise."""
    await repository.delete("missing")


@pytest.mark.asyncio
async def test_database_errors_propagate(monkeypatch):
    """Test that storage failures are raised instead of reported as not found."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    monkeypatch.setattr(
        "app.adapters.outbound.persistence.sql_customer_repository.get_db_session",
        lambda: SessionLocal(),
    )
    repository = SqlCustomerRepository()

    with pytest.raises(SQLAlchemyError):
        await repository.find_by_id("any")
    with pytest.raises(SQLAlchemyError):
        await repository.save(Customer.create("Acme"))


@pytest.mark.asyncio
async def test_failed_save_keeps_previous_customer_and_variables(repository):
    """Test that a save failing on the variable rows leaves the stored customer untouched."""
    first = Customer.create("A")
    taken = first.set_variable("plan", "basic")
    await repository.save(first)

    second = Customer.create("B")
    second.set_variable("x", "1")
    await repository.save(second)

    # Reuses the id of a variable row owned by the first customer
    conflicting = Customer(
        second.customer_id,
        "B2",
        None,
        [CustomerVariable(taken.id, second.customer_id, "y", "2")],
    )

    with pytest.raises(SQLAlchemyError):
        await repository.save(conflicting)

    loaded = await repository.find_by_id(second.customer_id)
    assert loaded.name == "B"
    assert loaded.variables_dict() == {"x": "1"}
    assert (await repository.find_by_id(first.customer_id)).variables_dict() == {"plan": "basic"}
