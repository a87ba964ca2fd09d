"""Unit tests for customer use cases."""

import pytest

from app.adapters.outbound.persistence import InMemoryCallRepository, InMemoryCustomerRepository
from app.application.use_cases.customer_use_cases import (
    CreateCustomerUseCase,
    DeleteCustomerUseCase,
    GetAllCustomersUseCase,
    GetCustomerUseCase,
    UpdateCustomerUseCase,
)
from app.domain.entities.call import Call
from app.domain.exceptions import CustomerValidationError


class RecordingLogger:
    """Collects (component, event, fields) tuples."""

    def __init__(self):
        self.events = []

    def __call__(self, component, event, **kwargs):
        self.events.append((component, event, kwargs))


@pytest.fixture
def customer_repository():
    return InMemoryCustomerRepository()


@pytest.fixture
def call_repository():
    return InMemoryCallRepository()


@pytest.fixture
def event_logger():
    return RecordingLogger()


@pytest.mark.asyncio
async def test_create_customer_persists_variables(customer_repository, event_logger):
    """Test that created customers are saved with their variables."""
    use_case = CreateCustomerUseCase(customer_repository, logger=event_logger)

    customer_id = await use_case.execute("Acme", "000", {"plan": "premium", "region": "eu"})

    stored = await customer_repository.find_by_id(customer_id)
    assert stored is not None
    assert stored.name == "Acme"
    assert stored.phone_number == "000"
    assert stored.variables_dict() == {"plan": "premium", "region": "eu"}
    assert event_logger.events == [
        ("use_case", "customer_created", {"customer_id": customer_id, "variables_count": 2})
    ]


@pytest.mark.asyncio
async def test_create_customer_returns_distinct_ids(customer_repository):
    """Test that two customers with the same name get different ids."""
    use_case = CreateCustomerUseCase(customer_repository)

    first = await use_case.execute("Acme")
    second = await use_case.execute("Acme")

    assert first != second
    assert len(await customer_repository.find_all()) == 2


@pytest.mark.asyncio
async def test_create_customer_rejects_empty_name(customer_repository):
    """Test that an empty name raises and nothing is stored."""
    use_case = CreateCustomerUseCase(customer_repository)

    with pytest.raises(CustomerValidationError):
        await use_case.execute("")

    assert await customer_repository.find_all() == []


@pytest.mark.asyncio
async def test_get_customer(customer_repository):
    """Test fetching existing and missing customers."""
    customer_id = await CreateCustomerUseCase(customer_repository).execute("Acme")
    use_case = GetCustomerUseCase(customer_repository)

    assert (await use_case.execute(customer_id)).customer_id == customer_id
    assert await use_case.execute("missing") is None


@pytest.mark.asyncio
async def test_get_all_customers_empty(customer_repository):
    """Test listing when no customers exist."""
    assert await GetAllCustomersUseCase(customer_repository).execute() == []


@pytest.mark.asyncio
async def test_update_customer_replaces_variables(customer_repository, event_logger):
    """Test that update replaces attributes and the whole variable set."""
    customer_id = await CreateCustomerUseCase(customer_repository).execute(
        "Acme", "000", {"plan": "basic", "region": "eu"}
    )
    use_case = UpdateCustomerUseCase(customer_repository, logger=event_logger)

    updated = await use_case.execute(customer_id, "Acme Corp", "111", {"plan": "premium"})

    assert updated is True
    stored = await customer_repository.find_by_id(customer_id)
    assert stored.name == "Acme Corp"
    assert stored.phone_number == "111"
    assert stored.variables_dict() == {"plan": "premium"}
    assert event_logger.events[0][1] == "customer_updated"
    assert event_logger.events[0][2]["variables_before"] == 2
    assert event_logger.events[0][2]["variables_after"] == 1


@pytest.mark.asyncio
async def test_update_customer_without_variables_clears_them(customer_repository):
    """Test that omitting variables on update removes the existing ones."""
    customer_id = await CreateCustomerUseCase(customer_repository).execute(
        "Acme", variables={"plan": "basic"}
    )

    await UpdateCustomerUseCase(customer_repository).execute(customer_id, "Acme")

    stored = await customer_repository.find_by_id(customer_id)
    assert stored.list_variables() == []


@pytest.mark.asyncio
async def test_update_missing_customer_returns_false(customer_repository):
    """Test that updating an unknown customer does not create it."""
    updated = await UpdateCustomerUseCase(customer_repository).execute("missing", "Acme")

    assert updated is False
    assert await customer_repository.find_all() == []


@pytest.mark.asyncio
async def test_update_customer_rejects_empty_name(customer_repository):
    """Test that update validates the new name and leaves the stored customer untouched."""
    customer_id = await CreateCustomerUseCase(customer_repository).execute("Acme")

    with pytest.raises(CustomerValidationError):
        await UpdateCustomerUseCase(customer_repository).execute(customer_id, " ")

    assert (await customer_repository.find_by_id(customer_id)).name == "Acme"


@pytest.mark.asyncio
async def test_delete_customer_removes_calls(customer_repository, call_repository, event_logger):
    """Test that deleting a customer also deletes only its calls."""
    create = CreateCustomerUseCase(customer_repository)
    customer_id = await create.execute("Acme", variables={"plan": "basic"})
    other_id = await create.execute("Other")
    await call_repository.save(Call.create(customer_id))
    await call_repository.save(Call.create(customer_id))
    other_call = Call.create(other_id)
    await call_repository.save(other_call)

    use_case = DeleteCustomerUseCase(customer_repository, call_repository, logger=event_logger)
    deleted = await use_case.execute(customer_id)

    assert deleted is True
    assert await customer_repository.find_by_id(customer_id) is None
    assert await call_repository.find_all_by_customer_id(customer_id) == []
    assert [c.call_id for c in await call_repository.find_all()] == [other_call.call_id]
    assert event_logger.events == [
        ("use_case", "customer_deleted", {"customer_id": customer_id, "calls_deleted": 2})
    ]


@pytest.mark.asyncio
async def test_delete_missing_customer_returns_false(customer_repository, call_repository):
    """Test deleting an unknown customer reports False."""
    use_case = DeleteCustomerUseCase(customer_repository, call_repository)

    assert await use_case.execute("missing") is False
