"""In-memory customer repository adapter."""

import copy
from typing import Optional

from app.application.ports.customer_repository import CustomerRepository
from app.domain.entities.customer import Customer


class InMemoryCustomerRepository(CustomerRepository):
    """
    In-memory implementation of customer repository.

    Entities are copied on the way in and out, so callers never hold a
    reference to stored state. A customer's variables live inside the stored
    entity and disappear with it.
    """

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[str, Customer] = {}

    async def save(self, customer: Customer) -> None:
        self._storage[customer.customer_id] = copy.deepcopy(customer)

    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        customer = self._storage.get(customer_id)
        return copy.deepcopy(customer) if customer is not None else None

    async def find_all(self) -> list[Customer]:
        return [copy.deepcopy(customer) for customer in self._storage.values()]

    async def delete(self, customer_id: str) -> None:
        self._storage.pop(customer_id, None)
