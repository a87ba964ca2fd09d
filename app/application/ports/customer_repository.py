"""Customer repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.customer import Customer


class CustomerRepository(ABC):
    """Port interface for customer repository."""

    @abstractmethod
    async def save(self, customer: Customer) -> None:
        """
        Save a customer (upsert by customer_id).

        The customer's variable set replaces the stored one wholesale, in the
        same transaction as the customer row.

        Args:
            customer: Customer entity to save
        """
        pass

    @abstractmethod
    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Find a customer by identifier.

        Args:
            customer_id: Customer identifier

        Returns:
            Customer entity with its variables, or None if not found
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Customer]:
        """
        List all customers.

        Returns:
            All customers with their variables, in no particular order
        """
        pass

    @abstractmethod
    async def delete(self, customer_id: str) -> None:
        """
        Delete a customer and its variables.

        Deleting an unknown customer_id is a no-op.

        Args:
            customer_id: Customer identifier
        """
        pass
