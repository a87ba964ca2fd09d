"""Call repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.call import Call


class CallRepository(ABC):
    """Port interface for call repository."""

    @abstractmethod
    async def save(self, call: Call) -> None:
        """
        Save a call (upsert by call_id).

        Args:
            call: Call entity to save
        """
        pass

    @abstractmethod
    async def find_by_id(self, call_id: str) -> Optional[Call]:
        """
        Find a call by identifier.

        Args:
            call_id: Call identifier

        Returns:
            Call entity, or None if not found
        """
        pass

    @abstractmethod
    async def find_all_by_customer_id(self, customer_id: str) -> list[Call]:
        """
        List all calls for a customer.

        Args:
            customer_id: Customer identifier

        Returns:
            Calls of the customer (empty list if none)
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Call]:
        """
        List all calls.

        Returns:
            All calls, in no particular order
        """
        pass

    @abstractmethod
    async def delete(self, call_id: str) -> None:
        """
        Delete a call.

        Deleting an unknown call_id is a no-op.

        Args:
            call_id: Call identifier
        """
        pass
