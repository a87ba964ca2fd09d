"""In-memory call repository adapter."""

import copy
from typing import Optional

from app.application.ports.call_repository import CallRepository
from app.domain.entities.call import Call


class InMemoryCallRepository(CallRepository):
    """In-memory implementation of call repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[str, Call] = {}

    async def save(self, call: Call) -> None:
        self._storage[call.call_id] = copy.deepcopy(call)

    async def find_by_id(self, call_id: str) -> Optional[Call]:
        call = self._storage.get(call_id)
        return copy.deepcopy(call) if call is not None else None

    async def find_all_by_customer_id(self, customer_id: str) -> list[Call]:
        return [
            copy.deepcopy(call)
            for call in self._storage.values()
            if call.customer_id == customer_id
        ]

    async def find_all(self) -> list[Call]:
        return [copy.deepcopy(call) for call in self._storage.values()]

    async def delete(self, call_id: str) -> None:
        self._storage.pop(call_id, None)
