"""Persistence adapters for customers and calls."""

from app.adapters.outbound.persistence.in_memory_call_repository import InMemoryCallRepository
from app.adapters.outbound.persistence.in_memory_customer_repository import (
    InMemoryCustomerRepository,
)
from app.adapters.outbound.persistence.sql_call_repository import SqlCallRepository
from app.adapters.outbound.persistence.sql_customer_repository import SqlCustomerRepository

__all__ = [
    "InMemoryCallRepository",
    "InMemoryCustomerRepository",
    "SqlCallRepository",
    "SqlCustomerRepository",
]
