"""Dependency injection factory functions."""

from typing import Any

from app.adapters.outbound.persistence import (
    InMemoryCallRepository,
    InMemoryCustomerRepository,
    SqlCallRepository,
    SqlCustomerRepository,
)
from app.application.ports.call_repository import CallRepository
from app.application.ports.customer_repository import CustomerRepository
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_event


def _check_repository_settings() -> None:
    """
    Ensure customers and calls live in the same storage.

    Calls reference customers by foreign key, so SQL calls cannot point at
    customers held in memory.

    Raises:
        ValueError: If CUSTOMER_REPOSITORY and CALL_REPOSITORY differ
    """
    if settings.customer_repository != settings.call_repository:
        raise ValueError(
            "CUSTOMER_REPOSITORY and CALL_REPOSITORY must use the same storage "
            f"(got {settings.customer_repository!r} and {settings.call_repository!r})"
        )


def create_customer_repository() -> CustomerRepository:
    """
    Factory function to create customer repository.

    Returns:
        CustomerRepository instance

    Raises:
        ValueError: If the storage settings are inconsistent or incomplete
    """
    _check_repository_settings()
    if settings.customer_repository == "sql":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when CUSTOMER_REPOSITORY=sql")
        return SqlCustomerRepository()
    else:
        return InMemoryCustomerRepository()


def create_call_repository() -> CallRepository:
    """
    Factory function to create call repository.

    Returns:
        CallRepository instance

    Raises:
        ValueError: If the storage settings are inconsistent or incomplete
    """
    _check_repository_settings()
    if settings.call_repository == "sql":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when CALL_REPOSITORY=sql")
        return SqlCallRepository()
    else:
        return InMemoryCallRepository()


def use_case_logger(component: str, event: str, **kwargs: Any) -> None:
    """Logger function handed to use cases."""
    log_event(component, event, **kwargs)
