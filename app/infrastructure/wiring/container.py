"""Dependency injection container."""

from typing import Optional

from app.application.ports.call_repository import CallRepository
from app.application.ports.customer_repository import CustomerRepository
from app.application.use_cases.call_use_cases import (
    CancelCallUseCase,
    CompleteCallUseCase,
    FailCallUseCase,
    GetAllCallsUseCase,
    GetCallsByCustomerUseCase,
    GetCallUseCase,
    RequestCallUseCase,
    StartCallUseCase,
)
from app.application.use_cases.customer_use_cases import (
    CreateCustomerUseCase,
    DeleteCustomerUseCase,
    GetAllCustomersUseCase,
    GetCustomerUseCase,
    UpdateCustomerUseCase,
)
from app.infrastructure.wiring.dependencies import (
    create_call_repository,
    create_customer_repository,
    use_case_logger,
)


class Container:
    """Dependency injection container."""

    def __init__(
        self,
        customer_repository: Optional[CustomerRepository] = None,
        call_repository: Optional[CallRepository] = None,
    ) -> None:
        """
        Initialize container with dependencies.

        Args:
            customer_repository: Customer repository (defaults to the configured one)
            call_repository: Call repository (defaults to the configured one)
        """
        self.customer_repository = customer_repository or create_customer_repository()
        self.call_repository = call_repository or create_call_repository()
        customers = self.customer_repository
        calls = self.call_repository

        # Customer use cases
        self.create_customer = CreateCustomerUseCase(customers, logger=use_case_logger)
        self.get_customer = GetCustomerUseCase(customers)
        self.get_all_customers = GetAllCustomersUseCase(customers)
        self.update_customer = UpdateCustomerUseCase(customers, logger=use_case_logger)
        self.delete_customer = DeleteCustomerUseCase(customers, calls, logger=use_case_logger)

        # Call use cases
        self.request_call = RequestCallUseCase(calls, customers, logger=use_case_logger)
        self.start_call = StartCallUseCase(calls, logger=use_case_logger)
        self.complete_call = CompleteCallUseCase(calls, logger=use_case_logger)
        self.cancel_call = CancelCallUseCase(calls, logger=use_case_logger)
        self.fail_call = FailCallUseCase(calls, logger=use_case_logger)
        self.get_call = GetCallUseCase(calls)
        self.get_calls_by_customer = GetCallsByCustomerUseCase(calls)
        self.get_all_calls = GetAllCallsUseCase(calls)


_container: Optional[Container] = None


def get_container() -> Container:
    """
    Get the global container, creating it on first use.

    Routes depend on this function, so tests can swap the container through
    FastAPI's dependency_overrides.
    """
    global _container
    if _container is None:
        _container = Container()
    return _container
