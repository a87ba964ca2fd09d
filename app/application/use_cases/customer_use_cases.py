"""Customer use cases."""

from typing import Optional

from app.application.ports.call_repository import CallRepository
from app.application.ports.customer_repository import CustomerRepository
from app.application.use_cases.base import EventLogger, LoggingUseCase
from app.domain.entities.customer import Customer


class CreateCustomerUseCase(LoggingUseCase):
    """Use case for creating a customer with optional variables."""

    def __init__(
        self, customer_repository: CustomerRepository, logger: Optional[EventLogger] = None
    ) -> None:
        self._customer_repository = customer_repository
        self._logger = logger

    async def execute(
        self,
        name: str,
        phone_number: Optional[str] = None,
        variables: Optional[dict[str, str]] = None,
    ) -> str:
        """
        Create and persist a new customer.

        Args:
            name: Display name (must not be empty)
            phone_number: Optional phone number
            variables: Optional variables to set on the new customer

        Returns:
            Identifier of the new customer

        Raises:
            CustomerValidationError: If name is empty
        """
        customer = Customer.create(name, phone_number)
        for key, value in (variables or {}).items():
            customer.set_variable(key, value)

        await self._customer_repository.save(customer)
        self._log(
            "customer_created",
            customer_id=customer.customer_id,
            variables_count=len(customer.list_variables()),
        )
        return customer.customer_id


class GetCustomerUseCase:
    """Use case for fetching a single customer."""

    def __init__(self, customer_repository: CustomerRepository) -> None:
        self._customer_repository = customer_repository

    async def execute(self, customer_id: str) -> Optional[Customer]:
        return await self._customer_repository.find_by_id(customer_id)


class GetAllCustomersUseCase:
    """Use case for listing customers."""

    def __init__(self, customer_repository: CustomerRepository) -> None:
        self._customer_repository = customer_repository

    async def execute(self) -> list[Customer]:
        return await self._customer_repository.find_all()


class UpdateCustomerUseCase(LoggingUseCase):
    """
    Use case for updating a customer.

    The customer is rebuilt with the same identifier and the supplied
    attributes. Variables are replaced wholesale: keys missing from
    `variables` are dropped, and `variables=None` clears the set. Callers
    that want to keep existing variables must send them again.
    """

    def __init__(
        self, customer_repository: CustomerRepository, logger: Optional[EventLogger] = None
    ) -> None:
        self._customer_repository = customer_repository
        self._logger = logger

    async def execute(
        self,
        customer_id: str,
        name: str,
        phone_number: Optional[str] = None,
        variables: Optional[dict[str, str]] = None,
    ) -> bool:
        """
        Replace a customer's attributes and variables.

        Args:
            customer_id: Customer identifier
            name: New display name (must not be empty)
            phone_number: New phone number
            variables: New full variable set

        Returns:
            True if updated, False if the customer does not exist

        Raises:
            CustomerValidationError: If name is empty
        """
        existing = await self._customer_repository.find_by_id(customer_id)
        if existing is None:
            return False

        updated = Customer(customer_id, name, phone_number)
        for key, value in (variables or {}).items():
            updated.set_variable(key, value)

        await self._customer_repository.save(updated)
        self._log(
            "customer_updated",
            customer_id=customer_id,
            variables_before=len(existing.list_variables()),
            variables_after=len(updated.list_variables()),
        )
        return True


class DeleteCustomerUseCase(LoggingUseCase):
    """
    Use case for deleting a customer together with its calls.

    Calls do not cascade at the storage level, so each call of the customer
    is deleted before the customer itself. Variables are removed by the
    customer repository.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        call_repository: CallRepository,
        logger: Optional[EventLogger] = None,
    ) -> None:
        self._customer_repository = customer_repository
        self._call_repository = call_repository
        self._logger = logger

    async def execute(self, customer_id: str) -> bool:
        """
        Delete a customer, its variables and its calls.

        Args:
            customer_id: Customer identifier

        Returns:
            True if deleted, False if the customer does not exist
        """
        customer = await self._customer_repository.find_by_id(customer_id)
        if customer is None:
            return False

        calls = await self._call_repository.find_all_by_customer_id(customer_id)
        for call in calls:
            await self._call_repository.delete(call.call_id)

        await self._customer_repository.delete(customer_id)
        self._log("customer_deleted", customer_id=customer_id, calls_deleted=len(calls))
        return True
