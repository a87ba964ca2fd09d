"""Customer entity and its keyed variables."""

from dataclasses import dataclass
from typing import Iterable, Optional
from uuid import uuid4

from app.domain.exceptions import CustomerValidationError


@dataclass(frozen=True)
class CustomerVariable:
    """Customer-scoped key/value pair used to parameterize calls."""

    id: str
    customer_id: str
    key: str
    value: str

    @classmethod
    def create(cls, customer_id: str, key: str, value: str) -> "CustomerVariable":
        """Create a variable with a fresh identifier."""
        return cls(id=str(uuid4()), customer_id=customer_id, key=key, value=value)


class Customer:
    """
    Customer entity.

    Holds at most one variable per key. Variables are only reachable through
    get_variable/set_variable/remove_variable/list_variables so that two
    Customer instances never share the same backing mapping.
    """

    def __init__(
        self,
        customer_id: str,
        name: str,
        phone_number: Optional[str] = None,
        variables: Optional[Iterable[CustomerVariable]] = None,
    ) -> None:
        """
        Initialize customer.

        Args:
            customer_id: Customer identifier
            name: Display name (required, non-empty)
            phone_number: Optional phone number
            variables: Initial variables; a later entry wins on duplicate keys

        Raises:
            CustomerValidationError: If name is empty
        """
        if not name or not name.strip():
            raise CustomerValidationError("Customer name is required")

        self._customer_id = customer_id
        self._name = name
        self._phone_number = phone_number
        self._variables: dict[str, CustomerVariable] = {}
        for variable in variables or []:
            self._variables[variable.key] = variable

    @classmethod
    def create(cls, name: str, phone_number: Optional[str] = None) -> "Customer":
        """Create a new customer with a fresh identifier."""
        return cls(str(uuid4()), name, phone_number)

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def phone_number(self) -> Optional[str]:
        return self._phone_number

    def get_variable(self, key: str) -> Optional[CustomerVariable]:
        """
        Get a variable by exact key.

        Args:
            key: Variable key (case-sensitive)

        Returns:
            The variable, or None if not set
        """
        return self._variables.get(key)

    def set_variable(self, key: str, value: str) -> CustomerVariable:
        """
        Create or overwrite a variable.

        Overwriting produces a new variable identity for the key.

        Args:
            key: Variable key
            value: Variable value

        Returns:
            The stored variable
        """
        variable = CustomerVariable.create(self._customer_id, key, value)
        self._variables[key] = variable
        return variable

    def remove_variable(self, key: str) -> bool:
        """
        Remove a variable.

        Returns:
            True if a variable existed for the key
        """
        return self._variables.pop(key, None) is not None

    def list_variables(self) -> list[CustomerVariable]:
        """Return a snapshot of all current variables."""
        return list(self._variables.values())

    def variables_dict(self) -> dict[str, str]:
        """Return a snapshot of variables as a key -> value mapping."""
        return {key: variable.value for key, variable in self._variables.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return (
            self._customer_id == other._customer_id
            and self._name == other._name
            and self._phone_number == other._phone_number
            and self._variables == other._variables
        )

    def __repr__(self) -> str:
        return (
            f"Customer(customer_id={self._customer_id!r}, name={self._name!r}, "
            f"phone_number={self._phone_number!r}, variables={self.variables_dict()!r})"
        )
