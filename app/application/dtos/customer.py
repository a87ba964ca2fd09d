"""Customer DTOs."""

from typing import Optional

from pydantic import ConfigDict, Field

from app.application.dtos.base import DTO, MessageResponse


class CustomerVariableDTO(DTO):
    """Customer variable DTO."""

    key: str
    value: str


class CustomerInput(DTO):
    """Customer create/update request DTO."""

    name: str = Field(min_length=1)
    phone_number: Optional[str] = None
    variables: Optional[list[CustomerVariableDTO]] = None

    def variables_as_dict(self) -> dict[str, str]:
        """
        Collapse the variable list into a key -> value mapping.

        Returns:
            Mapping where a later entry wins on duplicate keys
        """
        return {variable.key: variable.value for variable in self.variables or []}

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Acme",
                "phone_number": "+81-3-0000-0000",
                "variables": [{"key": "plan", "value": "premium"}],
            }
        }
    )


class CustomerDTO(DTO):
    """Customer response DTO."""

    customer_id: str
    name: str
    phone_number: Optional[str] = None
    variables: list[CustomerVariableDTO]


class CreateCustomerResponse(MessageResponse):
    """Customer creation response DTO."""

    customer_id: str


class CustomerResponse(MessageResponse):
    """Single customer response DTO."""

    customer: CustomerDTO


class CustomerListResponse(MessageResponse):
    """Customer listing response DTO."""

    customers: list[CustomerDTO]
