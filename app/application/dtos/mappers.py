"""Mappers from domain entities to DTOs."""

from app.application.dtos.call import CallDTO
from app.application.dtos.customer import CustomerDTO, CustomerVariableDTO
from app.domain.entities.call import Call
from app.domain.entities.customer import Customer, CustomerVariable


def to_customer_variable_dto(variable: CustomerVariable) -> CustomerVariableDTO:
    return CustomerVariableDTO(key=variable.key, value=variable.value)


def to_customer_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        customer_id=customer.customer_id,
        name=customer.name,
        phone_number=customer.phone_number,
        variables=[to_customer_variable_dto(v) for v in customer.list_variables()],
    )


def to_call_dto(call: Call) -> CallDTO:
    return CallDTO(
        call_id=call.call_id,
        customer_id=call.customer_id,
        status=call.status.value,
        requested_at=call.requested_at,
        started_at=call.started_at,
        ended_at=call.ended_at,
        duration_sec=call.duration_sec,
    )


def to_customer_dto_list(customers: list[Customer]) -> list[CustomerDTO]:
    return [to_customer_dto(customer) for customer in customers]


def to_call_dto_list(calls: list[Call]) -> list[CallDTO]:
    return [to_call_dto(call) for call in calls]
