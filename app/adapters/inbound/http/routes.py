"""HTTP routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.dtos.base import MessageResponse
from app.application.dtos.call import (
    CallListResponse,
    CallResponse,
    RequestCallInput,
    RequestCallResponse,
)
from app.application.dtos.customer import (
    CreateCustomerResponse,
    CustomerInput,
    CustomerListResponse,
    CustomerResponse,
)
from app.application.dtos.mappers import (
    to_call_dto,
    to_call_dto_list,
    to_customer_dto,
    to_customer_dto_list,
)
from app.application.use_cases.call_use_cases import CallTransitionResult
from app.infrastructure.wiring.container import Container, get_container

router = APIRouter()

CUSTOMER_NOT_FOUND = "Customer not found"
CALL_NOT_FOUND = "Call not found"


def _raise_for_transition(result: CallTransitionResult, operation: str) -> None:
    """
    Map a transition use case result to an HTTP error.

    Raises:
        HTTPException: 404 if the call does not exist, 400 if the transition is invalid
    """
    if result == CallTransitionResult.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CALL_NOT_FOUND)
    if result == CallTransitionResult.INVALID_TRANSITION:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to {operation} call",
        )


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


# ===== Customers =====


@router.post("/customers", status_code=status.HTTP_200_OK, response_model=CreateCustomerResponse)
async def create_customer(
    request: CustomerInput, container: Container = Depends(get_container)
) -> CreateCustomerResponse:
    """
    Create a customer.

    Args:
        request: Name, optional phone number and optional variables

    Returns:
        Identifier of the new customer
    """
    customer_id = await container.create_customer.execute(
        name=request.name,
        phone_number=request.phone_number,
        variables=request.variables_as_dict(),
    )
    return CreateCustomerResponse(message="Customer created", customer_id=customer_id)


@router.get("/customers", status_code=status.HTTP_200_OK, response_model=CustomerListResponse)
async def list_customers(container: Container = Depends(get_container)) -> CustomerListResponse:
    """List all customers with their variables."""
    customers = await container.get_all_customers.execute()
    return CustomerListResponse(
        message="Customers retrieved", customers=to_customer_dto_list(customers)
    )


@router.get(
    "/customers/{customer_id}", status_code=status.HTTP_200_OK, response_model=CustomerResponse
)
async def get_customer(
    customer_id: str, container: Container = Depends(get_container)
) -> CustomerResponse:
    """
    Get a customer.

    Raises:
        HTTPException: 404 if the customer does not exist
    """
    customer = await container.get_customer.execute(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CUSTOMER_NOT_FOUND)
    return CustomerResponse(message="Customer retrieved", customer=to_customer_dto(customer))


@router.put(
    "/customers/{customer_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def update_customer(
    customer_id: str, request: CustomerInput, container: Container = Depends(get_container)
) -> MessageResponse:
    """
    Replace a customer's name, phone number and variable set.

    Variables not included in the request are removed.

    Raises:
        HTTPException: 404 if the customer does not exist
    """
    updated = await container.update_customer.execute(
        customer_id=customer_id,
        name=request.name,
        phone_number=request.phone_number,
        variables=request.variables_as_dict(),
    )
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CUSTOMER_NOT_FOUND)
    return MessageResponse(message="Customer updated")


@router.delete(
    "/customers/{customer_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def delete_customer(
    customer_id: str, container: Container = Depends(get_container)
) -> MessageResponse:
    """
    Delete a customer, its variables and its calls.

    Raises:
        HTTPException: 404 if the customer does not exist
    """
    deleted = await container.delete_customer.execute(customer_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CUSTOMER_NOT_FOUND)
    return MessageResponse(message="Customer deleted")


@router.get(
    "/customers/{customer_id}/calls",
    status_code=status.HTTP_200_OK,
    response_model=CallListResponse,
)
async def list_customer_calls(
    customer_id: str, container: Container = Depends(get_container)
) -> CallListResponse:
    """List the calls of a customer (empty for unknown customers)."""
    calls = await container.get_calls_by_customer.execute(customer_id)
    return CallListResponse(message="Calls retrieved", calls=to_call_dto_list(calls))


# ===== Calls =====


@router.post("/calls", status_code=status.HTTP_200_OK, response_model=RequestCallResponse)
async def request_call(
    request: RequestCallInput, container: Container = Depends(get_container)
) -> RequestCallResponse:
    """
    Queue a call for a customer.

    Raises:
        HTTPException: 404 if the customer does not exist
    """
    call_id = await container.request_call.execute(
        customer_id=str(request.customer_id),
        requested_at=request.requested_at,
    )
    if call_id is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CUSTOMER_NOT_FOUND)
    return RequestCallResponse(message="Call requested", call_id=call_id)


@router.get("/calls", status_code=status.HTTP_200_OK, response_model=CallListResponse)
async def list_calls(container: Container = Depends(get_container)) -> CallListResponse:
    """List all calls."""
    calls = await container.get_all_calls.execute()
    return CallListResponse(message="Calls retrieved", calls=to_call_dto_list(calls))


@router.get("/calls/{call_id}", status_code=status.HTTP_200_OK, response_model=CallResponse)
async def get_call(call_id: str, container: Container = Depends(get_container)) -> CallResponse:
    """
    Get a call.

    Raises:
        HTTPException: 404 if the call does not exist
    """
    call = await container.get_call.execute(call_id)
    if call is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CALL_NOT_FOUND)
    return CallResponse(message="Call retrieved", call=to_call_dto(call))


@router.post(
    "/calls/{call_id}/start", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def start_call(
    call_id: str, container: Container = Depends(get_container)
) -> MessageResponse:
    """Start a queued call."""
    result = await container.start_call.execute(call_id)
    _raise_for_transition(result, "start")
    return MessageResponse(message="Call started")


@router.post(
    "/calls/{call_id}/complete", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def complete_call(
    call_id: str, container: Container = Depends(get_container)
) -> MessageResponse:
    """Complete an in-progress call."""
    result = await container.complete_call.execute(call_id)
    _raise_for_transition(result, "complete")
    return MessageResponse(message="Call completed")


@router.post(
    "/calls/{call_id}/cancel", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def cancel_call(
    call_id: str, container: Container = Depends(get_container)
) -> MessageResponse:
    """Cancel a queued or in-progress call."""
    result = await container.cancel_call.execute(call_id)
    _raise_for_transition(result, "cancel")
    return MessageResponse(message="Call canceled")


@router.post(
    "/calls/{call_id}/fail", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def fail_call(
    call_id: str, container: Container = Depends(get_container)
) -> MessageResponse:
    """Mark a queued or in-progress call as failed."""
    result = await container.fail_call.execute(call_id)
    _raise_for_transition(result, "fail")
    return MessageResponse(message="Call marked as failed")
