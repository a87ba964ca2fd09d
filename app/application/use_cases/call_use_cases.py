"""Call use cases."""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from app.application.ports.call_repository import CallRepository
from app.application.ports.customer_repository import CustomerRepository
from app.application.use_cases.base import EventLogger, LoggingUseCase
from app.domain.entities.call import Call
from app.domain.exceptions import InvalidStateTransition


class CallTransitionResult(str, Enum):
    """Outcome of a call state transition use case."""

    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID_TRANSITION = "invalid_transition"


class RequestCallUseCase(LoggingUseCase):
    """Use case for queueing a call for an existing customer."""

    def __init__(
        self,
        call_repository: CallRepository,
        customer_repository: CustomerRepository,
        logger: Optional[EventLogger] = None,
    ) -> None:
        self._call_repository = call_repository
        self._customer_repository = customer_repository
        self._logger = logger

    async def execute(
        self, customer_id: str, requested_at: Optional[datetime] = None
    ) -> Optional[str]:
        """
        Queue a new call.

        Args:
            customer_id: Customer to call
            requested_at: Request time (defaults to now); naive values are taken as UTC,
                converted to UTC otherwise

        Returns:
            Identifier of the new call, or None if the customer does not exist
        """
        customer = await self._customer_repository.find_by_id(customer_id)
        if customer is None:
            return None

        if requested_at is not None:
            if requested_at.tzinfo is None:
                requested_at = requested_at.replace(tzinfo=timezone.utc)
            else:
                requested_at = requested_at.astimezone(timezone.utc)

        call = Call.create(customer_id, requested_at)
        await self._call_repository.save(call)
        self._log("call_requested", call_id=call.call_id, customer_id=customer_id)
        return call.call_id


class _TransitionCallUseCase(LoggingUseCase):
    """
    Base use case for call state transitions.

    Loads the call, applies the transition and saves it. A rejected
    transition is logged and reported as INVALID_TRANSITION; the call is not
    saved in that case.
    """

    operation: str = ""

    def __init__(
        self, call_repository: CallRepository, logger: Optional[EventLogger] = None
    ) -> None:
        self._call_repository = call_repository
        self._logger = logger

    async def execute(self, call_id: str) -> CallTransitionResult:
        """
        Apply the transition to a call.

        Args:
            call_id: Call identifier

        Returns:
            OK, NOT_FOUND or INVALID_TRANSITION
        """
        call = await self._call_repository.find_by_id(call_id)
        if call is None:
            return CallTransitionResult.NOT_FOUND

        status_before = call.status.value
        try:
            getattr(call, self.operation)()
        except InvalidStateTransition as e:
            self._log(
                "call_transition_rejected",
                level=logging.WARNING,
                call_id=call_id,
                operation=self.operation,
                status=e.current_status,
            )
            return CallTransitionResult.INVALID_TRANSITION

        await self._call_repository.save(call)
        self._log(
            "call_transition",
            call_id=call_id,
            operation=self.operation,
            status_before=status_before,
            status_after=call.status.value,
        )
        return CallTransitionResult.OK


class StartCallUseCase(_TransitionCallUseCase):
    """Use case for starting a queued call."""

    operation = "start"


class CompleteCallUseCase(_TransitionCallUseCase):
    """Use case for completing an in-progress call."""

    operation = "complete"


class CancelCallUseCase(_TransitionCallUseCase):
    """Use case for canceling a queued or in-progress call."""

    operation = "cancel"


class FailCallUseCase(_TransitionCallUseCase):
    """Use case for marking a queued or in-progress call as failed."""

    operation = "fail"


class GetCallUseCase:
    """Use case for fetching a single call."""

    def __init__(self, call_repository: CallRepository) -> None:
        self._call_repository = call_repository

    async def execute(self, call_id: str) -> Optional[Call]:
        return await self._call_repository.find_by_id(call_id)


class GetCallsByCustomerUseCase:
    """Use case for listing the calls of a customer."""

    def __init__(self, call_repository: CallRepository) -> None:
        self._call_repository = call_repository

    async def execute(self, customer_id: str) -> list[Call]:
        return await self._call_repository.find_all_by_customer_id(customer_id)


class GetAllCallsUseCase:
    """Use case for listing all calls."""

    def __init__(self, call_repository: CallRepository) -> None:
        self._call_repository = call_repository

    async def execute(self) -> list[Call]:
        return await self._call_repository.find_all()
