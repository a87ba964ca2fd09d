"""Call entity."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from app.domain.exceptions import InvalidStateTransition


class CallStatus(str, Enum):
    """Lifecycle status of a call attempt."""

    QUEUED = "queued"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELED = "canceled"
    FAILED = "failed"


TERMINAL_STATUSES = frozenset({CallStatus.COMPLETED, CallStatus.CANCELED, CallStatus.FAILED})


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Call:
    """
    Outbound call attempt against a customer.

    Status only changes through start(), complete(), cancel() and fail().
    A rejected transition raises InvalidStateTransition and leaves every
    field untouched.
    """

    call_id: str
    customer_id: str
    status: CallStatus = CallStatus.QUEUED
    requested_at: datetime = field(default_factory=_utc_now)
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    duration_sec: Optional[int] = None

    @classmethod
    def create(cls, customer_id: str, requested_at: Optional[datetime] = None) -> "Call":
        """
        Create a new queued call.

        Args:
            customer_id: Owning customer identifier
            requested_at: Request time (defaults to now)

        Returns:
            Call in queued status with a fresh identifier
        """
        return cls(
            call_id=str(uuid4()),
            customer_id=customer_id,
            status=CallStatus.QUEUED,
            requested_at=requested_at or _utc_now(),
        )

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition is permitted."""
        return self.status in TERMINAL_STATUSES

    def _ensure_status(self, operation: str, *allowed: CallStatus) -> None:
        if self.status not in allowed:
            raise InvalidStateTransition(self.status.value, operation)

    def start(self, now: Optional[datetime] = None) -> None:
        """Move a queued call to in-progress."""
        self._ensure_status("start", CallStatus.QUEUED)
        self.status = CallStatus.IN_PROGRESS
        self.started_at = now or _utc_now()

    def complete(self, now: Optional[datetime] = None) -> None:
        """
        Complete an in-progress call and record its duration.

        duration_sec is the elapsed time since started_at in whole seconds,
        floored and never negative.
        """
        self._ensure_status("complete", CallStatus.IN_PROGRESS)
        ended_at = now or _utc_now()
        elapsed = (ended_at - self.started_at).total_seconds()
        self.status = CallStatus.COMPLETED
        self.ended_at = ended_at
        self.duration_sec = max(0, math.floor(elapsed))

    def cancel(self, now: Optional[datetime] = None) -> None:
        """Cancel a queued or in-progress call."""
        self._ensure_status("cancel", CallStatus.QUEUED, CallStatus.IN_PROGRESS)
        self.status = CallStatus.CANCELED
        self.ended_at = now or _utc_now()

    def fail(self, now: Optional[datetime] = None) -> None:
        """Mark a queued or in-progress call as failed."""
        self._ensure_status("fail", CallStatus.QUEUED, CallStatus.IN_PROGRESS)
        self.status = CallStatus.FAILED
        self.ended_at = now or _utc_now()
