"""Call DTOs."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict

from app.application.dtos.base import DTO, MessageResponse


class RequestCallInput(DTO):
    """Call request DTO."""

    customer_id: UUID
    requested_at: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "customer_id": "3f1c2a9e-8d4b-4f7a-9b1e-2c6d5e4f3a21",
                "requested_at": "2024-01-15T10:30:00Z",
            }
        }
    )


class CallDTO(DTO):
    """Call response DTO."""

    call_id: str
    customer_id: str
    status: str
    requested_at: datetime
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    duration_sec: Optional[int] = None


class RequestCallResponse(MessageResponse):
    """Call request response DTO."""

    call_id: str


class CallResponse(MessageResponse):
    """Single call response DTO."""

    call: CallDTO


class CallListResponse(MessageResponse):
    """Call listing response DTO."""

    calls: list[CallDTO]
