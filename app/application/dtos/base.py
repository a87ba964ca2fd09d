"""Base DTO classes."""

from pydantic import BaseModel, ConfigDict


class DTO(BaseModel):
    """Base class for application DTOs."""

    model_config = ConfigDict(frozen=True)


class MessageResponse(DTO):
    """Response envelope carrying a human-readable outcome message."""

    message: str
