"""Domain errors."""


class DomainError(Exception):
    """Base class for errors raised by domain entities."""


class CustomerValidationError(DomainError):
    """Raised when customer attributes violate an entity invariant."""


class InvalidStateTransition(DomainError):
    """Raised when a call transition is not allowed from its current status."""

    def __init__(self, current_status: str, operation: str) -> None:
        """
        Initialize invalid transition error.

        Args:
            current_status: Status the call was in when the transition was attempted
            operation: Attempted transition (e.g., 'start', 'complete')
        """
        self.current_status = current_status
        self.operation = operation
        super().__init__(f"Cannot {operation} call in status '{current_status}'")
