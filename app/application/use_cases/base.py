"""Shared helpers for use cases."""

from typing import Any, Callable, Optional

# (component, event, **fields) -> None
EventLogger = Callable[..., None]


class LoggingUseCase:
    """Base class for use cases that accept an optional structured logger."""

    _logger: Optional[EventLogger] = None

    def _log(self, event: str, **kwargs: Any) -> None:
        """
        Log event if logger is available.

        Args:
            event: Event name
            **kwargs: Additional log fields
        """
        if self._logger:
            self._logger("use_case", event, **kwargs)
