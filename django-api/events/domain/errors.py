"""Domain error codes for the events module."""

from enum import Enum

from common.errors import NotFoundError, ValidationError


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT_FILTER = "INVALID_EVENT_FILTER"


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(ValidationError):
    """Raised when an event ID is invalid."""

    def __init__(self, field: str = "event_id") -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
            field=field,
            rule="uuid",
        )


class InvalidEventFilterError(ValidationError):
    """Raised when a catalog filter value is not recognised."""

    def __init__(self, field: str, rule: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_FILTER,
            message=f"Invalid value for filter '{field}'",
            field=field,
            rule=rule,
        )
