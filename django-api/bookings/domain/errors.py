"""Domain error codes for the bookings module."""

from enum import Enum

from common.errors import (
    AuthorizationError,
    BusinessRuleViolation,
    NotFoundError,
    ValidationError,
)


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_SEAT_COUNT = "INVALID_SEAT_COUNT"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    INVALID_BOOKING_FILTER = "INVALID_BOOKING_FILTER"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    NOT_BOOKING_OWNER = "NOT_BOOKING_OWNER"
    ADMIN_CANNOT_BOOK = "ADMIN_CANNOT_BOOK"
    ADMIN_REQUIRED = "ADMIN_REQUIRED"
    PAST_EVENT = "PAST_EVENT"
    DUPLICATE_BOOKING = "DUPLICATE_BOOKING"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    EVENT_STARTED = "EVENT_STARTED"
    ALREADY_CANCELLED = "ALREADY_CANCELLED"


class InvalidSeatCountError(ValidationError):
    """Raised when the requested seat count is not an integer in range."""

    def __init__(self, minimum: int, maximum: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SEAT_COUNT,
            message=f"Seats must be between {minimum} and {maximum}",
            field="seats",
            rule="range",
        )


class InvalidBookingIdError(ValidationError):
    """Raised when a booking ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_ID,
            message="Invalid booking ID format",
            field="booking_id",
            rule="uuid",
        )


class InvalidBookingFilterError(ValidationError):
    """Raised when a booking list filter is not recognised."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_FILTER,
            message=f"Invalid value for filter '{field}'",
            field=field,
            rule="choice",
        )


class BookingNotFoundError(NotFoundError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class NotBookingOwnerError(AuthorizationError):
    """Raised when a user acts on a booking they do not own."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_BOOKING_OWNER,
            message="Not authorized to cancel this booking",
        )


class AdminCannotBookError(AuthorizationError):
    """Raised when an administrator attempts to book seats."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADMIN_CANNOT_BOOK,
            message="Administrators cannot book events",
        )


class AdminRequiredError(AuthorizationError):
    """Raised when a non-administrator requests platform-wide data."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADMIN_REQUIRED,
            message="Admin role required",
        )


class PastEventError(BusinessRuleViolation):
    """Raised when booking an event whose date has passed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAST_EVENT,
            message="Cannot book for past events",
        )


class DuplicateBookingError(BusinessRuleViolation):
    """Raised when the user already holds a confirmed booking for the event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_BOOKING,
            message="You already have a booking for this event",
        )


class CapacityExceededError(BusinessRuleViolation):
    """Raised when fewer seats remain than were requested."""

    def __init__(self, available_seats: int) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message=f"Only {available_seats} seats available for this event",
        )
        self.available_seats = available_seats


class EventStartedError(BusinessRuleViolation):
    """Raised when cancelling a booking on or after the event's day."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_STARTED,
            message="Cannot cancel booking for events that have started",
        )


class BookingAlreadyCancelledError(BusinessRuleViolation):
    """Raised when cancelling a booking that is already cancelled."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_CANCELLED,
            message="Booking is already cancelled",
        )
