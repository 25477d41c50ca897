from bookings.domain.models import (
    Attendee,
    Booking,
    BookingDetails,
    BookingStats,
    BookingStatus,
)
from bookings.domain.value_objects import (
    MAX_SEATS_PER_BOOKING,
    MIN_SEATS_PER_BOOKING,
    BookingId,
    Requester,
    SeatCount,
)

__all__ = [
    "Booking",
    "BookingStatus",
    "BookingDetails",
    "BookingStats",
    "Attendee",
    "BookingId",
    "SeatCount",
    "Requester",
    "MIN_SEATS_PER_BOOKING",
    "MAX_SEATS_PER_BOOKING",
]
