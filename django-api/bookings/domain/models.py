"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in bookings/models.py (persistence layer).
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

from bookings.domain.errors import BookingAlreadyCancelledError
from bookings.domain.value_objects import BookingId, SeatCount
from events.domain import Event, EventId, Money


class BookingStatus(Enum):
    """Closed set of booking states. CANCELLED is terminal."""

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking.

    ``total_amount`` is a snapshot of seats x price taken when the booking
    was opened; it is never recomputed.
    """

    id: BookingId
    user_id: int
    event_id: EventId
    seats: SeatCount
    total_amount: Money
    status: BookingStatus
    booking_date: datetime
    cancelled_at: datetime | None = None

    def __post_init__(self) -> None:
        if (self.status is BookingStatus.CANCELLED) != (self.cancelled_at is not None):
            raise ValueError("cancelled_at must be set exactly when the booking is cancelled")

    @classmethod
    def open(
        cls, user_id: int, event: Event, seats: SeatCount, now: datetime
    ) -> "Booking":
        return cls(
            id=BookingId(value=uuid.uuid4()),
            user_id=user_id,
            event_id=event.id,
            seats=seats,
            total_amount=event.price * seats.value,
            status=BookingStatus.CONFIRMED,
            booking_date=now,
        )

    @property
    def is_active(self) -> bool:
        return self.status is BookingStatus.CONFIRMED

    def cancel(self, now: datetime) -> "Booking":
        """Return the cancelled version of this booking.

        Raises:
            BookingAlreadyCancelledError: If the booking is already cancelled.
        """
        if not self.is_active:
            raise BookingAlreadyCancelledError()
        return replace(self, status=BookingStatus.CANCELLED, cancelled_at=now)


@dataclass(frozen=True)
class BookingDetails:
    """A booking with its event attached for display."""

    booking: Booking
    event: Event


@dataclass(frozen=True)
class Attendee:
    """A confirmed booking as seen from the event's guest list."""

    user_id: int
    name: str
    email: str
    seats: int
    booking_date: datetime


@dataclass(frozen=True)
class BookingStats:
    """Counts and confirmed amount over a set of bookings."""

    total: int
    confirmed: int
    cancelled: int
    confirmed_amount: Decimal
