"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from bookings.domain import Attendee, Booking, BookingDetails, BookingId, BookingStats, BookingStatus
from events.domain import EventId


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def event_lock(self, event_id: EventId) -> AbstractContextManager[None]:
        """Serialize booking writes for one event until the context exits.

        Everything read and written inside the context commits or rolls
        back together.
        """
        ...

    @abstractmethod
    def booked_seats(self, event_id: EventId) -> int:
        """Return the seats held by confirmed bookings of an event, 0 if none."""
        ...

    @abstractmethod
    def has_active_booking(self, user_id: int, event_id: EventId) -> bool:
        """Check if the user holds a confirmed booking for the event."""
        ...

    @abstractmethod
    def add(self, booking: Booking) -> Booking:
        """Persist a new booking.

        Raises:
            DuplicateBookingError: If the user already holds a confirmed
                booking for the event.
        """
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def mark_cancelled(self, booking: Booking) -> bool:
        """Store a cancellation if the stored booking is still confirmed.

        Returns False when the stored booking was already cancelled.
        """
        ...

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[BookingDetails]:
        """Return a user's bookings with events, newest first."""
        ...

    @abstractmethod
    def list_all(
        self, event_id: EventId | None = None, status: BookingStatus | None = None
    ) -> list[BookingDetails]:
        """Return all bookings with events, newest first."""
        ...

    @abstractmethod
    def list_attendees(self, event_id: EventId) -> list[Attendee]:
        """Return confirmed bookings of an event, oldest first."""
        ...

    @abstractmethod
    def stats(self, user_id: int | None = None) -> BookingStats:
        """Aggregate bookings, optionally scoped to one user."""
        ...
