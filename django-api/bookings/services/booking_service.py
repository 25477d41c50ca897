"""Booking service - creation and cancellation of seat bookings.

Rules checked on create, first failure wins:
- administrators do not book
- seats must be an integer between 1 and 2
- the event must exist and not be in the past
- one confirmed booking per user and event
- requested seats must fit the remaining capacity

The event lookup, capacity check and insert run under the store's event
lock so concurrent requests for the same event cannot overbook it.
"""

import logging
from collections.abc import Callable
from datetime import date, datetime

from django.utils import timezone

from bookings.domain import (
    Attendee,
    Booking,
    BookingDetails,
    BookingId,
    BookingStatus,
    Requester,
    SeatCount,
    MAX_SEATS_PER_BOOKING,
    MIN_SEATS_PER_BOOKING,
)
from bookings.domain.errors import (
    AdminCannotBookError,
    AdminRequiredError,
    BookingAlreadyCancelledError,
    BookingNotFoundError,
    CapacityExceededError,
    DuplicateBookingError,
    EventStartedError,
    InvalidBookingFilterError,
    InvalidBookingIdError,
    InvalidSeatCountError,
    NotBookingOwnerError,
    PastEventError,
)
from bookings.services.capacity_service import CapacityService
from bookings.stores.interfaces import BookingStore
from common.errors import DomainError
from events.domain.errors import EventNotFoundError
from events.services import parse_event_id
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_seats(seats) -> SeatCount:
    try:
        return SeatCount(value=seats)
    except ValueError:
        raise InvalidSeatCountError(MIN_SEATS_PER_BOOKING, MAX_SEATS_PER_BOOKING) from None


def parse_booking_id(booking_id: str) -> BookingId:
    try:
        return BookingId.from_string(booking_id)
    except (TypeError, ValueError, AttributeError):
        raise InvalidBookingIdError() from None


class BookingService:
    """Service for the booking lifecycle."""

    def __init__(
        self,
        bookings: BookingStore,
        events: EventStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._bookings = bookings
        self._events = events
        self._capacity = CapacityService(bookings, events)
        self._clock = clock

    def _today(self, now: datetime) -> date:
        return timezone.localdate(now) if timezone.is_aware(now) else now.date()

    def create_booking(self, requester: Requester, event_id: str, seats) -> BookingDetails:
        """Book seats for the requester.

        Raises:
            AdminCannotBookError: If the requester is an administrator.
            InvalidSeatCountError: If seats is not an integer in range.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            PastEventError: If the event date is before today.
            DuplicateBookingError: If the requester already holds a
                confirmed booking for the event.
            CapacityExceededError: If fewer seats remain than requested.
        """
        try:
            details = self._create(requester, event_id, seats)
        except DomainError as exc:
            logger.info(
                "booking.rejected",
                extra={
                    "user_id": requester.user_id,
                    "event_id": str(event_id),
                    "seats": seats,
                    "code": exc.code.value,
                },
            )
            raise

        booking = details.booking
        logger.info(
            "booking.created",
            extra={
                "user_id": booking.user_id,
                "event_id": str(booking.event_id),
                "booking_id": str(booking.id),
                "seats": booking.seats.value,
                "total_amount": str(booking.total_amount),
            },
        )
        return details

    def _create(self, requester: Requester, event_id: str, seats) -> BookingDetails:
        if requester.is_admin:
            raise AdminCannotBookError()

        seat_count = parse_seats(seats)
        parsed_event_id = parse_event_id(event_id)

        with self._bookings.event_lock(parsed_event_id):
            event = self._events.get_event(parsed_event_id)
            if event is None:
                raise EventNotFoundError(str(parsed_event_id))

            now = self._clock()
            if event.has_passed(self._today(now)):
                raise PastEventError()

            if self._bookings.has_active_booking(requester.user_id, event.id):
                raise DuplicateBookingError()

            available = event.capacity.value - self._capacity.booked_seats(event.id)
            if seat_count.value > available:
                raise CapacityExceededError(available_seats=max(available, 0))

            booking = Booking.open(requester.user_id, event, seat_count, now)
            saved = self._bookings.add(booking)

        return BookingDetails(booking=saved, event=event)

    def cancel_booking(self, requester: Requester, booking_id: str) -> BookingDetails:
        """Cancel one of the requester's bookings.

        Raises:
            InvalidBookingIdError: If the booking_id is not a valid UUID.
            BookingNotFoundError: If the booking does not exist.
            NotBookingOwnerError: If the requester does not own the booking.
            EventStartedError: If the event is today or in the past.
            BookingAlreadyCancelledError: If the booking is already cancelled.
        """
        parsed = parse_booking_id(booking_id)
        booking = self._bookings.get_booking(parsed)
        if booking is None:
            raise BookingNotFoundError(str(parsed))

        if booking.user_id != requester.user_id:
            raise NotBookingOwnerError()

        event = self._events.get_event(booking.event_id)
        if event is None:
            raise EventNotFoundError(str(booking.event_id))

        now = self._clock()
        if event.has_started(self._today(now)):
            raise EventStartedError()

        cancelled = booking.cancel(now)
        if not self._bookings.mark_cancelled(cancelled):
            raise BookingAlreadyCancelledError()

        logger.info(
            "booking.cancelled",
            extra={
                "user_id": requester.user_id,
                "event_id": str(event.id),
                "booking_id": str(cancelled.id),
                "seats": cancelled.seats.value,
            },
        )
        return BookingDetails(booking=cancelled, event=event)

    def list_user_bookings(self, requester: Requester) -> list[BookingDetails]:
        """Return the requester's bookings with events, newest first."""
        return self._bookings.list_for_user(requester.user_id)

    def list_bookings(
        self,
        requester: Requester,
        event_id: str | None = None,
        status: str | None = None,
    ) -> list[BookingDetails]:
        """Return every booking, optionally filtered. Administrators only."""
        if not requester.is_admin:
            raise AdminRequiredError()

        parsed_event_id = parse_event_id(event_id) if event_id else None
        parsed_status = None
        if status:
            try:
                parsed_status = BookingStatus(status)
            except ValueError:
                raise InvalidBookingFilterError("status") from None
        return self._bookings.list_all(event_id=parsed_event_id, status=parsed_status)

    def list_attendees(self, requester: Requester, event_id: str) -> list[Attendee]:
        """Return who holds confirmed seats for an event. Administrators only."""
        if not requester.is_admin:
            raise AdminRequiredError()
        parsed = parse_event_id(event_id)
        if not self._events.event_exists(parsed):
            raise EventNotFoundError(str(parsed))
        return self._bookings.list_attendees(parsed)
