"""Capacity aggregation for events.

Occupancy is recomputed from confirmed bookings on every call and never
cached; it gates the overbooking check.
"""

from dataclasses import dataclass

from bookings.stores.interfaces import BookingStore
from events.domain import EventId
from events.services import parse_event_id
from events.stores.interfaces import EventStore


@dataclass(frozen=True)
class Availability:
    booked_seats: int
    capacity: int | None = None
    available_seats: int | None = None


class CapacityService:
    """Service answering how many seats of an event are taken."""

    def __init__(self, bookings: BookingStore, events: EventStore) -> None:
        self._bookings = bookings
        self._events = events

    def booked_seats(self, event_id: EventId) -> int:
        return self._bookings.booked_seats(event_id)

    def availability(self, event_id: str) -> Availability:
        """Return occupancy for an event.

        Unknown events report zero booked seats and no capacity.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
        """
        parsed = parse_event_id(event_id)
        booked = self.booked_seats(parsed)
        event = self._events.get_event(parsed)
        if event is None:
            return Availability(booked_seats=booked)
        return Availability(
            booked_seats=booked,
            capacity=event.capacity.value,
            available_seats=max(event.capacity.value - booked, 0),
        )
