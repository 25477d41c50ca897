"""Pytest configuration and shared fixtures."""

import threading
import uuid
from contextlib import contextmanager
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from bookings.domain import Attendee, BookingDetails, BookingStats, BookingStatus
from bookings.domain.errors import DuplicateBookingError
from bookings.stores.interfaces import BookingStore
from events.domain import Capacity, Category, Event, EventId, LocationType, Money
from events.stores.interfaces import EventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def today() -> date:
    from django.utils import timezone
    return timezone.localdate()


@pytest.fixture
def create_event(today):
    """Factory for persisted events; defaults to capacity 2 at 50.00, next week."""
    from events.models import Event as EventRow

    def _create(**overrides):
        fields = {
            "title": "Jazz Night",
            "description": "An evening of live jazz downtown.",
            "category": "Music",
            "location": "Oslo",
            "location_type": "In-Person",
            "date": today + timedelta(days=7),
            "time": "19:00",
            "capacity": 2,
            "price": Decimal("50.00"),
        }
        fields.update(overrides)
        return EventRow.objects.create(**fields)

    return _create


@pytest.fixture
def alice(django_user_model):
    return django_user_model.objects.create_user(
        username="alice", email="alice@example.com", password="pw", first_name="Alice"
    )


@pytest.fixture
def bob(django_user_model):
    return django_user_model.objects.create_user(
        username="bob", email="bob@example.com", password="pw"
    )


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(
        username="admin", email="admin@example.com", password="pw", is_staff=True
    )


class FrozenClock:
    """Callable clock returning a fixed, adjustable instant."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta) -> None:
        self.now = self.now + timedelta(**delta)


class InMemoryEventStore(EventStore):
    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}

    def put(self, event: Event) -> Event:
        self.events[event.id] = event
        return event

    def list_events(self, query, today):
        events = sorted(self.events.values(), key=lambda event: event.date)
        if query.category:
            events = [event for event in events if event.category is query.category]
        if query.status:
            events = [event for event in events if event.status_on(today) is query.status]
        return events

    def get_event(self, event_id):
        return self.events.get(event_id)

    def event_exists(self, event_id):
        return event_id in self.events


class InMemoryBookingStore(BookingStore):
    def __init__(self, events: InMemoryEventStore) -> None:
        self.rows = {}
        self._events = events
        self._lock = threading.Lock()

    @contextmanager
    def event_lock(self, event_id):
        with self._lock:
            yield

    def booked_seats(self, event_id):
        return sum(
            row.seats.value
            for row in self.rows.values()
            if row.event_id == event_id and row.is_active
        )

    def has_active_booking(self, user_id, event_id):
        return any(
            row.user_id == user_id and row.event_id == event_id and row.is_active
            for row in self.rows.values()
        )

    def add(self, booking):
        if self.has_active_booking(booking.user_id, booking.event_id):
            raise DuplicateBookingError()
        self.rows[booking.id] = booking
        return booking

    def get_booking(self, booking_id):
        return self.rows.get(booking_id)

    def mark_cancelled(self, booking):
        stored = self.rows[booking.id]
        if not stored.is_active:
            return False
        self.rows[booking.id] = booking
        return True

    def _details(self, rows):
        rows = sorted(rows, key=lambda row: row.booking_date, reverse=True)
        return [
            BookingDetails(booking=row, event=self._events.get_event(row.event_id))
            for row in rows
        ]

    def list_for_user(self, user_id):
        return self._details(row for row in self.rows.values() if row.user_id == user_id)

    def list_all(self, event_id=None, status=None):
        return self._details(
            row
            for row in self.rows.values()
            if (event_id is None or row.event_id == event_id)
            and (status is None or row.status is status)
        )

    def list_attendees(self, event_id):
        rows = sorted(
            (row for row in self.rows.values() if row.event_id == event_id and row.is_active),
            key=lambda row: row.booking_date,
        )
        return [
            Attendee(
                user_id=row.user_id,
                name=f"user-{row.user_id}",
                email=f"user-{row.user_id}@example.com",
                seats=row.seats.value,
                booking_date=row.booking_date,
            )
            for row in rows
        ]

    def stats(self, user_id=None):
        rows = [row for row in self.rows.values() if user_id is None or row.user_id == user_id]
        confirmed = [row for row in rows if row.status is BookingStatus.CONFIRMED]
        return BookingStats(
            total=len(rows),
            confirmed=len(confirmed),
            cancelled=len(rows) - len(confirmed),
            confirmed_amount=sum((row.total_amount.amount for row in confirmed), Decimal("0")),
        )


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2026, 6, 15, 12, 0, tzinfo=dt_timezone.utc))


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def booking_store(event_store) -> InMemoryBookingStore:
    return InMemoryBookingStore(event_store)


@pytest.fixture
def make_event(event_store, clock):
    """Factory for in-memory events relative to the frozen clock's date."""

    def _make(days_from_today: int = 7, capacity: int = 2, price: str = "50.00", **overrides):
        event = Event(
            id=EventId(value=uuid.uuid4()),
            code="EVT-JUN2026-ABC",
            title="Jazz Night",
            description="An evening of live jazz downtown.",
            category=Category.MUSIC,
            location="Oslo",
            location_type=LocationType.IN_PERSON,
            date=clock.now.date() + timedelta(days=days_from_today),
            time="19:00",
            capacity=Capacity(value=capacity),
            price=Money(amount=Decimal(price)),
            image_url=None,
            created_at=clock.now,
        )
        return event_store.put(replace(event, **overrides))

    return _make
