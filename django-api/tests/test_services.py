"""Unit tests for the event, booking and statistics services.

These run against in-memory stores and a frozen clock.
Run with: pytest tests/test_services.py -v
"""

import threading
import uuid
from decimal import Decimal

import pytest

from bookings.domain import BookingStatus, Requester
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
from bookings.services import BookingService, CapacityService, StatisticsService
from events.domain import EventStatus, Money
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventFilterError,
    InvalidEventIdError,
)
from events.services import EventService

ALICE = Requester(user_id=1)
BOB = Requester(user_id=2)
ADMIN = Requester(user_id=99, is_admin=True)


class TestEventService:
    """Tests for EventService."""

    @pytest.fixture
    def service(self, event_store, clock):
        return EventService(event_store, today=clock.now.date)

    def test_get_event_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidEventIdError):
            service.get_event("not-a-uuid")

    def test_get_event_not_found_raises_error(self, service):
        with pytest.raises(EventNotFoundError):
            service.get_event(str(uuid.uuid4()))

    def test_get_event_returns_event(self, service, make_event):
        event = make_event()

        assert service.get_event(str(event.id)) == event

    def test_list_events_filters_by_derived_status(self, service, make_event):
        make_event(days_from_today=-1)
        ongoing = make_event(days_from_today=0)
        make_event(days_from_today=3)

        assert service.list_events(status=EventStatus.ONGOING.value) == [ongoing]

    def test_list_events_rejects_unknown_category(self, service):
        with pytest.raises(InvalidEventFilterError) as exc_info:
            service.list_events(category="Cooking")

        assert exc_info.value.field == "category"

    def test_list_events_rejects_malformed_date(self, service):
        with pytest.raises(InvalidEventFilterError):
            service.list_events(start_date="15/06/2026")

    def test_list_categories(self, service):
        assert service.list_categories() == [
            "Music", "Tech", "Business", "Education", "Sports", "Arts", "Other",
        ]


class TestBookingServiceCreate:
    """Tests for BookingService.create_booking."""

    @pytest.fixture
    def service(self, booking_store, event_store, clock):
        return BookingService(booking_store, event_store, clock=clock)

    def test_create_booking_snapshots_amount(self, service, make_event, clock):
        event = make_event(price="50.00")

        details = service.create_booking(ALICE, str(event.id), 2)

        assert details.booking.status is BookingStatus.CONFIRMED
        assert details.booking.total_amount == Money(amount=Decimal("100.00"))
        assert details.booking.booking_date == clock.now
        assert details.booking.cancelled_at is None
        assert details.event == event

    def test_event_dated_today_can_be_booked(self, service, make_event):
        event = make_event(days_from_today=0)

        assert service.create_booking(ALICE, str(event.id), 1).booking.is_active

    @pytest.mark.parametrize("seats", [0, 3, "two", None])
    def test_invalid_seat_count_rejected_before_persistence(
        self, service, make_event, booking_store, seats
    ):
        event = make_event()

        with pytest.raises(InvalidSeatCountError) as exc_info:
            service.create_booking(ALICE, str(event.id), seats)

        assert exc_info.value.field == "seats"
        assert booking_store.rows == {}

    def test_seat_count_checked_before_event_lookup(self, service):
        with pytest.raises(InvalidSeatCountError):
            service.create_booking(ALICE, str(uuid.uuid4()), 3)

    def test_invalid_event_id(self, service):
        with pytest.raises(InvalidEventIdError):
            service.create_booking(ALICE, "abc", 1)

    def test_unknown_event(self, service):
        with pytest.raises(EventNotFoundError):
            service.create_booking(ALICE, str(uuid.uuid4()), 1)

    def test_past_event_rejected(self, service, make_event, booking_store):
        event = make_event(days_from_today=-1)

        with pytest.raises(PastEventError):
            service.create_booking(ALICE, str(event.id), 1)

        assert booking_store.rows == {}

    def test_duplicate_booking_rejected(self, service, make_event):
        event = make_event(capacity=10)
        service.create_booking(ALICE, str(event.id), 1)

        with pytest.raises(DuplicateBookingError):
            service.create_booking(ALICE, str(event.id), 1)

    def test_rebook_after_cancel(self, service, make_event):
        event = make_event()
        first = service.create_booking(ALICE, str(event.id), 2)
        service.cancel_booking(ALICE, str(first.booking.id))

        second = service.create_booking(ALICE, str(event.id), 2)

        assert second.booking.id != first.booking.id
        assert second.booking.is_active

    def test_capacity_exceeded_reports_available_seats(self, service, make_event):
        event = make_event(capacity=3)
        service.create_booking(ALICE, str(event.id), 2)

        with pytest.raises(CapacityExceededError) as exc_info:
            service.create_booking(BOB, str(event.id), 2)

        assert exc_info.value.available_seats == 1

    def test_admin_cannot_book(self, service, make_event):
        event = make_event()

        with pytest.raises(AdminCannotBookError):
            service.create_booking(ADMIN, str(event.id), 1)

    def test_total_amount_survives_price_change(self, service, make_event, event_store):
        event = make_event(price="50.00")
        details = service.create_booking(ALICE, str(event.id), 2)

        make_event(id=event.id, price="80.00")

        [mine] = service.list_user_bookings(ALICE)
        assert mine.booking.id == details.booking.id
        assert mine.booking.total_amount == Money(amount=Decimal("100.00"))
        assert mine.event.price == Money(amount=Decimal("80.00"))

    def test_capacity_scenario(self, service, make_event, booking_store, event_store):
        event = make_event(capacity=2, price="50.00")
        capacity = CapacityService(booking_store, event_store)

        a = service.create_booking(ALICE, str(event.id), 2)
        assert a.booking.total_amount == Money(amount=Decimal("100.00"))
        assert capacity.availability(str(event.id)).available_seats == 0

        with pytest.raises(CapacityExceededError) as exc_info:
            service.create_booking(BOB, str(event.id), 1)
        assert exc_info.value.available_seats == 0

        service.cancel_booking(ALICE, str(a.booking.id))
        assert capacity.availability(str(event.id)).available_seats == 2

        b = service.create_booking(BOB, str(event.id), 1)
        assert b.booking.total_amount == Money(amount=Decimal("50.00"))

    def test_concurrent_requests_never_overbook(self, service, make_event, booking_store):
        event = make_event(capacity=5)
        barrier = threading.Barrier(20)
        outcomes = []

        def attempt(user_id):
            barrier.wait()
            try:
                service.create_booking(Requester(user_id=user_id), str(event.id), 1)
                outcomes.append("ok")
            except CapacityExceededError:
                outcomes.append("full")

        threads = [threading.Thread(target=attempt, args=(n,)) for n in range(100, 120)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert outcomes.count("ok") == 5
        assert outcomes.count("full") == 15
        assert booking_store.booked_seats(event.id) == 5


class TestBookingServiceCancel:
    """Tests for BookingService.cancel_booking."""

    @pytest.fixture
    def service(self, booking_store, event_store, clock):
        return BookingService(booking_store, event_store, clock=clock)

    def test_cancel_frees_seats(self, service, make_event, booking_store, clock):
        event = make_event()
        details = service.create_booking(ALICE, str(event.id), 2)
        clock.advance(hours=1)

        cancelled = service.cancel_booking(ALICE, str(details.booking.id))

        assert cancelled.booking.status is BookingStatus.CANCELLED
        assert cancelled.booking.cancelled_at == clock.now
        assert cancelled.booking.seats.value == 2
        assert cancelled.booking.total_amount == details.booking.total_amount
        assert booking_store.booked_seats(event.id) == 0

    def test_invalid_booking_id(self, service):
        with pytest.raises(InvalidBookingIdError):
            service.cancel_booking(ALICE, "nope")

    def test_unknown_booking(self, service):
        with pytest.raises(BookingNotFoundError):
            service.cancel_booking(ALICE, str(uuid.uuid4()))

    def test_only_owner_may_cancel(self, service, make_event):
        details = service.create_booking(ALICE, str(make_event().id), 1)

        with pytest.raises(NotBookingOwnerError):
            service.cancel_booking(BOB, str(details.booking.id))

    def test_admin_has_no_bypass(self, service, make_event):
        details = service.create_booking(ALICE, str(make_event().id), 1)

        with pytest.raises(NotBookingOwnerError):
            service.cancel_booking(ADMIN, str(details.booking.id))

    def test_cannot_cancel_on_event_day(self, service, make_event, clock):
        event = make_event(days_from_today=1)
        details = service.create_booking(ALICE, str(event.id), 1)
        clock.advance(days=1)

        with pytest.raises(EventStartedError):
            service.cancel_booking(ALICE, str(details.booking.id))

    def test_event_started_checked_before_already_cancelled(self, service, make_event, clock):
        event = make_event(days_from_today=1)
        details = service.create_booking(ALICE, str(event.id), 1)
        service.cancel_booking(ALICE, str(details.booking.id))
        clock.advance(days=1)

        with pytest.raises(EventStartedError):
            service.cancel_booking(ALICE, str(details.booking.id))

    def test_cancel_twice_fails(self, service, make_event):
        details = service.create_booking(ALICE, str(make_event().id), 1)
        service.cancel_booking(ALICE, str(details.booking.id))

        with pytest.raises(BookingAlreadyCancelledError):
            service.cancel_booking(ALICE, str(details.booking.id))


class TestBookingServiceReads:
    """Tests for listing operations."""

    @pytest.fixture
    def service(self, booking_store, event_store, clock):
        return BookingService(booking_store, event_store, clock=clock)

    def test_user_bookings_newest_first(self, service, make_event, clock):
        first = service.create_booking(ALICE, str(make_event().id), 1)
        clock.advance(minutes=5)
        second = service.create_booking(ALICE, str(make_event().id), 1)
        service.create_booking(BOB, str(make_event().id), 1)

        ids = [details.booking.id for details in service.list_user_bookings(ALICE)]

        assert ids == [second.booking.id, first.booking.id]

    def test_list_bookings_requires_admin(self, service):
        with pytest.raises(AdminRequiredError):
            service.list_bookings(ALICE)

    def test_list_bookings_filters_by_status(self, service, make_event):
        kept = service.create_booking(ALICE, str(make_event().id), 1)
        dropped = service.create_booking(BOB, str(make_event().id), 1)
        service.cancel_booking(BOB, str(dropped.booking.id))

        confirmed = service.list_bookings(ADMIN, status="confirmed")

        assert [details.booking.id for details in confirmed] == [kept.booking.id]

    def test_list_bookings_rejects_unknown_status(self, service):
        with pytest.raises(InvalidBookingFilterError):
            service.list_bookings(ADMIN, status="pending")

    def test_attendees_exclude_cancelled(self, service, make_event):
        event = make_event(capacity=10)
        service.create_booking(ALICE, str(event.id), 2)
        dropped = service.create_booking(BOB, str(event.id), 1)
        service.cancel_booking(BOB, str(dropped.booking.id))

        attendees = service.list_attendees(ADMIN, str(event.id))

        assert [(a.user_id, a.seats) for a in attendees] == [(ALICE.user_id, 2)]

    def test_attendees_of_unknown_event(self, service):
        with pytest.raises(EventNotFoundError):
            service.list_attendees(ADMIN, str(uuid.uuid4()))

    def test_attendees_require_admin(self, service, make_event):
        with pytest.raises(AdminRequiredError):
            service.list_attendees(ALICE, str(make_event().id))


class TestStatisticsService:
    """Tests for StatisticsService."""

    @pytest.fixture
    def bookings(self, booking_store, event_store, clock):
        return BookingService(booking_store, event_store, clock=clock)

    @pytest.fixture
    def stats(self, booking_store):
        return StatisticsService(booking_store)

    def test_empty_stats(self, stats):
        result = stats.user_stats(ALICE)

        assert (result.total, result.confirmed, result.cancelled) == (0, 0, 0)
        assert result.confirmed_amount == Decimal("0")

    def test_user_and_platform_stats(self, bookings, stats, make_event):
        a1 = bookings.create_booking(ALICE, str(make_event(price="50.00").id), 2)
        bookings.create_booking(ALICE, str(make_event(price="20.00").id), 1)
        bookings.create_booking(BOB, str(make_event(price="10.00").id), 1)
        bookings.cancel_booking(ALICE, str(a1.booking.id))

        mine = stats.user_stats(ALICE)
        platform = stats.platform_stats(ADMIN)

        assert (mine.total, mine.confirmed, mine.cancelled) == (2, 1, 1)
        assert mine.confirmed_amount == Decimal("20.00")
        assert (platform.total, platform.confirmed, platform.cancelled) == (3, 2, 1)
        assert platform.confirmed_amount == Decimal("30.00")

    def test_platform_stats_require_admin(self, stats):
        with pytest.raises(AdminRequiredError):
            stats.platform_stats(ALICE)
