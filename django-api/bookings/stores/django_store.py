"""Django ORM implementation of the BookingStore."""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal

from django.db import IntegrityError, transaction
from django.db.models import Count, Q, Sum

from bookings import models
from bookings.domain import (
    Attendee,
    Booking,
    BookingDetails,
    BookingId,
    BookingStats,
    BookingStatus,
    SeatCount,
)
from bookings.domain.errors import DuplicateBookingError
from bookings.stores.interfaces import BookingStore
from events.domain import EventId, Money
from events.models import Event as EventRow
from events.stores.django_store import to_domain as event_to_domain

CONFIRMED = models.Booking.Status.CONFIRMED
CANCELLED = models.Booking.Status.CANCELLED


def to_domain(row: models.Booking) -> Booking:
    return Booking(
        id=BookingId(value=row.id),
        user_id=row.user_id,
        event_id=EventId(value=row.event_id),
        seats=SeatCount(value=row.seats),
        total_amount=Money(amount=row.total_amount),
        status=BookingStatus(row.status),
        booking_date=row.booking_date,
        cancelled_at=row.cancelled_at,
    )


def to_details(row: models.Booking) -> BookingDetails:
    return BookingDetails(booking=to_domain(row), event=event_to_domain(row.event))


class DjangoBookingStore(BookingStore):
    """PostgreSQL-backed booking store using Django ORM."""

    @contextmanager
    def event_lock(self, event_id: EventId) -> Iterator[None]:
        with transaction.atomic():
            # Row lock on the event; concurrent writers for the same event
            # wait here until this transaction ends. SQLite ignores FOR UPDATE
            # and serialises on the IMMEDIATE transaction instead.
            list(
                EventRow.objects.select_for_update()
                .filter(pk=event_id.value)
                .values_list("pk", flat=True)
            )
            yield

    def booked_seats(self, event_id: EventId) -> int:
        result = models.Booking.objects.filter(
            event_id=event_id.value, status=CONFIRMED
        ).aggregate(total=Sum("seats"))
        return result["total"] or 0

    def has_active_booking(self, user_id: int, event_id: EventId) -> bool:
        return models.Booking.objects.filter(
            user_id=user_id, event_id=event_id.value, status=CONFIRMED
        ).exists()

    def add(self, booking: Booking) -> Booking:
        try:
            with transaction.atomic():
                row = models.Booking.objects.create(
                    id=booking.id.value,
                    user_id=booking.user_id,
                    event_id=booking.event_id.value,
                    seats=booking.seats.value,
                    total_amount=booking.total_amount.amount,
                    status=booking.status.value,
                    booking_date=booking.booking_date,
                )
        except IntegrityError as exc:
            raise DuplicateBookingError() from exc
        return to_domain(row)

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        row = models.Booking.objects.filter(pk=booking_id.value).first()
        return to_domain(row) if row else None

    def mark_cancelled(self, booking: Booking) -> bool:
        updated = models.Booking.objects.filter(
            pk=booking.id.value, status=CONFIRMED
        ).update(status=CANCELLED, cancelled_at=booking.cancelled_at)
        return updated == 1

    def list_for_user(self, user_id: int) -> list[BookingDetails]:
        rows = (
            models.Booking.objects.filter(user_id=user_id)
            .select_related("event")
            .order_by("-booking_date")
        )
        return [to_details(row) for row in rows]

    def list_all(
        self, event_id: EventId | None = None, status: BookingStatus | None = None
    ) -> list[BookingDetails]:
        rows = models.Booking.objects.select_related("event")
        if event_id is not None:
            rows = rows.filter(event_id=event_id.value)
        if status is not None:
            rows = rows.filter(status=status.value)
        return [to_details(row) for row in rows.order_by("-booking_date")]

    def list_attendees(self, event_id: EventId) -> list[Attendee]:
        rows = (
            models.Booking.objects.filter(event_id=event_id.value, status=CONFIRMED)
            .select_related("user")
            .order_by("booking_date")
        )
        return [
            Attendee(
                user_id=row.user_id,
                name=row.user.get_full_name() or row.user.get_username(),
                email=row.user.email,
                seats=row.seats,
                booking_date=row.booking_date,
            )
            for row in rows
        ]

    def stats(self, user_id: int | None = None) -> BookingStats:
        rows = models.Booking.objects.all()
        if user_id is not None:
            rows = rows.filter(user_id=user_id)
        result = rows.aggregate(
            total=Count("id"),
            confirmed=Count("id", filter=Q(status=CONFIRMED)),
            cancelled=Count("id", filter=Q(status=CANCELLED)),
            confirmed_amount=Sum("total_amount", filter=Q(status=CONFIRMED)),
        )
        return BookingStats(
            total=result["total"],
            confirmed=result["confirmed"],
            cancelled=result["cancelled"],
            confirmed_amount=result["confirmed_amount"] or Decimal("0"),
        )
