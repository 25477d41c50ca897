"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class Booking(models.Model):
    """Persistence model for bookings. Rows are never deleted."""

    class Status(models.TextChoices):
        CONFIRMED = "confirmed", "Confirmed"
        CANCELLED = "cancelled", "Cancelled"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="bookings"
    )
    event = models.ForeignKey(
        "events.Event", on_delete=models.PROTECT, related_name="bookings"
    )
    seats = models.PositiveSmallIntegerField()
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.CONFIRMED
    )
    booking_date = models.DateTimeField(default=timezone.now)
    cancelled_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-booking_date"]
        indexes = [
            models.Index(fields=["event", "status"], name="booking_event_status_idx"),
            models.Index(fields=["user", "-booking_date"], name="booking_user_date_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(seats__gte=1, seats__lte=2),
                name="booking_seats_in_range",
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(status="confirmed", cancelled_at__isnull=True)
                    | models.Q(status="cancelled", cancelled_at__isnull=False)
                ),
                name="booking_cancelled_at_matches_status",
            ),
            models.UniqueConstraint(
                fields=["user", "event"],
                condition=models.Q(status="confirmed"),
                name="booking_one_active_per_user_event",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user} x{self.seats} @ {self.event} ({self.status})"
