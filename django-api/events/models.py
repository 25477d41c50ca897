"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import secrets
import string
import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_event_code(event_date) -> str:
    """Build a human-readable code such as EVT-MAR2026-7QX."""
    suffix = "".join(secrets.choice(CODE_ALPHABET) for _ in range(3))
    return f"EVT-{event_date.strftime('%b').upper()}{event_date.year}-{suffix}"


class Event(models.Model):
    """Persistence model for events."""

    class Category(models.TextChoices):
        MUSIC = "Music"
        TECH = "Tech"
        BUSINESS = "Business"
        EDUCATION = "Education"
        SPORTS = "Sports"
        ARTS = "Arts"
        OTHER = "Other"

    class LocationType(models.TextChoices):
        ONLINE = "Online"
        IN_PERSON = "In-Person"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=20, unique=True, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField()
    category = models.CharField(max_length=20, choices=Category.choices)
    location = models.CharField(max_length=255)
    location_type = models.CharField(max_length=20, choices=LocationType.choices)
    date = models.DateField()
    time = models.CharField(max_length=50)
    capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )
    image_url = models.URLField(max_length=500, blank=True, null=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_events",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["date"]
        indexes = [
            models.Index(fields=["date"], name="event_date_idx"),
            models.Index(fields=["category", "date"], name="event_category_date_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(capacity__gte=1), name="event_capacity_positive"
            ),
            models.CheckConstraint(
                condition=models.Q(price__gte=0), name="event_price_non_negative"
            ),
        ]

    def save(self, *args, **kwargs):
        if not self.code:
            self.code = generate_event_code(self.date)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.code} {self.title}"
