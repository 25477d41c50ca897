"""Serializers for transforming domain models to API responses.

Derived fields (status, formatted dates) are computed here and never stored.
"""

from django.utils import timezone
from rest_framework import serializers

DISPLAY_DATE_FORMAT = "%d-%b-%Y"


def format_display_date(value) -> str | None:
    """Render a date or datetime as DD-MMM-YYYY."""
    if value is None:
        return None
    return value.strftime(DISPLAY_DATE_FORMAT)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.SerializerMethodField()
    code = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    category = serializers.SerializerMethodField()
    location = serializers.CharField()
    location_type = serializers.SerializerMethodField()
    date = serializers.DateField()
    formatted_date = serializers.SerializerMethodField()
    time = serializers.CharField()
    capacity = serializers.SerializerMethodField()
    price = serializers.SerializerMethodField()
    image_url = serializers.CharField(allow_null=True)
    status = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()

    def get_id(self, event) -> str:
        return str(event.id)

    def get_category(self, event) -> str:
        return event.category.value

    def get_location_type(self, event) -> str:
        return event.location_type.value

    def get_formatted_date(self, event) -> str:
        return format_display_date(event.date)

    def get_capacity(self, event) -> int:
        return event.capacity.value

    def get_price(self, event) -> str:
        return str(event.price)

    def get_status(self, event) -> str:
        today = self.context.get("today") or timezone.localdate()
        return event.status_on(today).value


class EventQuerySerializer(serializers.Serializer):
    """Query string accepted by the event list endpoint."""

    search = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(required=False, allow_blank=True)
    location_type = serializers.CharField(required=False, allow_blank=True)
    start_date = serializers.CharField(required=False, allow_blank=True)
    end_date = serializers.CharField(required=False, allow_blank=True)
    status = serializers.CharField(required=False, allow_blank=True)
