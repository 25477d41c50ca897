"""Serializers for booking requests and responses."""

from rest_framework import serializers

from events.handlers.serializers import EventSerializer, format_display_date


class BookingCreateSerializer(serializers.Serializer):
    """Request body for POST /api/bookings. Seat range is a booking rule."""

    event_id = serializers.CharField()
    seats = serializers.IntegerField()


class BookingQuerySerializer(serializers.Serializer):
    event_id = serializers.CharField(required=False, allow_blank=True)
    status = serializers.CharField(required=False, allow_blank=True)


class BookingSerializer(serializers.Serializer):
    """Serializer for BookingDetails: a booking with its event."""

    id = serializers.SerializerMethodField()
    user_id = serializers.IntegerField(source="booking.user_id")
    event = EventSerializer()
    seats = serializers.SerializerMethodField()
    total_amount = serializers.SerializerMethodField()
    status = serializers.SerializerMethodField()
    booking_date = serializers.DateTimeField(source="booking.booking_date")
    formatted_booking_date = serializers.SerializerMethodField()
    cancelled_at = serializers.DateTimeField(source="booking.cancelled_at", allow_null=True)
    formatted_cancelled_date = serializers.SerializerMethodField()

    def get_id(self, details) -> str:
        return str(details.booking.id)

    def get_seats(self, details) -> int:
        return details.booking.seats.value

    def get_total_amount(self, details) -> str:
        return str(details.booking.total_amount)

    def get_status(self, details) -> str:
        return details.booking.status.value

    def get_formatted_booking_date(self, details) -> str:
        return format_display_date(details.booking.booking_date)

    def get_formatted_cancelled_date(self, details) -> str | None:
        return format_display_date(details.booking.cancelled_at)


class AttendeeSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.CharField()
    seats = serializers.IntegerField()
    booking_date = serializers.SerializerMethodField()

    def get_booking_date(self, attendee) -> str:
        return format_display_date(attendee.booking_date)


class AvailabilitySerializer(serializers.Serializer):
    booked_seats = serializers.IntegerField()
    capacity = serializers.IntegerField(allow_null=True)
    available_seats = serializers.IntegerField(allow_null=True)


class UserStatsSerializer(serializers.Serializer):
    total_bookings = serializers.IntegerField(source="total")
    confirmed_bookings = serializers.IntegerField(source="confirmed")
    cancelled_bookings = serializers.IntegerField(source="cancelled")
    total_spent = serializers.DecimalField(
        source="confirmed_amount", max_digits=14, decimal_places=2
    )


class PlatformStatsSerializer(serializers.Serializer):
    total_bookings = serializers.IntegerField(source="total")
    confirmed_bookings = serializers.IntegerField(source="confirmed")
    cancelled_bookings = serializers.IntegerField(source="cancelled")
    total_revenue = serializers.DecimalField(
        source="confirmed_amount", max_digits=14, decimal_places=2
    )
