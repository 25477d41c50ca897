from django.contrib import admin

from bookings.models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    """Read-only booking history; changes go through the booking API."""

    list_display = ["id", "user", "event", "seats", "total_amount", "status", "booking_date"]
    list_filter = ["status", "event"]
    search_fields = ["user__username", "user__email", "event__code", "event__title"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
