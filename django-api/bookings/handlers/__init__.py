from bookings.handlers.views import (
    BookingCancelView,
    BookingListCreateView,
    BookingStatsView,
    EventAttendeeListView,
    EventAvailabilityView,
    MyBookingListView,
    MyBookingStatsView,
)

__all__ = [
    "BookingListCreateView",
    "BookingCancelView",
    "MyBookingListView",
    "MyBookingStatsView",
    "BookingStatsView",
    "EventAvailabilityView",
    "EventAttendeeListView",
]
