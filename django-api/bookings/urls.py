from django.urls import path

from bookings.handlers import (
    BookingCancelView,
    BookingListCreateView,
    BookingStatsView,
    EventAttendeeListView,
    EventAvailabilityView,
    MyBookingListView,
    MyBookingStatsView,
)

urlpatterns = [
    path("bookings", BookingListCreateView.as_view(), name="booking-list"),
    path("bookings/mine", MyBookingListView.as_view(), name="my-booking-list"),
    path("bookings/mine/stats", MyBookingStatsView.as_view(), name="my-booking-stats"),
    path("bookings/stats", BookingStatsView.as_view(), name="booking-stats"),
    path(
        "bookings/<str:booking_id>/cancel",
        BookingCancelView.as_view(),
        name="booking-cancel",
    ),
    path(
        "events/<uuid:event_id>/availability",
        EventAvailabilityView.as_view(),
        name="event-availability",
    ),
    path(
        "events/<uuid:event_id>/attendees",
        EventAttendeeListView.as_view(),
        name="event-attendees",
    ),
]
