"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Resolve the requester from the authenticated user
- Call services for business logic
- Domain errors propagate to common.exception_handler for mapping
"""

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.domain import Requester
from bookings.handlers.serializers import (
    AttendeeSerializer,
    AvailabilitySerializer,
    BookingCreateSerializer,
    BookingQuerySerializer,
    BookingSerializer,
    PlatformStatsSerializer,
    UserStatsSerializer,
)
from bookings.services import BookingService, CapacityService, StatisticsService
from bookings.stores import DjangoBookingStore
from events.stores import DjangoEventStore


def get_booking_service() -> BookingService:
    return BookingService(DjangoBookingStore(), DjangoEventStore())


def get_capacity_service() -> CapacityService:
    return CapacityService(DjangoBookingStore(), DjangoEventStore())


def get_statistics_service() -> StatisticsService:
    return StatisticsService(DjangoBookingStore())


def requester_for(request: Request) -> Requester:
    return Requester(user_id=request.user.pk, is_admin=request.user.is_staff)


class BookingListCreateView(APIView):
    """Handler for GET (admin) and POST /api/bookings"""

    def get_permissions(self):
        if self.request.method == "GET":
            return [IsAdminUser()]
        return [IsAuthenticated()]

    def get(self, request: Request) -> Response:
        params = BookingQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        bookings = get_booking_service().list_bookings(
            requester_for(request),
            event_id=params.validated_data.get("event_id") or None,
            status=params.validated_data.get("status") or None,
        )
        return Response(BookingSerializer(bookings, many=True).data)

    def post(self, request: Request) -> Response:
        body = BookingCreateSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        details = get_booking_service().create_booking(
            requester_for(request),
            event_id=body.validated_data["event_id"],
            seats=body.validated_data["seats"],
        )
        return Response(BookingSerializer(details).data, status=status.HTTP_201_CREATED)


class BookingCancelView(APIView):
    """Handler for POST /api/bookings/{booking_id}/cancel"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, booking_id: str) -> Response:
        details = get_booking_service().cancel_booking(requester_for(request), booking_id)
        return Response(BookingSerializer(details).data)


class MyBookingListView(APIView):
    """Handler for GET /api/bookings/mine"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        bookings = get_booking_service().list_user_bookings(requester_for(request))
        return Response(BookingSerializer(bookings, many=True).data)


class MyBookingStatsView(APIView):
    """Handler for GET /api/bookings/mine/stats"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        stats = get_statistics_service().user_stats(requester_for(request))
        return Response(UserStatsSerializer(stats).data)


class BookingStatsView(APIView):
    """Handler for GET /api/bookings/stats"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request) -> Response:
        stats = get_statistics_service().platform_stats(requester_for(request))
        return Response(PlatformStatsSerializer(stats).data)


class EventAvailabilityView(APIView):
    """Handler for GET /api/events/{event_id}/availability"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request: Request, event_id) -> Response:
        availability = get_capacity_service().availability(str(event_id))
        return Response(AvailabilitySerializer(availability).data)


class EventAttendeeListView(APIView):
    """Handler for GET /api/events/{event_id}/attendees"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request, event_id) -> Response:
        attendees = get_booking_service().list_attendees(
            requester_for(request), str(event_id)
        )
        return Response(AttendeeSerializer(attendees, many=True).data)
