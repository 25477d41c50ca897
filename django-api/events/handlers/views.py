"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Domain errors propagate to common.exception_handler for mapping
"""

from django.core.cache import cache
from django.utils import timezone
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events import cache as catalog_cache
from events.handlers.serializers import EventQuerySerializer, EventSerializer
from events.services import EventService
from events.stores import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


class EventListView(APIView):
    """Handler for GET /api/events"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        params = EventQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        today = timezone.localdate()
        key = catalog_cache.list_key(today, request.query_params.urlencode())
        data = cache.get(key)
        if data is None:
            events = get_event_service().list_events(**params.validated_data)
            data = list(EventSerializer(events, many=True, context={"today": today}).data)
            cache.set(key, data, catalog_cache.timeout())
        return Response(data)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    permission_classes = [AllowAny]

    def get(self, request: Request, event_id: str) -> Response:
        today = timezone.localdate()
        key = catalog_cache.detail_key(today, event_id)
        data = cache.get(key)
        if data is None:
            event = get_event_service().get_event(event_id)
            data = dict(EventSerializer(event, context={"today": today}).data)
            cache.set(key, data, catalog_cache.timeout())
        return Response(data)


class CategoryListView(APIView):
    """Handler for GET /api/events/categories"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        return Response(get_event_service().list_categories())
