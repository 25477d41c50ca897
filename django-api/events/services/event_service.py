"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from collections.abc import Callable
from datetime import date
from enum import Enum

from django.utils import timezone

from events.domain import Category, Event, EventId, EventStatus, LocationType
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventFilterError,
    InvalidEventIdError,
)
from events.stores.interfaces import EventQuery, EventStore


def parse_event_id(event_id: str, field: str = "event_id") -> EventId:
    """Parse a raw identifier, raising InvalidEventIdError when malformed."""
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError):
        raise InvalidEventIdError(field=field) from None


def _parse_choice(enum_cls: type[Enum], field: str, raw: str | None):
    if not raw:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        raise InvalidEventFilterError(field=field, rule="choice") from None


def _parse_date(field: str, raw: str | None) -> date | None:
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise InvalidEventFilterError(field=field, rule="iso_date") from None


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore, today: Callable[[], date] = timezone.localdate) -> None:
        self._store = store
        self._today = today

    def list_events(
        self,
        search: str | None = None,
        category: str | None = None,
        location_type: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        status: str | None = None,
    ) -> list[Event]:
        """Return events matching the raw catalog filters.

        Raises:
            InvalidEventFilterError: If a filter value cannot be parsed.
        """
        query = EventQuery(
            search=search.strip() if search else None,
            category=_parse_choice(Category, "category", category),
            location_type=_parse_choice(LocationType, "location_type", location_type),
            start_date=_parse_date("start_date", start_date),
            end_date=_parse_date("end_date", end_date),
            status=_parse_choice(EventStatus, "status", status),
        )
        return self._store.list_events(query, today=self._today())

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(str(parsed))
        return event

    def list_categories(self) -> list[str]:
        return [category.value for category in Category]
