"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date

from events.domain import Category, Event, EventId, EventStatus, LocationType


@dataclass(frozen=True)
class EventQuery:
    """Catalog filters. Unset fields do not filter."""

    search: str | None = None
    category: Category | None = None
    location_type: LocationType | None = None
    start_date: date | None = None
    end_date: date | None = None
    status: EventStatus | None = None


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, query: EventQuery, today: date) -> list[Event]:
        """Return events matching the query ordered by date ascending.

        ``today`` resolves the derived status filter.
        """
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...
