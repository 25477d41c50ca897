from events.domain.models import Category, Event, EventStatus, LocationType
from events.domain.value_objects import Capacity, EventId, Money

__all__ = [
    "Event",
    "EventStatus",
    "Category",
    "LocationType",
    "EventId",
    "Money",
    "Capacity",
]
