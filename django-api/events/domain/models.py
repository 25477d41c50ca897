"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from events.domain.value_objects import Capacity, EventId, Money


class Category(Enum):
    MUSIC = "Music"
    TECH = "Tech"
    BUSINESS = "Business"
    EDUCATION = "Education"
    SPORTS = "Sports"
    ARTS = "Arts"
    OTHER = "Other"


class LocationType(Enum):
    ONLINE = "Online"
    IN_PERSON = "In-Person"


class EventStatus(Enum):
    """Lifecycle of an event relative to the current calendar date."""

    UPCOMING = "Upcoming"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"

    @classmethod
    def on(cls, event_date: date, today: date) -> "EventStatus":
        if event_date < today:
            return cls.COMPLETED
        if event_date == today:
            return cls.ONGOING
        return cls.UPCOMING


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    code: str
    title: str
    description: str
    category: Category
    location: str
    location_type: LocationType
    date: date
    time: str
    capacity: Capacity
    price: Money
    image_url: str | None
    created_at: datetime

    def status_on(self, today: date) -> EventStatus:
        return EventStatus.on(self.date, today)

    def has_passed(self, today: date) -> bool:
        """True once the event's day is over."""
        return self.date < today

    def has_started(self, today: date) -> bool:
        """True from the event's day onwards."""
        return self.date <= today
