"""Django ORM implementation of the EventStore."""

from datetime import date

from django.db.models import Q

from events import models
from events.domain import Capacity, Category, Event, EventId, EventStatus, LocationType, Money
from events.stores.interfaces import EventQuery, EventStore


def to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        code=row.code,
        title=row.title,
        description=row.description,
        category=Category(row.category),
        location=row.location,
        location_type=LocationType(row.location_type),
        date=row.date,
        time=row.time,
        capacity=Capacity(value=row.capacity),
        price=Money(amount=row.price),
        image_url=row.image_url or None,
        created_at=row.created_at,
    )


class DjangoEventStore(EventStore):
    """PostgreSQL-backed event store using Django ORM."""

    def list_events(self, query: EventQuery, today: date) -> list[Event]:
        queryset = models.Event.objects.all()

        if query.search:
            queryset = queryset.filter(
                Q(title__icontains=query.search)
                | Q(description__icontains=query.search)
                | Q(location__icontains=query.search)
            )
        if query.category:
            queryset = queryset.filter(category=query.category.value)
        if query.location_type:
            queryset = queryset.filter(location_type=query.location_type.value)
        if query.start_date:
            queryset = queryset.filter(date__gte=query.start_date)
        if query.end_date:
            queryset = queryset.filter(date__lte=query.end_date)

        if query.status is EventStatus.UPCOMING:
            queryset = queryset.filter(date__gt=today)
        elif query.status is EventStatus.ONGOING:
            queryset = queryset.filter(date=today)
        elif query.status is EventStatus.COMPLETED:
            queryset = queryset.filter(date__lt=today)

        return [to_domain(row) for row in queryset.order_by("date", "created_at")]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return to_domain(row) if row else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()
