from events.stores.django_store import DjangoEventStore
from events.stores.interfaces import EventQuery, EventStore

__all__ = ["EventStore", "EventQuery", "DjangoEventStore"]
