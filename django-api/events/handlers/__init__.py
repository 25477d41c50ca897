from events.handlers.views import CategoryListView, EventDetailView, EventListView

__all__ = ["EventListView", "EventDetailView", "CategoryListView"]
