from django.urls import path

from events.handlers import CategoryListView, EventDetailView, EventListView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/categories", CategoryListView.as_view(), name="event-categories"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
]
