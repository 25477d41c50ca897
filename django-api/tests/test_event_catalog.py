"""Integration tests for the public event catalog.

Run with: pytest tests/test_event_catalog.py -v
"""

import re
import uuid
from datetime import date, timedelta

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from events.models import Event


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events_returns_catalog(self, api_client: APIClient, create_event, today):
        event = create_event(date=today + timedelta(days=3))

        response = api_client.get("/api/events")

        assert response.status_code == 200
        [item] = response.json()
        assert item["id"] == str(event.id)
        assert item["code"] == event.code
        assert item["code"].startswith("EVT-")
        assert item["capacity"] == 2
        assert item["price"] == "50.00"
        assert item["status"] == "Upcoming"
        assert item["formatted_date"] == (today + timedelta(days=3)).strftime("%d-%b-%Y")

    def test_list_events_empty_catalog(self, api_client: APIClient):
        response = api_client.get("/api/events")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_events_ordered_by_date(self, api_client: APIClient, create_event, today):
        later = create_event(title="Later", date=today + timedelta(days=9))
        sooner = create_event(title="Sooner", date=today + timedelta(days=2))

        response = api_client.get("/api/events")

        assert [item["id"] for item in response.json()] == [str(sooner.id), str(later.id)]

    def test_search_matches_title_description_and_location(
        self, api_client: APIClient, create_event
    ):
        create_event(title="PyCon", category="Tech", location="Bergen")
        create_event(title="Jazz Night")

        response = api_client.get("/api/events", {"search": "bergen"})

        assert [item["title"] for item in response.json()] == ["PyCon"]

    def test_filter_by_category_and_location_type(self, api_client: APIClient, create_event):
        create_event(title="Webinar", category="Tech", location_type="Online")
        create_event(title="Meetup", category="Tech")
        create_event(title="Concert")

        response = api_client.get(
            "/api/events", {"category": "Tech", "location_type": "Online"}
        )

        assert [item["title"] for item in response.json()] == ["Webinar"]

    def test_filter_by_date_range(self, api_client: APIClient, create_event, today):
        create_event(title="Early", date=today + timedelta(days=1))
        create_event(title="Middle", date=today + timedelta(days=5))
        create_event(title="Late", date=today + timedelta(days=10))

        response = api_client.get(
            "/api/events",
            {
                "start_date": (today + timedelta(days=2)).isoformat(),
                "end_date": (today + timedelta(days=9)).isoformat(),
            },
        )

        assert [item["title"] for item in response.json()] == ["Middle"]

    @pytest.mark.parametrize(
        "status, title",
        [("Completed", "Yesterday"), ("Ongoing", "Today"), ("Upcoming", "Tomorrow")],
    )
    def test_filter_by_derived_status(
        self, api_client: APIClient, create_event, today, status, title
    ):
        create_event(title="Yesterday", date=today - timedelta(days=1))
        create_event(title="Today", date=today)
        create_event(title="Tomorrow", date=today + timedelta(days=1))

        response = api_client.get("/api/events", {"status": status})

        [item] = response.json()
        assert item["title"] == title
        assert item["status"] == status

    def test_unknown_filter_value_rejected(self, api_client: APIClient):
        response = api_client.get("/api/events", {"category": "Cooking"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_EVENT_FILTER"
        assert error["details"]["field"] == "category"

    def test_list_events_cached_response(self, api_client: APIClient, create_event):
        event = create_event()
        first = api_client.get("/api/events").json()

        # Bypass signals so the cached payload is served unchanged.
        type(event).objects.filter(pk=event.pk).update(title="Renamed")
        second = api_client.get("/api/events").json()

        assert second == first


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient, create_event):
        event = create_event(image_url="https://example.com/jazz.png")

        response = api_client.get(f"/api/events/{event.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(event.id)
        assert data["title"] == "Jazz Night"
        assert data["category"] == "Music"
        assert data["location_type"] == "In-Person"
        assert data["image_url"] == "https://example.com/jazz.png"

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/events/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "EVENT_NOT_FOUND"

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/events/not-a-uuid")

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_EVENT_ID"
        assert error["details"] == {"field": "event_id", "rule": "uuid"}


@pytest.mark.django_db
class TestCategoryList:
    """Tests for GET /api/events/categories"""

    def test_list_categories(self, api_client: APIClient):
        response = api_client.get("/api/events/categories")

        assert response.status_code == 200
        assert response.json() == [
            "Music", "Tech", "Business", "Education", "Sports", "Arts", "Other",
        ]


@pytest.mark.django_db
class TestEventModel:
    """Tests for the persisted Event model."""

    def test_created_by_references_configured_user_model(self, create_event, admin_user):
        event = create_event(created_by=admin_user)

        field = Event._meta.get_field("created_by")
        assert field.remote_field.model is get_user_model()
        assert list(admin_user.created_events.all()) == [event]

    def test_code_generated_from_event_date(self, create_event):
        event = create_event(date=date(2027, 3, 14))

        assert re.fullmatch(r"EVT-MAR2027-[A-Z0-9]{3}", event.code)
