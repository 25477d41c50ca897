"""Load a sample event catalog.

Usage: python manage.py seed_events [--clear]

Dates are relative to today so the seeded catalog is always upcoming.
"""

from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.db.models import ProtectedError
from django.utils import timezone

from events.models import Event

SAMPLE_EVENTS = [
    {
        "title": "Tech Conference",
        "description": "The biggest tech conference of the year featuring AI, blockchain and cloud computing experts.",
        "category": Event.Category.TECH,
        "location": "San Francisco Convention Center",
        "location_type": Event.LocationType.IN_PERSON,
        "days_ahead": 7,
        "time": "09:00",
        "capacity": 1000,
        "price": "299.00",
        "image_url": "https://images.unsplash.com/photo-1540575467063-178a50c2df87?w=500",
    },
    {
        "title": "Jazz Night Live",
        "description": "An evening of smooth jazz with live performances from top artists.",
        "category": Event.Category.MUSIC,
        "location": "Blue Note Jazz Club",
        "location_type": Event.LocationType.IN_PERSON,
        "days_ahead": 12,
        "time": "20:00",
        "capacity": 500,
        "price": "75.00",
        "image_url": "https://images.unsplash.com/photo-1493225457124-a3eb161ffa5f?w=500",
    },
    {
        "title": "Digital Marketing Workshop",
        "description": "The latest digital marketing strategies from industry experts, for entrepreneurs and marketers.",
        "category": Event.Category.BUSINESS,
        "location": "Online",
        "location_type": Event.LocationType.ONLINE,
        "days_ahead": 17,
        "time": "14:00",
        "capacity": 2000,
        "price": "49.00",
        "image_url": "https://images.unsplash.com/photo-1460925895917-afdab827c52f?w=500",
    },
    {
        "title": "Yoga Retreat Weekend",
        "description": "A weekend retreat in the mountains focused on yoga, meditation and wellness.",
        "category": Event.Category.SPORTS,
        "location": "Mountain View Resort",
        "location_type": Event.LocationType.IN_PERSON,
        "days_ahead": 24,
        "time": "08:00",
        "capacity": 200,
        "price": "299.00",
        "image_url": "https://images.unsplash.com/photo-1506905925346-21bda4d32df4?w=500",
    },
    {
        "title": "Art Exhibition Opening",
        "description": "Opening night of a contemporary exhibition with local and international artists.",
        "category": Event.Category.ARTS,
        "location": "Modern Art Gallery",
        "location_type": Event.LocationType.IN_PERSON,
        "days_ahead": 28,
        "time": "18:00",
        "capacity": 300,
        "price": "25.00",
        "image_url": "https://images.unsplash.com/photo-1541961017774-22349e4a1262?w=500",
    },
    {
        "title": "Web Development Bootcamp",
        "description": "Four weeks of HTML, CSS, JavaScript and React for beginners.",
        "category": Event.Category.EDUCATION,
        "location": "Online",
        "location_type": Event.LocationType.ONLINE,
        "days_ahead": 33,
        "time": "10:00",
        "capacity": 500,
        "price": "199.00",
        "image_url": "https://images.unsplash.com/photo-1516321318423-f06f85e504b3?w=500",
    },
    {
        "title": "Rock Concert",
        "description": "Multiple bands and a full stage show.",
        "category": Event.Category.MUSIC,
        "location": "Stadium Arena",
        "location_type": Event.LocationType.IN_PERSON,
        "days_ahead": 38,
        "time": "19:00",
        "capacity": 15000,
        "price": "89.00",
        "image_url": "https://images.unsplash.com/photo-1493225457124-a3eb161ffa5f?w=500",
    },
    {
        "title": "Startup Networking Event",
        "description": "Meet fellow entrepreneurs, investors and industry leaders.",
        "category": Event.Category.BUSINESS,
        "location": "Innovation Hub",
        "location_type": Event.LocationType.IN_PERSON,
        "days_ahead": 43,
        "time": "17:00",
        "capacity": 800,
        "price": "99.00",
        "image_url": "https://images.unsplash.com/photo-1552664730-d307ca884978?w=500",
    },
    {
        "title": "Cooking Masterclass",
        "description": "Hands-on instruction from a professional chef.",
        "category": Event.Category.EDUCATION,
        "location": "Culinary Institute",
        "location_type": Event.LocationType.IN_PERSON,
        "days_ahead": 48,
        "time": "15:00",
        "capacity": 100,
        "price": "150.00",
        "image_url": "https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?w=500",
    },
    {
        "title": "City Marathon",
        "description": "Annual city marathon with scenic routes and professional timing. All levels welcome.",
        "category": Event.Category.SPORTS,
        "location": "City Center",
        "location_type": Event.LocationType.IN_PERSON,
        "days_ahead": 52,
        "time": "07:00",
        "capacity": 5000,
        "price": "75.00",
        "image_url": "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=500",
    },
]


class Command(BaseCommand):
    help = "Create the sample event catalog."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete existing events first. Fails if any event has bookings.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["clear"]:
            try:
                deleted, _ = Event.objects.all().delete()
            except ProtectedError:
                raise CommandError("Events with bookings cannot be deleted") from None
            self.stdout.write(f"Deleted {deleted} events")

        today = timezone.localdate()
        owner = get_user_model().objects.filter(is_staff=True).order_by("pk").first()
        for sample in SAMPLE_EVENTS:
            fields = dict(sample)
            days_ahead = fields.pop("days_ahead")
            price = Decimal(fields.pop("price"))
            event = Event.objects.create(
                **fields,
                date=today + timedelta(days=days_ahead),
                price=price,
                created_by=owner,
            )
            self.stdout.write(f"Created {event.code} {event.title}")

        self.stdout.write(self.style.SUCCESS(f"Seeded {len(SAMPLE_EVENTS)} events"))
