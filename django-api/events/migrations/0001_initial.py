import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("code", models.CharField(editable=False, max_length=20, unique=True)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Music", "Music"),
                            ("Tech", "Tech"),
                            ("Business", "Business"),
                            ("Education", "Education"),
                            ("Sports", "Sports"),
                            ("Arts", "Arts"),
                            ("Other", "Other"),
                        ],
                        max_length=20,
                    ),
                ),
                ("location", models.CharField(max_length=255)),
                (
                    "location_type",
                    models.CharField(
                        choices=[("Online", "Online"), ("In-Person", "In Person")],
                        max_length=20,
                    ),
                ),
                ("date", models.DateField()),
                ("time", models.CharField(max_length=50)),
                ("capacity", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="created_events",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["date"],
                "indexes": [
                    models.Index(fields=["date"], name="event_date_idx"),
                    models.Index(fields=["category", "date"], name="event_category_date_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("capacity__gte", 1)), name="event_capacity_positive"),
                    models.CheckConstraint(condition=models.Q(("price__gte", 0)), name="event_price_non_negative"),
                ],
            },
        ),
    ]
