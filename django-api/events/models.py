"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="events"
    )
    name = models.CharField(max_length=100)
    sport_type = models.CharField(max_length=50)
    date_time = models.DateTimeField()
    description = models.TextField(max_length=1000, blank=True, null=True)
    venues = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "events"
        ordering = ["date_time"]
        indexes = [
            models.Index(fields=["user", "date_time"], name="events_user_date_time_idx"),
        ]

    def __str__(self) -> str:
        return self.name
