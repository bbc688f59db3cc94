"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Webinar(models.Model):
    """Persistence model for webinars."""

    id = models.CharField(primary_key=True, max_length=64, editable=False)
    organizer_id = models.CharField(max_length=64, db_index=True)
    title = models.CharField(max_length=255)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    seats = models.PositiveIntegerField()
    version = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["start_date"]
        indexes = [
            models.Index(fields=["start_date"], name="webinar_start_date_idx"),
        ]

    def __str__(self) -> str:
        return self.title
