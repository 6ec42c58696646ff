import typing as t

from django.db import models

from common.models import TimeStampedModel

DEFAULT_COVER_COLOR = "#E87D2B"


class EventQuerySet(models.QuerySet["Event"]):
    def published(self) -> t.Self:
        """Events visible in the app."""
        return self.filter(status=Event.EventStatus.PUBLISHED)


class EventManager(models.Manager["Event"]):
    def get_queryset(self) -> EventQuerySet:
        """Get base queryset for events."""
        return EventQuerySet(self.model, using=self._db)

    def published(self) -> EventQuerySet:
        """Events visible in the app."""
        return self.get_queryset().published()


class Event(TimeStampedModel):
    """A festival, concert or any other happening tickets are sold for."""

    class EventStatus(models.TextChoices):
        DRAFT = "draft", "Draft"
        PUBLISHED = "published", "Published"
        CANCELLED = "cancelled", "Cancelled"

    title = models.CharField(max_length=255, db_index=True)
    subtitle = models.CharField(max_length=255, blank=True, default="")
    description = models.TextField(blank=True, default="")
    start_date = models.DateTimeField(db_index=True)
    end_date = models.DateTimeField(null=True, blank=True)
    start_time = models.CharField(
        max_length=32, blank=True, default="", help_text="Display start time, e.g. '7:00PM'. Overrides start_date time."
    )
    venue = models.CharField(max_length=255, blank=True, default="")
    address = models.CharField(max_length=255, blank=True, default="")
    cover_image = models.URLField(max_length=500, null=True, blank=True)
    cover_color = models.CharField(max_length=16, default=DEFAULT_COVER_COLOR, help_text="Ticket background colour")
    is_top_level = models.BooleanField(default=False, help_text="Festival rather than a sub-event")
    is_private = models.BooleanField(default=False)
    status = models.CharField(
        max_length=20, choices=EventStatus.choices, default=EventStatus.PUBLISHED, db_index=True
    )
    attendees_count = models.PositiveIntegerField(default=0)

    objects = EventManager()

    class Meta:
        ordering = ["start_date"]

    def __str__(self) -> str:
        return self.title
