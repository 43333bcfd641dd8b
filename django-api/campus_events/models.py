"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

from django.core.validators import MinValueValidator
from django.db import models


class Event(models.Model):
    """Persistence model for catalog events."""

    class Category(models.TextChoices):
        ACADEMIC = "academic"
        CULTURAL = "cultural"
        SPORTS = "sports"
        TECHNICAL = "technical"

    name = models.CharField(max_length=255)
    date_start = models.DateField()
    date_end = models.DateField()
    time = models.CharField(max_length=64, blank=True)
    venue = models.CharField(max_length=255, blank=True)
    category = models.CharField(max_length=20, choices=Category.choices, default=Category.ACADEMIC)
    department = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    organizer = models.CharField(max_length=255, blank=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    registration_required = models.BooleanField(default=False)
    registration_start = models.DateField(blank=True, null=True)
    registration_end = models.DateField(blank=True, null=True)
    # NULL means "No limit".
    capacity = models.PositiveIntegerField(blank=True, null=True, validators=[MinValueValidator(1)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-date_start", "id"]
        indexes = [
            models.Index(fields=["-date_start"], name="event_date_start_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(date_end__gte=models.F("date_start")),
                name="event_ends_after_start",
            ),
            models.CheckConstraint(
                condition=models.Q(capacity__isnull=True) | models.Q(capacity__gte=1),
                name="event_capacity_positive",
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(registration_start__isnull=True, registration_end__isnull=True)
                    | models.Q(registration_start__isnull=False, registration_end__isnull=False)
                ),
                name="event_registration_window_complete",
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(registration_start__isnull=True)
                    | models.Q(registration_end__isnull=True)
                    | models.Q(registration_end__gte=models.F("registration_start"))
                ),
                name="event_registration_window_ordered",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class Registration(models.Model):
    """One row of the serialized registration ledger."""

    class Role(models.TextChoices):
        STUDENT = "student"
        FACULTY = "faculty"
        VISITOR = "visitor"

    # Plain integer: the catalog is owned elsewhere and may drop events.
    event_id = models.IntegerField()
    user_id = models.CharField(max_length=255)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    role = models.CharField(max_length=20, choices=Role.choices)
    department = models.CharField(max_length=255, blank=True, null=True)
    registered_at = models.DateTimeField()
    ticket = models.CharField(max_length=64, unique=True)
    checked_in = models.BooleanField(default=False)
    checked_in_at = models.DateTimeField(blank=True, null=True)
    position = models.PositiveIntegerField()

    class Meta:
        ordering = ["position"]
        indexes = [
            models.Index(fields=["event_id"], name="registration_event_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["event_id", "user_id"], name="one_registration_per_user"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.event_id}"


class Bookmark(models.Model):
    """A user's bookmark of an event."""

    user_id = models.CharField(max_length=255)
    event_id = models.IntegerField()
    position = models.PositiveIntegerField()

    class Meta:
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(fields=["user_id", "event_id"], name="one_bookmark_per_event"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} - {self.event_id}"
