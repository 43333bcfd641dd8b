"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers

from campus_events.domain import EventCategory, EventStatus, UserRole
from campus_events.services.catalog_view import CatalogQuery, SortBy


class EventViewSerializer(serializers.Serializer):
    """Serializer for the EventView domain model, flattened."""

    id = serializers.IntegerField(source="event.id.value")
    name = serializers.CharField(source="event.name")
    date_start = serializers.DateField(source="event.date_start")
    date_end = serializers.DateField(source="event.date_end")
    time = serializers.CharField(source="event.time")
    venue = serializers.CharField(source="event.venue")
    category = serializers.CharField(source="event.category.value")
    department = serializers.CharField(source="event.department")
    description = serializers.CharField(source="event.description")
    organizer = serializers.CharField(source="event.organizer")
    image_url = serializers.CharField(source="event.image_url", allow_null=True)
    registration_required = serializers.BooleanField(source="event.registration_required")
    registration_start = serializers.SerializerMethodField()
    registration_end = serializers.SerializerMethodField()
    capacity = serializers.SerializerMethodField()
    status = serializers.CharField(source="status.value")
    registered_count = serializers.IntegerField()
    checked_in_count = serializers.IntegerField()
    pending_count = serializers.IntegerField()
    utilization = serializers.FloatField(allow_null=True)
    user_is_registered = serializers.BooleanField(allow_null=True)
    user_checked_in = serializers.BooleanField(allow_null=True)
    user_bookmarked = serializers.BooleanField(allow_null=True)

    def get_registration_start(self, view) -> str | None:
        window = view.event.registration_window
        return window.start.isoformat() if window else None

    def get_registration_end(self, view) -> str | None:
        window = view.event.registration_window
        return window.end.isoformat() if window else None

    def get_capacity(self, view) -> int | str:
        capacity = view.event.capacity
        return str(capacity) if capacity.is_unlimited else capacity.value


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    event_id = serializers.IntegerField(source="event_id.value")
    user_id = serializers.CharField(source="user_id.value")
    name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField(source="role.value")
    department = serializers.CharField(allow_null=True)
    registered_at = serializers.DateTimeField()
    ticket = serializers.CharField(source="ticket.value")
    checked_in = serializers.BooleanField()
    checked_in_at = serializers.DateTimeField(allow_null=True)


class RegistrationRequestSerializer(serializers.Serializer):
    """Input for POST /api/events/{event_id}/registrations."""

    user_id = serializers.CharField(max_length=255)
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    role = serializers.ChoiceField(choices=[role.value for role in UserRole])
    department = serializers.CharField(max_length=255, required=False, allow_blank=True)


class CatalogQuerySerializer(serializers.Serializer):
    """Query parameters for GET /api/events."""

    search = serializers.CharField(required=False, allow_blank=True, default="")
    category = serializers.ChoiceField(
        choices=[category.value for category in EventCategory], required=False
    )
    status = serializers.ChoiceField(
        choices=[status.value for status in EventStatus], required=False
    )
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
    sort = serializers.ChoiceField(
        choices=[sort.value for sort in SortBy], required=False, default=SortBy.DATE.value
    )
    user_id = serializers.CharField(required=False, allow_blank=True)

    def to_query(self) -> CatalogQuery:
        data = self.validated_data
        return CatalogQuery(
            search=data["search"],
            category=EventCategory(data["category"]) if "category" in data else None,
            status=EventStatus(data["status"]) if "status" in data else None,
            date_from=data.get("date_from"),
            date_to=data.get("date_to"),
            sort_by=SortBy(data["sort"]),
        )


class CatalogStatsSerializer(serializers.Serializer):
    incoming = serializers.IntegerField()
    upcoming = serializers.IntegerField()
    ongoing = serializers.IntegerField()
    completed = serializers.IntegerField()
    total = serializers.IntegerField()
    registrations_for_upcoming = serializers.IntegerField()
