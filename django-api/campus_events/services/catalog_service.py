"""Catalog service - enriched event listings for the handlers.

Builds a fresh EventCatalogView from the stored ledger and bookmarks on
every call, so listings always reflect the latest registrations.
"""

from collections.abc import Callable
from datetime import datetime, tzinfo

from django.utils import timezone

from campus_events.domain import CatalogStats, EventView
from campus_events.services.catalog_view import CatalogQuery, EventCatalogView
from campus_events.services.event_service import EventService, parse_user_id
from campus_events.stores.interfaces import BookmarkStore, EventStore, RegistrationStore


class CatalogService:
    def __init__(
        self,
        events: EventStore,
        registrations: RegistrationStore,
        bookmarks: BookmarkStore,
        tz: tzinfo | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._events = EventService(events)
        self._registrations = registrations
        self._bookmarks = bookmarks
        self._tz = tz
        self._clock = clock

    def _view(self) -> EventCatalogView:
        return EventCatalogView(self._registrations.load(), self._bookmarks.load(), self._tz)

    def list_events(
        self, query: CatalogQuery = CatalogQuery(), user_id: str | None = None
    ) -> list[EventView]:
        user = parse_user_id(user_id) if user_id else None
        return self._view().list_events(self._events.list_events(), self._clock(), query, user)

    def get_event(self, event_id: str, user_id: str | None = None) -> EventView:
        """Raises InvalidEventIdError or EventNotFoundError."""
        event = self._events.get_event(event_id)
        user = parse_user_id(user_id) if user_id else None
        return self._view().view(event, self._clock(), user)

    def highlights(self, limit: int = 3) -> list[EventView]:
        return self._view().highlights(self._events.list_events(), self._clock(), limit)

    def stats(self) -> CatalogStats:
        return self._view().stats(self._events.list_events(), self._clock())
