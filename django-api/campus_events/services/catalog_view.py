"""Enriched, read-only catalog views.

Combines the status calculator, the capacity aggregator and the bookmark
set into ``EventView`` records. Views are memoized per (event, now, user)
and the memo is discarded as soon as the ledger or bookmarks change, so a
view is never served from stale source data.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from enum import Enum

from campus_events.domain.models import (
    CatalogStats,
    Event,
    EventCategory,
    EventStatus,
    EventView,
)
from campus_events.domain.status import calculate_event_status
from campus_events.domain.value_objects import UserId
from campus_events.services.bookmarks import BookmarkSet
from campus_events.services.capacity import CapacityAggregator
from campus_events.services.ledger import RegistrationLedger


class SortBy(Enum):
    DATE = "date"
    NAME = "name"
    CATEGORY = "category"
    STATUS = "status"
    TIME = "time"


@dataclass(frozen=True)
class CatalogQuery:
    """Filters and ordering for catalog listings."""

    search: str = ""
    category: EventCategory | None = None
    status: EventStatus | None = None
    date_from: date | None = None
    date_to: date | None = None
    sort_by: SortBy = SortBy.DATE


def _matches_search(event: Event, needle: str) -> bool:
    haystacks = (event.name, event.description, event.department, event.organizer, event.venue)
    return any(needle in text.lower() for text in haystacks)


_SORT_KEYS = {
    SortBy.NAME: lambda view: view.event.name.casefold(),
    SortBy.CATEGORY: lambda view: view.event.category.value.casefold(),
    SortBy.STATUS: lambda view: view.status.sort_order,
    SortBy.TIME: lambda view: view.event.time.casefold(),
}


class EventCatalogView:
    """Composes status and counts for presentation code."""

    def __init__(
        self,
        ledger: RegistrationLedger,
        bookmarks: BookmarkSet | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        self._ledger = ledger
        self._bookmarks = bookmarks if bookmarks is not None else BookmarkSet()
        self._aggregator = CapacityAggregator(ledger)
        self._tz = tz
        self._memo: dict[tuple[Event, date | datetime, UserId | None], EventView] = {}
        self._memo_revision = self._source_revision()

    def _source_revision(self) -> tuple[int, int]:
        return (self._ledger.revision, self._bookmarks.revision)

    def view(
        self, event: Event, now: date | datetime, user_id: UserId | None = None
    ) -> EventView:
        revision = self._source_revision()
        if revision != self._memo_revision:
            self._memo.clear()
            self._memo_revision = revision

        key = (event, now, user_id)
        cached = self._memo.get(key)
        if cached is None:
            cached = self._build(event, now, user_id)
            self._memo[key] = cached
        return cached

    def _build(
        self, event: Event, now: date | datetime, user_id: UserId | None
    ) -> EventView:
        user_is_registered = user_checked_in = user_bookmarked = None
        if user_id is not None:
            registration = self._ledger.get(event.id, user_id)
            user_is_registered = registration is not None
            user_checked_in = registration is not None and registration.checked_in
            user_bookmarked = self._bookmarks.is_bookmarked(user_id, event.id)

        return EventView(
            event=event,
            status=calculate_event_status(event, now, self._tz),
            registered_count=self._aggregator.registered_count(event.id),
            checked_in_count=self._aggregator.checked_in_count(event.id),
            pending_count=self._aggregator.pending_count(event.id),
            utilization=self._aggregator.utilization(event.id, event.capacity),
            user_is_registered=user_is_registered,
            user_checked_in=user_checked_in,
            user_bookmarked=user_bookmarked,
        )

    def list_events(
        self,
        events: Iterable[Event],
        now: date | datetime,
        query: CatalogQuery = CatalogQuery(),
        user_id: UserId | None = None,
    ) -> list[EventView]:
        needle = query.search.strip().lower()
        views = []
        for event in events:
            if needle and not _matches_search(event, needle):
                continue
            if query.category is not None and event.category != query.category:
                continue
            if query.date_from is not None and event.date_start < query.date_from:
                continue
            if query.date_to is not None and event.date_start > query.date_to:
                continue
            view = self.view(event, now, user_id)
            if query.status is not None and view.status != query.status:
                continue
            views.append(view)

        if query.sort_by is SortBy.DATE:
            views.sort(key=lambda view: view.event.date_start, reverse=True)
        else:
            views.sort(key=_SORT_KEYS[query.sort_by])
        return views

    def highlights(
        self, events: Iterable[Event], now: date | datetime, limit: int = 3
    ) -> list[EventView]:
        """The next upcoming events, soonest first."""
        upcoming = [
            view
            for view in (self.view(event, now) for event in events)
            if view.status is EventStatus.UPCOMING
        ]
        upcoming.sort(key=lambda view: view.event.date_start)
        return upcoming[:limit]

    def stats(self, events: Iterable[Event], now: date | datetime) -> CatalogStats:
        counts = {status: 0 for status in EventStatus}
        registrations_for_upcoming = 0
        for event in events:
            view = self.view(event, now)
            counts[view.status] += 1
            if view.status is EventStatus.UPCOMING:
                registrations_for_upcoming += view.registered_count
        return CatalogStats(
            incoming=counts[EventStatus.INCOMING],
            upcoming=counts[EventStatus.UPCOMING],
            ongoing=counts[EventStatus.ONGOING],
            completed=counts[EventStatus.COMPLETED],
            registrations_for_upcoming=registrations_for_upcoming,
        )
