"""In-memory store implementations.

The registration store keeps the serialized record list rather than the
live ledger object, so each ``load`` hands out an independent copy the same
way a file or browser-storage backend would.
"""

from collections.abc import Iterable
from typing import Any

from campus_events.domain import Event, EventId
from campus_events.services.bookmarks import BookmarkSet
from campus_events.services.ledger import RegistrationLedger
from campus_events.stores.interfaces import BookmarkStore, EventStore, RegistrationStore
from campus_events.stores.records import ledger_from_records, ledger_to_records


class InMemoryEventStore(EventStore):
    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._events: dict[EventId, Event] = {event.id: event for event in events}

    def list_events(self) -> list[Event]:
        return list(self._events.values())

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self._events

    def save_event(self, event: Event) -> None:
        self._events[event.id] = event

    def delete_event(self, event_id: EventId) -> None:
        self._events.pop(event_id, None)


class InMemoryRegistrationStore(RegistrationStore):
    def __init__(self, records: Iterable[dict[str, Any]] = ()) -> None:
        self.records: list[dict[str, Any]] = list(records)

    def load(self) -> RegistrationLedger:
        return ledger_from_records(self.records)

    def save(self, ledger: RegistrationLedger) -> None:
        self.records = ledger_to_records(ledger)


class InMemoryBookmarkStore(BookmarkStore):
    def __init__(self) -> None:
        self._bookmarks = BookmarkSet()

    def load(self) -> BookmarkSet:
        return BookmarkSet.from_pairs(self._bookmarks.pairs())

    def save(self, bookmarks: BookmarkSet) -> None:
        self._bookmarks = BookmarkSet.from_pairs(bookmarks.pairs())
