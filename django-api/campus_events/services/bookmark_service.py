"""Bookmark service."""

from campus_events.domain import EventId
from campus_events.services.event_service import EventService, parse_event_id, parse_user_id
from campus_events.stores.interfaces import BookmarkStore, EventStore


class BookmarkService:
    def __init__(self, events: EventStore, bookmarks: BookmarkStore) -> None:
        self._events = EventService(events)
        self._store = bookmarks

    def bookmarks_for(self, user_id: str) -> list[EventId]:
        return self._store.load().bookmarks_for(parse_user_id(user_id))

    def bookmark(self, user_id: str, event_id: str) -> bool:
        """Bookmark an existing event. Returns False if it was already bookmarked."""
        parsed = self._events.require_event(event_id)
        bookmarks = self._store.load()
        added = bookmarks.bookmark(parse_user_id(user_id), parsed)
        if added:
            self._store.save(bookmarks)
        return added

    def unbookmark(self, user_id: str, event_id: str) -> bool:
        # No existence check, so bookmarks of deleted events can still be removed.
        bookmarks = self._store.load()
        removed = bookmarks.unbookmark(parse_user_id(user_id), parse_event_id(event_id))
        if removed:
            self._store.save(bookmarks)
        return removed
