"""Per-user event bookmarks."""

from collections.abc import Iterable
from typing import Self

from campus_events.domain.value_objects import EventId, UserId


class BookmarkSet:
    """Idempotent bookmark collection keyed by user."""

    def __init__(self) -> None:
        self._bookmarks: dict[UserId, list[EventId]] = {}
        self._revision = 0

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[UserId, EventId]]) -> Self:
        bookmarks = cls()
        for user_id, event_id in pairs:
            bookmarks.bookmark(user_id, event_id)
        bookmarks._revision = 0
        return bookmarks

    @property
    def revision(self) -> int:
        return self._revision

    def pairs(self) -> list[tuple[UserId, EventId]]:
        return [(user, event) for user, events in self._bookmarks.items() for event in events]

    def bookmark(self, user_id: UserId, event_id: EventId) -> bool:
        """Add a bookmark. Returns False when it already existed."""
        events = self._bookmarks.setdefault(user_id, [])
        if event_id in events:
            return False
        events.append(event_id)
        self._revision += 1
        return True

    def unbookmark(self, user_id: UserId, event_id: EventId) -> bool:
        """Remove a bookmark. Returns False when there was none."""
        events = self._bookmarks.get(user_id, [])
        if event_id not in events:
            return False
        events.remove(event_id)
        self._revision += 1
        return True

    def is_bookmarked(self, user_id: UserId, event_id: EventId) -> bool:
        return event_id in self._bookmarks.get(user_id, [])

    def bookmarks_for(self, user_id: UserId) -> list[EventId]:
        return list(self._bookmarks.get(user_id, []))
