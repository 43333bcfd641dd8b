"""Event service - catalog lookups for the handlers.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from campus_events.domain import Event, EventId, UserId
from campus_events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidUserIdError,
)
from campus_events.stores.interfaces import EventStore


def parse_event_id(event_id: str) -> EventId:
    """Raises InvalidEventIdError for anything that is not an integer."""
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


def parse_user_id(user_id: str) -> UserId:
    try:
        return UserId(user_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidUserIdError() from exc


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not an integer.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def require_event(self, event_id: str) -> EventId:
        """Return the parsed ID of an existing event.

        Raises:
            InvalidEventIdError: If the event_id is not an integer.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        if not self._store.event_exists(parsed):
            raise EventNotFoundError(event_id)
        return parsed
