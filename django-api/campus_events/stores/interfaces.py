"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from campus_events.domain import Event, EventId
from campus_events.services.bookmarks import BookmarkSet
from campus_events.services.ledger import RegistrationLedger


class EventStore(ABC):
    """Interface to the externally owned event catalog."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in catalog order."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def save_event(self, event: Event) -> None:
        """Create or replace an event (catalog editing workflows)."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        """Remove an event from the catalog if present."""
        ...


class RegistrationStore(ABC):
    """Persistence boundary of the registration ledger.

    Every mutation is a full read-modify-write: load the ledger, apply one
    operation, save the whole ledger back. Concurrent writers are last-write-wins.
    """

    @abstractmethod
    def load(self) -> RegistrationLedger:
        """Return the current ledger."""
        ...

    @abstractmethod
    def save(self, ledger: RegistrationLedger) -> None:
        """Replace the stored ledger with ``ledger``."""
        ...


class BookmarkStore(ABC):
    """Persistence boundary of user bookmarks."""

    @abstractmethod
    def load(self) -> BookmarkSet:
        ...

    @abstractmethod
    def save(self, bookmarks: BookmarkSet) -> None:
        ...
