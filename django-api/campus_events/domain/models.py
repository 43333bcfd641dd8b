"""Domain models representing catalog and registration state.

These are pure domain objects with no API input rules.
Django ORM models are in campus_events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from campus_events.domain.value_objects import (
    Capacity,
    EventId,
    RegistrationWindow,
    Ticket,
    UserId,
)


class EventStatus(Enum):
    """Temporal phase of an event. Derived, never stored."""

    INCOMING = "incoming"
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"

    @property
    def sort_order(self) -> int:
        return _STATUS_ORDER[self]


_STATUS_ORDER = {
    EventStatus.INCOMING: 0,
    EventStatus.UPCOMING: 1,
    EventStatus.ONGOING: 2,
    EventStatus.COMPLETED: 3,
}


class EventCategory(Enum):
    ACADEMIC = "academic"
    CULTURAL = "cultural"
    SPORTS = "sports"
    TECHNICAL = "technical"


class UserRole(Enum):
    STUDENT = "student"
    FACULTY = "faculty"
    VISITOR = "visitor"


@dataclass(frozen=True)
class Event:
    """Domain representation of a catalog Event."""

    id: EventId
    name: str
    date_start: date
    date_end: date
    capacity: Capacity
    registration_required: bool = False
    registration_window: RegistrationWindow | None = None
    category: EventCategory = EventCategory.ACADEMIC
    time: str = ""
    venue: str = ""
    department: str = ""
    description: str = ""
    organizer: str = ""
    image_url: str | None = None

    def __post_init__(self) -> None:
        if self.date_end < self.date_start:
            raise ValueError("Event cannot end before it starts")


@dataclass(frozen=True)
class RegistrantProfile:
    """Contact details captured when a user registers."""

    name: str
    email: str
    role: UserRole
    department: str | None = None


@dataclass(frozen=True)
class Registration:
    """One live registration of a user for an event."""

    event_id: EventId
    user_id: UserId
    name: str
    email: str
    role: UserRole
    registered_at: datetime
    ticket: Ticket
    department: str | None = None
    checked_in: bool = False
    checked_in_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.checked_in:
            if self.checked_in_at is None:
                raise ValueError("Checked-in registration requires checked_in_at")
            if self.checked_in_at < self.registered_at:
                raise ValueError("checked_in_at cannot precede registered_at")
        elif self.checked_in_at is not None:
            raise ValueError("checked_in_at must be empty unless checked in")

    @property
    def key(self) -> tuple[EventId, UserId]:
        return (self.event_id, self.user_id)


@dataclass(frozen=True)
class EventView:
    """Read-only enriched event consumed by presentation code.

    The user_* fields are None when the view was built without a user.
    """

    event: Event
    status: EventStatus
    registered_count: int
    checked_in_count: int
    pending_count: int
    utilization: float | None
    user_is_registered: bool | None = None
    user_checked_in: bool | None = None
    user_bookmarked: bool | None = None


@dataclass(frozen=True)
class CatalogStats:
    """Event counts per status, as shown on the admin overview."""

    incoming: int
    upcoming: int
    ongoing: int
    completed: int
    registrations_for_upcoming: int

    @property
    def total(self) -> int:
        return self.incoming + self.upcoming + self.ongoing + self.completed
