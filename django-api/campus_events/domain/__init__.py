from campus_events.domain.models import (
    CatalogStats,
    Event,
    EventCategory,
    EventStatus,
    EventView,
    RegistrantProfile,
    Registration,
    UserRole,
)
from campus_events.domain.result import Err, Ok, Result
from campus_events.domain.status import calculate_event_status
from campus_events.domain.value_objects import (
    Capacity,
    EventId,
    RegistrationWindow,
    Ticket,
    UserId,
)

__all__ = [
    "Event",
    "EventView",
    "EventStatus",
    "EventCategory",
    "CatalogStats",
    "Registration",
    "RegistrantProfile",
    "UserRole",
    "EventId",
    "UserId",
    "Ticket",
    "Capacity",
    "RegistrationWindow",
    "Ok",
    "Err",
    "Result",
    "calculate_event_status",
]
