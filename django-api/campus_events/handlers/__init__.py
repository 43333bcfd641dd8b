from campus_events.handlers.views import (
    BookmarkDetailView,
    BookmarkListView,
    CheckInView,
    EventDetailView,
    EventHighlightsView,
    EventListView,
    EventStatsView,
    RegistrationDetailView,
    RegistrationListView,
    TicketCheckInView,
    UserRegistrationListView,
)

__all__ = [
    "EventListView",
    "EventHighlightsView",
    "EventStatsView",
    "EventDetailView",
    "RegistrationListView",
    "RegistrationDetailView",
    "CheckInView",
    "TicketCheckInView",
    "UserRegistrationListView",
    "BookmarkListView",
    "BookmarkDetailView",
]
