from django.urls import path

from campus_events.handlers import (
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

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/highlights", EventHighlightsView.as_view(), name="event-highlights"),
    path("events/stats", EventStatsView.as_view(), name="event-stats"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/registrations",
        RegistrationListView.as_view(),
        name="registration-list",
    ),
    path(
        "events/<str:event_id>/registrations/<str:user_id>",
        RegistrationDetailView.as_view(),
        name="registration-detail",
    ),
    path(
        "events/<str:event_id>/registrations/<str:user_id>/check-in",
        CheckInView.as_view(),
        name="registration-check-in",
    ),
    path("tickets/<str:ticket>/check-in", TicketCheckInView.as_view(), name="ticket-check-in"),
    path(
        "users/<str:user_id>/registrations",
        UserRegistrationListView.as_view(),
        name="user-registration-list",
    ),
    path("users/<str:user_id>/bookmarks", BookmarkListView.as_view(), name="bookmark-list"),
    path(
        "users/<str:user_id>/bookmarks/<str:event_id>",
        BookmarkDetailView.as_view(),
        name="bookmark-detail",
    ),
]
