"""Unit tests for the services.

These test orchestration over in-memory stores and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from datetime import date, timedelta

import pytest

from campus_events.domain import EventId, EventStatus, UserId
from campus_events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidUserIdError,
    NotRegisteredError,
)
from campus_events.notifications import registration_confirmed
from campus_events.services.bookmark_service import BookmarkService
from campus_events.services.catalog_service import CatalogService
from campus_events.services.catalog_view import CatalogQuery
from campus_events.services.event_service import EventService
from campus_events.services.registration_service import RegistrationService
from campus_events.stores.memory_store import (
    InMemoryBookmarkStore,
    InMemoryEventStore,
    InMemoryRegistrationStore,
)


@pytest.fixture
def event_store(make_event, windowed_event) -> InMemoryEventStore:
    return InMemoryEventStore([make_event(7, name="Robotics Expo"), windowed_event])


@pytest.fixture
def registration_store() -> InMemoryRegistrationStore:
    return InMemoryRegistrationStore()


@pytest.fixture
def bookmark_store() -> InMemoryBookmarkStore:
    return InMemoryBookmarkStore()


@pytest.fixture
def service(event_store, registration_store, now) -> RegistrationService:
    return RegistrationService(event_store, registration_store, clock=lambda: now)


@pytest.fixture
def failing_receiver():
    def receiver(sender, notice, **kwargs):
        raise RuntimeError("mail server down")

    registration_confirmed.connect(receiver, dispatch_uid="failing-receiver")
    yield receiver
    registration_confirmed.disconnect(dispatch_uid="failing-receiver")


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, event_store):
        with pytest.raises(InvalidEventIdError):
            EventService(event_store).get_event("not-a-number")

    def test_get_event_not_found_raises_error(self, event_store):
        with pytest.raises(EventNotFoundError) as excinfo:
            EventService(event_store).get_event("999")
        assert excinfo.value.event_id == "999"

    def test_get_event_returns_event(self, event_store):
        assert EventService(event_store).get_event("7").name == "Robotics Expo"

    def test_require_event_not_found(self, event_store):
        with pytest.raises(EventNotFoundError):
            EventService(event_store).require_event("999")


class TestRegistrationService:
    def test_register_persists_ledger(self, service, registration_store, profile, now):
        result = service.register("7", "u1", profile)

        assert result.ok
        assert result.value.registered_at == now
        assert [r["user_id"] for r in registration_store.records] == ["u1"]
        assert service.is_registered("7", "u1")

    def test_register_twice_is_idempotent(self, service, registration_store, profile):
        first = service.register("7", "u1", profile).value
        second = service.register("7", "u1", profile).value

        assert second == first
        assert len(registration_store.records) == 1

    def test_register_sends_one_confirmation(self, service, profile, mailoutbox):
        registration = service.register("7", "u1", profile).value
        service.register("7", "u1", profile)

        assert len(mailoutbox) == 1
        message = mailoutbox[0]
        assert message.to == ["ada@example.edu"]
        assert "Robotics Expo" in message.subject
        assert registration.ticket.value in message.body

    def test_failing_notification_keeps_registration(
        self, service, registration_store, profile, failing_receiver
    ):
        result = service.register("7", "u1", profile)

        assert result.ok
        assert len(registration_store.records) == 1

    def test_register_unknown_event(self, service, profile):
        with pytest.raises(EventNotFoundError):
            service.register("999", "u1", profile)

    def test_register_blank_user(self, service, profile):
        with pytest.raises(InvalidUserIdError):
            service.register("7", "  ", profile)

    def test_unregister(self, service, registration_store, profile):
        service.register("7", "u1", profile)

        result = service.unregister("7", "u1")

        assert result.value.user_id == UserId("u1")
        assert registration_store.records == []

    def test_unregister_missing_is_noop(self, service):
        assert service.unregister("7", "u1").value is None

    def test_unregister_after_event_deleted(self, service, event_store, registration_store, profile):
        """Registrations for a removed event can still be withdrawn."""
        service.register("7", "u1", profile)
        event_store.delete_event(EventId(7))

        result = service.unregister("7", "u1")

        assert result.value.user_id == UserId("u1")
        assert registration_store.records == []
        assert service.unregister("7", "u1").value is None

    def test_check_out_after_event_deleted(self, service, event_store, profile):
        """Check-out does not depend on the event still being listed."""
        service.register("7", "u1", profile)
        service.check_in("7", "u1")
        event_store.delete_event(EventId(7))

        result = service.check_out("7", "u1")

        assert result.ok
        assert result.value.checked_in is False

    def test_unregister_invalid_event_id(self, service):
        with pytest.raises(InvalidEventIdError):
            service.unregister("seven", "u1")

    def test_registrations_of_user(self, service, event_store, profile):
        """A user's registrations span events, in registration order."""
        service.register("2", "u1", profile)
        service.register("7", "u1", profile)
        service.register("7", "u2", profile)
        event_store.delete_event(EventId(2))

        assert [r.event_id for r in service.registrations_of("u1")] == [EventId(2), EventId(7)]
        assert service.registrations_of("u3") == []

    def test_check_in_and_out(self, service, profile, now):
        service.register("7", "u1", profile)

        checked_in = service.check_in("7", "u1")
        assert checked_in.value.checked_in_at == now
        assert service.registrations_for("7")[0].checked_in

        checked_out = service.check_out("7", "u1")
        assert checked_out.value.checked_in is False
        assert not service.registrations_for("7")[0].checked_in

    def test_check_in_not_registered(self, service):
        result = service.check_in("7", "u1")

        assert not result.ok
        assert isinstance(result.error, NotRegisteredError)

    def test_check_out_not_registered(self, service):
        assert not service.check_out("7", "u1").ok

    def test_check_in_by_ticket(self, service, profile):
        ticket = service.register("7", "u1", profile).value.ticket

        result = service.check_in_by_ticket(ticket.value)

        assert result.ok
        assert result.value.user_id == UserId("u1")
        assert service.registrations_for("7")[0].checked_in

    @pytest.mark.parametrize("ticket", ["", "TCK-UNKNOWN-000000"])
    def test_check_in_by_unknown_ticket(self, service, ticket):
        assert not service.check_in_by_ticket(ticket).ok


class TestBookmarkService:
    def test_bookmark_is_idempotent(self, event_store, bookmark_store):
        service = BookmarkService(event_store, bookmark_store)

        assert service.bookmark("u1", "7") is True
        assert service.bookmark("u1", "7") is False
        assert service.bookmarks_for("u1") == [EventId(7)]

    def test_bookmark_unknown_event(self, event_store, bookmark_store):
        with pytest.raises(EventNotFoundError):
            BookmarkService(event_store, bookmark_store).bookmark("u1", "999")

    def test_unbookmark(self, event_store, bookmark_store):
        service = BookmarkService(event_store, bookmark_store)
        service.bookmark("u1", "7")

        assert service.unbookmark("u1", "7") is True
        assert service.unbookmark("u1", "7") is False
        assert service.bookmarks_for("u1") == []


class TestCatalogService:
    @pytest.fixture
    def catalog(self, event_store, registration_store, bookmark_store, now) -> CatalogService:
        return CatalogService(event_store, registration_store, bookmark_store, clock=lambda: now)

    def test_list_reflects_registrations(self, catalog, service, profile):
        service.register("7", "u1", profile)

        views = {view.event.id.value: view for view in catalog.list_events(user_id="u1")}

        assert views[7].registered_count == 1
        assert views[7].user_is_registered is True
        assert views[2].user_is_registered is False

    def test_status_uses_injected_clock(self, catalog, event_store, registration_store, bookmark_store, now):
        assert catalog.get_event("2").status is EventStatus.UPCOMING

        later = CatalogService(
            event_store, registration_store, bookmark_store, clock=lambda: now + timedelta(days=30)
        )
        assert later.get_event("2").status is EventStatus.COMPLETED

    def test_list_with_query(self, catalog):
        views = catalog.list_events(CatalogQuery(status=EventStatus.INCOMING))
        assert [view.event.id.value for view in views] == [7]

    def test_highlights_and_stats(self, catalog):
        assert [view.event.id.value for view in catalog.highlights()] == [2]
        stats = catalog.stats()
        assert (stats.incoming, stats.upcoming) == (1, 1)

    def test_get_event_invalid_id(self, catalog):
        with pytest.raises(InvalidEventIdError):
            catalog.get_event("abc")

    def test_event_dates_are_calendar_days(self, catalog):
        assert catalog.get_event("7").event.date_start == date(2024, 3, 10)
