"""Registration service - ledger read-modify-write orchestration.

Each mutating call loads the full ledger from the store, applies exactly one
ledger operation and saves the whole ledger back. Confirmation notices go out
after the save; a failing receiver is logged and never undoes the registration.
"""

from collections.abc import Callable
from datetime import datetime

import structlog
from django.utils import timezone

from campus_events.domain import Event, RegistrantProfile, Registration, Ticket
from campus_events.domain.errors import NotRegisteredError
from campus_events.domain.result import Err, Ok, Result
from campus_events.notifications import RegistrationNotice, registration_confirmed
from campus_events.services.event_service import EventService, parse_event_id, parse_user_id
from campus_events.stores.interfaces import EventStore, RegistrationStore

logger = structlog.get_logger(__name__)


class RegistrationService:
    """Service for registration and check-in operations."""

    def __init__(
        self,
        events: EventStore,
        registrations: RegistrationStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._events = EventService(events)
        self._store = registrations
        self._clock = clock

    def registrations_for(self, event_id: str) -> list[Registration]:
        """Raises InvalidEventIdError or EventNotFoundError for bad event IDs."""
        parsed = self._events.require_event(event_id)
        return self._store.load().registrations_for(parsed)

    def is_registered(self, event_id: str, user_id: str) -> bool:
        parsed = self._events.require_event(event_id)
        return self._store.load().is_registered(parsed, parse_user_id(user_id))

    def registrations_of(self, user_id: str) -> list[Registration]:
        """A user's registrations in insertion order, including deleted events."""
        return self._store.load().registrations_of(parse_user_id(user_id))

    def register(
        self, event_id: str, user_id: str, profile: RegistrantProfile
    ) -> Ok[Registration]:
        """Register a user. Registering twice returns the existing record."""
        event = self._events.get_event(event_id)
        user = parse_user_id(user_id)

        ledger = self._store.load()
        if ledger.is_registered(event.id, user):
            return Ok(ledger.get(event.id, user))

        result = ledger.register(event.id, user, profile, now=self._clock())
        self._store.save(ledger)
        self._notify(event, result.value)
        return result

    def unregister(self, event_id: str, user_id: str) -> Ok[Registration | None]:
        # No existence check, so registrations for deleted events can still be removed.
        parsed = parse_event_id(event_id)
        ledger = self._store.load()
        result = ledger.unregister(parsed, parse_user_id(user_id))
        if result.value is not None:
            self._store.save(ledger)
        return result

    def check_in(self, event_id: str, user_id: str) -> Result[Registration, NotRegisteredError]:
        parsed = self._events.require_event(event_id)
        ledger = self._store.load()
        result = ledger.check_in(parsed, parse_user_id(user_id), now=self._clock())
        if result.ok:
            self._store.save(ledger)
        return result

    def check_out(self, event_id: str, user_id: str) -> Result[Registration, NotRegisteredError]:
        parsed = parse_event_id(event_id)
        ledger = self._store.load()
        result = ledger.check_out(parsed, parse_user_id(user_id))
        if result.ok:
            self._store.save(ledger)
        return result

    def check_in_by_ticket(self, ticket: str) -> Result[Registration, NotRegisteredError]:
        """Check in whoever holds ``ticket``, as done at the venue door."""
        ledger = self._store.load()
        registration = ledger.find_by_ticket(Ticket(ticket)) if ticket else None
        if registration is None:
            return Err(NotRegisteredError(None, None))
        result = ledger.check_in(registration.event_id, registration.user_id, now=self._clock())
        self._store.save(ledger)
        return result

    def _notify(self, event: Event, registration: Registration) -> None:
        notice = RegistrationNotice(
            event_id=registration.event_id,
            user_id=registration.user_id,
            ticket=registration.ticket,
            email=registration.email,
            name=registration.name,
            event_name=event.name,
        )
        responses = registration_confirmed.send_robust(sender=self.__class__, notice=notice)
        for receiver, response in responses:
            if isinstance(response, Exception):
                logger.error(
                    "registration.notification_failed",
                    event_id=notice.event_id.value,
                    user_id=notice.user_id.value,
                    receiver=getattr(receiver, "__qualname__", repr(receiver)),
                    exc_info=response,
                )
