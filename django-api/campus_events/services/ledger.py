"""Registration ledger: the authoritative set of registrations.

At most one live record exists per (event, user) pair. Registration is
idempotent, check-in and check-out only ever mutate existing records, and
every fallible operation returns an ``Ok``/``Err`` value instead of raising.
The current time is always supplied by the caller.
"""

from collections.abc import Iterable, Iterator
from dataclasses import replace
from datetime import datetime
from typing import Self

import structlog

from campus_events.domain.errors import NotRegisteredError
from campus_events.domain.models import RegistrantProfile, Registration
from campus_events.domain.result import Err, Ok, Result
from campus_events.domain.value_objects import EventId, Ticket, UserId

logger = structlog.get_logger(__name__)

RegistrationKey = tuple[EventId, UserId]


class RegistrationLedger:
    """In-memory registration ledger, loaded from and saved to a store."""

    def __init__(self) -> None:
        self._records: dict[RegistrationKey, Registration] = {}
        self._tickets: dict[Ticket, RegistrationKey] = {}
        self._revision = 0

    @classmethod
    def from_registrations(cls, registrations: Iterable[Registration]) -> Self:
        """Build a ledger, dropping records that repeat a pair or a ticket."""
        ledger = cls()
        for registration in registrations:
            if registration.key in ledger._records:
                logger.warning(
                    "ledger.duplicate_registration_dropped",
                    event_id=registration.event_id.value,
                    user_id=registration.user_id.value,
                )
                continue
            if registration.ticket in ledger._tickets:
                logger.warning(
                    "ledger.duplicate_ticket_dropped",
                    event_id=registration.event_id.value,
                    user_id=registration.user_id.value,
                    ticket=registration.ticket.value,
                )
                continue
            ledger._put(registration)
        ledger._revision = 0
        return ledger

    @property
    def revision(self) -> int:
        """Counter bumped on every state change."""
        return self._revision

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Registration]:
        return iter(list(self._records.values()))

    def get(self, event_id: EventId, user_id: UserId) -> Registration | None:
        return self._records.get((event_id, user_id))

    def is_registered(self, event_id: EventId, user_id: UserId) -> bool:
        return (event_id, user_id) in self._records

    def registrations_for(self, event_id: EventId) -> list[Registration]:
        """Registrations for an event in insertion order."""
        return [r for r in self._records.values() if r.event_id == event_id]

    def registrations_of(self, user_id: UserId) -> list[Registration]:
        return [r for r in self._records.values() if r.user_id == user_id]

    def find_by_ticket(self, ticket: Ticket) -> Registration | None:
        key = self._tickets.get(ticket)
        return self._records[key] if key is not None else None

    def register(
        self,
        event_id: EventId,
        user_id: UserId,
        profile: RegistrantProfile,
        *,
        now: datetime,
    ) -> Ok[Registration]:
        existing = self._records.get((event_id, user_id))
        if existing is not None:
            return Ok(existing)

        registration = Registration(
            event_id=event_id,
            user_id=user_id,
            name=profile.name,
            email=profile.email,
            role=profile.role,
            department=profile.department,
            registered_at=now,
            ticket=self._issue_ticket(now),
        )
        self._put(registration)
        logger.info(
            "ledger.registered",
            event_id=event_id.value,
            user_id=user_id.value,
            ticket=registration.ticket.value,
        )
        return Ok(registration)

    def unregister(self, event_id: EventId, user_id: UserId) -> Ok[Registration | None]:
        """Remove the pair's registration. Removing nothing still succeeds."""
        removed = self._records.pop((event_id, user_id), None)
        if removed is None:
            return Ok(None)
        del self._tickets[removed.ticket]
        self._revision += 1
        logger.info("ledger.unregistered", event_id=event_id.value, user_id=user_id.value)
        return Ok(removed)

    def check_in(
        self, event_id: EventId, user_id: UserId, *, now: datetime
    ) -> Result[Registration, NotRegisteredError]:
        current = self._records.get((event_id, user_id))
        if current is None:
            return Err(NotRegisteredError(event_id, user_id))
        if current.checked_in:
            return Ok(current)
        # Clock skew must not break the checked_in_at >= registered_at invariant.
        checked_in_at = max(now, current.registered_at)
        updated = replace(current, checked_in=True, checked_in_at=checked_in_at)
        self._put(updated)
        logger.info("ledger.checked_in", event_id=event_id.value, user_id=user_id.value)
        return Ok(updated)

    def check_out(
        self, event_id: EventId, user_id: UserId
    ) -> Result[Registration, NotRegisteredError]:
        current = self._records.get((event_id, user_id))
        if current is None:
            return Err(NotRegisteredError(event_id, user_id))
        if not current.checked_in:
            return Ok(current)
        updated = replace(current, checked_in=False, checked_in_at=None)
        self._put(updated)
        logger.info("ledger.checked_out", event_id=event_id.value, user_id=user_id.value)
        return Ok(updated)

    def _put(self, registration: Registration) -> None:
        # Replacing an existing key keeps its insertion position.
        self._records[registration.key] = registration
        self._tickets[registration.ticket] = registration.key
        self._revision += 1

    def _issue_ticket(self, now: datetime) -> Ticket:
        ticket = Ticket.generate(now)
        while ticket in self._tickets:
            ticket = Ticket.generate(now)
        return ticket
