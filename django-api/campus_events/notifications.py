"""Post-registration notices for the notification collaborator."""

from dataclasses import dataclass

from django.dispatch import Signal

from campus_events.domain import EventId, Ticket, UserId

# Sent with ``notice=RegistrationNotice`` after a new registration is saved.
registration_confirmed = Signal()


@dataclass(frozen=True)
class RegistrationNotice:
    event_id: EventId
    user_id: UserId
    ticket: Ticket
    email: str
    name: str
    event_name: str
