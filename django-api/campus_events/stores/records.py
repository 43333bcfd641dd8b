"""Flat record format for serialized registrations.

A ledger serializes to an ordered list of JSON-ready dicts. Decoding goes
through ``RegistrationLedger.from_registrations`` so records repeating an
(event, user) pair or a ticket are dropped instead of duplicated.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from campus_events.domain.models import Registration, UserRole
from campus_events.domain.value_objects import EventId, Ticket, UserId
from campus_events.services.ledger import RegistrationLedger


def registration_to_record(registration: Registration) -> dict[str, Any]:
    return {
        "event_id": registration.event_id.value,
        "user_id": registration.user_id.value,
        "name": registration.name,
        "email": registration.email,
        "role": registration.role.value,
        "department": registration.department,
        "registered_at": registration.registered_at.isoformat(),
        "ticket": registration.ticket.value,
        "checked_in": registration.checked_in,
        "checked_in_at": (
            registration.checked_in_at.isoformat() if registration.checked_in_at else None
        ),
    }


def registration_from_record(record: dict[str, Any]) -> Registration:
    """Decode one record. Malformed records raise KeyError or ValueError."""
    checked_in_at = record.get("checked_in_at")
    return Registration(
        event_id=EventId(int(record["event_id"])),
        user_id=UserId(str(record["user_id"])),
        name=record["name"],
        email=record["email"],
        role=UserRole(record["role"]),
        department=record.get("department"),
        registered_at=datetime.fromisoformat(record["registered_at"]),
        ticket=Ticket(record["ticket"]),
        checked_in=bool(record.get("checked_in", False)),
        checked_in_at=datetime.fromisoformat(checked_in_at) if checked_in_at else None,
    )


def ledger_to_records(ledger: RegistrationLedger) -> list[dict[str, Any]]:
    return [registration_to_record(registration) for registration in ledger]


def ledger_from_records(records: Iterable[dict[str, Any]]) -> RegistrationLedger:
    return RegistrationLedger.from_registrations(
        registration_from_record(record) for record in records
    )
