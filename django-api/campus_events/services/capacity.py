"""Capacity aggregates derived from the registration ledger.

Nothing here is cached or mutated, so the counts cannot drift from the
ledger they are read from.
"""

from campus_events.domain.value_objects import Capacity, EventId
from campus_events.services.ledger import RegistrationLedger


class CapacityAggregator:
    """Read-only projections over a ledger."""

    def __init__(self, ledger: RegistrationLedger) -> None:
        self._ledger = ledger

    def registered_count(self, event_id: EventId) -> int:
        return len(self._ledger.registrations_for(event_id))

    def checked_in_count(self, event_id: EventId) -> int:
        return sum(1 for r in self._ledger.registrations_for(event_id) if r.checked_in)

    def pending_count(self, event_id: EventId) -> int:
        """Registered attendees who have not checked in yet."""
        return self.registered_count(event_id) - self.checked_in_count(event_id)

    def utilization(self, event_id: EventId, capacity: Capacity) -> float | None:
        """Unclamped registered/capacity ratio, or None when unlimited.

        Values above 1.0 mean the event is over capacity; clamping for
        display is left to the caller.
        """
        if capacity.is_unlimited:
            return None
        return self.registered_count(event_id) / capacity.value
