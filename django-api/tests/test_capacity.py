"""Unit tests for CapacityAggregator.

Run with: pytest tests/test_capacity.py -v
"""

import pytest

from campus_events.domain import Capacity, EventId, UserId
from campus_events.services.capacity import CapacityAggregator

EVENT = EventId(7)


@pytest.fixture
def filled(ledger, profile, now):
    def fill(count: int, event_id: EventId = EVENT) -> CapacityAggregator:
        for index in range(count):
            ledger.register(event_id, UserId(f"user-{index}"), profile, now=now)
        return CapacityAggregator(ledger)

    return fill


class TestCounts:
    """Tests for registered, checked-in and pending counts."""

    def test_empty_ledger(self, ledger):
        """An event nobody registered for has zero counts and zero utilization."""
        aggregator = CapacityAggregator(ledger)
        assert aggregator.registered_count(EVENT) == 0
        assert aggregator.checked_in_count(EVENT) == 0
        assert aggregator.utilization(EVENT, Capacity(10)) == 0.0

    def test_counts_are_per_event(self, filled):
        """Registrations for one event never count towards another."""
        filled(3, EventId(1))
        aggregator = filled(5, EventId(2))

        assert aggregator.registered_count(EventId(1)) == 3
        assert aggregator.registered_count(EventId(2)) == 5

    def test_checked_in_never_exceeds_registered(self, filled, ledger, now):
        """Check-ins stay bounded by registrations, including after a withdrawal."""
        aggregator = filled(4)
        for index in range(4):
            ledger.check_in(EVENT, UserId(f"user-{index}"), now=now)
            assert aggregator.checked_in_count(EVENT) <= aggregator.registered_count(EVENT)
        ledger.unregister(EVENT, UserId("user-0"))

        assert aggregator.checked_in_count(EVENT) == 3
        assert aggregator.registered_count(EVENT) == 3
        assert aggregator.pending_count(EVENT) == 0

    def test_pending_count(self, filled, ledger, now):
        """Pending is registered minus checked in."""
        aggregator = filled(3)
        ledger.check_in(EVENT, UserId("user-1"), now=now)

        assert aggregator.pending_count(EVENT) == 2

    def test_counts_follow_ledger_changes(self, filled, ledger, profile, now):
        """The aggregator reads the live ledger rather than a snapshot."""
        aggregator = filled(1)
        ledger.register(EVENT, UserId("late"), profile, now=now)

        assert aggregator.registered_count(EVENT) == 2


class TestUtilization:
    """Tests for utilization against capacity."""

    def test_over_capacity_is_unclamped(self, filled):
        """Overbooking shows as utilization above 1.0."""
        aggregator = filled(60)
        assert aggregator.utilization(EVENT, Capacity(50)) == pytest.approx(1.2)

    def test_at_capacity(self, filled):
        """A full event is exactly 1.0."""
        assert filled(50).utilization(EVENT, Capacity(50)) == 1.0

    def test_unlimited_returns_none(self, filled):
        """Unlimited events have no utilization."""
        assert filled(10).utilization(EVENT, Capacity.unlimited()) is None
