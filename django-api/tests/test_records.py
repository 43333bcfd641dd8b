"""Tests for the flat registration record format and in-memory stores.

Run with: pytest tests/test_records.py -v
"""

from datetime import timedelta

import pytest

from campus_events.domain import EventId, UserId
from campus_events.stores.memory_store import InMemoryBookmarkStore, InMemoryRegistrationStore
from campus_events.stores.records import (
    ledger_from_records,
    ledger_to_records,
    registration_from_record,
    registration_to_record,
)

EVENT = EventId(7)


class TestRecords:
    def test_record_shape(self, ledger, u1, profile, now):
        registration = ledger.register(EVENT, u1, profile, now=now).value
        ledger.check_in(EVENT, u1, now=now + timedelta(hours=2))

        record = registration_to_record(ledger.get(EVENT, u1))

        assert record == {
            "event_id": 7,
            "user_id": "u1",
            "name": "Ada Lovelace",
            "email": "ada@example.edu",
            "role": "student",
            "department": "Mathematics",
            "registered_at": "2024-01-10T09:30:00+00:00",
            "ticket": registration.ticket.value,
            "checked_in": True,
            "checked_in_at": "2024-01-10T11:30:00+00:00",
        }
        assert registration_from_record(record) == ledger.get(EVENT, u1)

    def test_decoding_drops_duplicate_pairs(self, ledger, u1, profile, now):
        ledger.register(EVENT, u1, profile, now=now)
        records = ledger_to_records(ledger)
        duplicate = dict(records[0], ticket="TCK-DUPLICATE-000000", name="Second copy")

        decoded = ledger_from_records(records + [duplicate])

        assert len(decoded) == 1
        assert decoded.get(EVENT, u1).name == "Ada Lovelace"

    def test_decoding_rejects_broken_check_in_invariant(self, ledger, u1, profile, now):
        ledger.register(EVENT, u1, profile, now=now)
        record = dict(ledger_to_records(ledger)[0], checked_in=True, checked_in_at=None)

        with pytest.raises(ValueError):
            registration_from_record(record)

    def test_decoding_rejects_unknown_role(self, ledger, u1, profile, now):
        ledger.register(EVENT, u1, profile, now=now)
        record = dict(ledger_to_records(ledger)[0], role="alumni")

        with pytest.raises(ValueError):
            registration_from_record(record)


class TestInMemoryStores:
    def test_registration_store_round_trip_keeps_order(self, ledger, profile, now):
        for name in ["b", "a", "c"]:
            ledger.register(EVENT, UserId(name), profile, now=now)
        store = InMemoryRegistrationStore()

        store.save(ledger)
        loaded = store.load()

        assert [r.user_id.value for r in loaded.registrations_for(EVENT)] == ["b", "a", "c"]

    def test_registration_store_hands_out_copies(self, ledger, u1, profile, now):
        store = InMemoryRegistrationStore()
        store.save(ledger)

        store.load().register(EVENT, u1, profile, now=now)

        assert len(store.load()) == 0

    def test_bookmark_store_round_trip(self, u1):
        store = InMemoryBookmarkStore()
        bookmarks = store.load()
        bookmarks.bookmark(u1, EventId(3))
        bookmarks.bookmark(u1, EventId(1))

        store.save(bookmarks)

        assert store.load().bookmarks_for(u1) == [EventId(3), EventId(1)]
