"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, timezone

import pytest
from rest_framework.test import APIClient

from campus_events.domain import (
    Capacity,
    Event,
    EventId,
    RegistrantProfile,
    RegistrationWindow,
    UserId,
    UserRole,
)
from campus_events.services.ledger import RegistrationLedger

NOW = datetime(2024, 1, 10, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


def build_event(event_id: int = 1, **overrides) -> Event:
    fields = {
        "id": EventId(event_id),
        "name": f"Event {event_id}",
        "date_start": date(2024, 3, 10),
        "date_end": date(2024, 3, 10),
        "capacity": Capacity(50),
    }
    fields.update(overrides)
    return Event(**fields)


@pytest.fixture
def make_event():
    return build_event


@pytest.fixture
def windowed_event() -> Event:
    return build_event(
        event_id=2,
        date_start=date(2024, 2, 1),
        date_end=date(2024, 2, 1),
        registration_required=True,
        registration_window=RegistrationWindow(start=date(2024, 1, 1), end=date(2024, 1, 15)),
    )


@pytest.fixture
def profile() -> RegistrantProfile:
    return RegistrantProfile(
        name="Ada Lovelace",
        email="ada@example.edu",
        role=UserRole.STUDENT,
        department="Mathematics",
    )


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def ledger() -> RegistrationLedger:
    return RegistrationLedger()


@pytest.fixture
def u1() -> UserId:
    return UserId("u1")
