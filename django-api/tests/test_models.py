"""Tests for database constraints on catalog rows.

Rows that the domain would reject must never reach the table, since one bad
row would break every catalog listing.
Run with: pytest tests/test_models.py -v
"""

from datetime import date

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from campus_events import models


def event_row(**overrides) -> models.Event:
    fields = {
        "name": "Open Day",
        "date_start": date(2024, 3, 10),
        "date_end": date(2024, 3, 10),
    }
    fields.update(overrides)
    return models.Event(**fields)


@pytest.mark.django_db
class TestEventConstraints:
    """Tests for Event check constraints."""

    def test_unlimited_and_positive_capacity_accepted(self):
        event_row(capacity=None).save()
        event_row(capacity=1).save()

        assert models.Event.objects.count() == 2

    def test_zero_capacity_rejected(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            event_row(capacity=0).save()

    def test_zero_capacity_fails_validation(self):
        """Admin forms surface the capacity error before saving."""
        with pytest.raises(ValidationError) as excinfo:
            event_row(capacity=0).full_clean()

        assert "capacity" in excinfo.value.message_dict

    def test_window_ending_before_start_rejected(self):
        row = event_row(
            registration_required=True,
            registration_start=date(2024, 2, 1),
            registration_end=date(2024, 1, 1),
        )
        with pytest.raises(IntegrityError), transaction.atomic():
            row.save()

    @pytest.mark.parametrize(
        "window",
        [
            {"registration_start": date(2024, 1, 1)},
            {"registration_end": date(2024, 1, 15)},
        ],
    )
    def test_half_open_window_rejected(self, window):
        with pytest.raises(IntegrityError), transaction.atomic():
            event_row(registration_required=True, **window).save()

    def test_complete_window_accepted(self):
        row = event_row(
            registration_required=True,
            registration_start=date(2024, 1, 1),
            registration_end=date(2024, 1, 1),
        )
        row.full_clean()
        row.save()

        assert models.Event.objects.filter(pk=row.pk).exists()

    def test_event_ending_before_start_rejected(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            event_row(date_end=date(2024, 3, 9)).save()
