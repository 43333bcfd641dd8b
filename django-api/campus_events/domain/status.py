"""Event status derivation.

All comparisons happen at calendar-day granularity. ``date_end`` counts
through the end of its day, so an event is ongoing on every day from
``date_start`` to ``date_end`` inclusive.
"""

from datetime import date, datetime, tzinfo

from campus_events.domain.models import Event, EventStatus


def local_day(now: date | datetime, tz: tzinfo | None = None) -> date:
    """Truncate ``now`` to a calendar day in ``tz``.

    Naive datetimes are taken as already expressed in the catalog time zone.
    """
    if isinstance(now, datetime):
        if tz is not None and now.tzinfo is not None:
            now = now.astimezone(tz)
        return now.date()
    return now


def calculate_event_status(
    event: Event, now: date | datetime, tz: tzinfo | None = None
) -> EventStatus:
    today = local_day(now, tz)

    if today > event.date_end:
        return EventStatus.COMPLETED
    # Ongoing wins over any registration rule on overlapping days.
    if today >= event.date_start:
        return EventStatus.ONGOING

    if not event.registration_required:
        return EventStatus.INCOMING

    window = event.registration_window
    if window is not None:
        if today < window.start:
            return EventStatus.INCOMING
        if window.contains(today):
            return EventStatus.UPCOMING

    return EventStatus.UPCOMING
