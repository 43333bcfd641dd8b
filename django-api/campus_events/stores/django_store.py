"""Django ORM implementations of the stores."""

from django.core.cache import cache
from django.db import transaction

from campus_events import models
from campus_events.domain import (
    Capacity,
    Event,
    EventCategory,
    EventId,
    Registration,
    RegistrationWindow,
    Ticket,
    UserId,
    UserRole,
)
from campus_events.services.bookmarks import BookmarkSet
from campus_events.services.ledger import RegistrationLedger
from campus_events.stores.interfaces import BookmarkStore, EventStore, RegistrationStore

EVENT_LIST_CACHE_KEY = "events:list"


def event_cache_key(event_id: int) -> str:
    return f"events:{event_id}"


def _event_to_domain(row: models.Event) -> Event:
    window = None
    if row.registration_start is not None and row.registration_end is not None:
        window = RegistrationWindow(start=row.registration_start, end=row.registration_end)
    return Event(
        id=EventId(row.pk),
        name=row.name,
        date_start=row.date_start,
        date_end=row.date_end,
        capacity=Capacity(row.capacity),
        registration_required=row.registration_required,
        registration_window=window,
        category=EventCategory(row.category),
        time=row.time,
        venue=row.venue,
        department=row.department,
        description=row.description,
        organizer=row.organizer,
        image_url=row.image_url or None,
    )


def _registration_to_domain(row: models.Registration) -> Registration:
    return Registration(
        event_id=EventId(row.event_id),
        user_id=UserId(row.user_id),
        name=row.name,
        email=row.email,
        role=UserRole(row.role),
        department=row.department,
        registered_at=row.registered_at,
        ticket=Ticket(row.ticket),
        checked_in=row.checked_in,
        checked_in_at=row.checked_in_at,
    )


class DjangoEventStore(EventStore):
    """Database-backed event catalog using Django ORM.

    Raw events are cached; signals drop the cache when a row changes.
    """

    def list_events(self) -> list[Event]:
        return cache.get_or_set(
            EVENT_LIST_CACHE_KEY,
            lambda: [_event_to_domain(row) for row in models.Event.objects.all()],
        )

    def get_event(self, event_id: EventId) -> Event | None:
        key = event_cache_key(event_id.value)
        event = cache.get(key)
        if event is None:
            row = models.Event.objects.filter(pk=event_id.value).first()
            if row is None:
                return None
            event = _event_to_domain(row)
            cache.set(key, event)
        return event

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    def save_event(self, event: Event) -> None:
        window = event.registration_window
        models.Event.objects.update_or_create(
            pk=event.id.value,
            defaults={
                "name": event.name,
                "date_start": event.date_start,
                "date_end": event.date_end,
                "time": event.time,
                "venue": event.venue,
                "category": event.category.value,
                "department": event.department,
                "description": event.description,
                "organizer": event.organizer,
                "image_url": event.image_url,
                "registration_required": event.registration_required,
                "registration_start": window.start if window else None,
                "registration_end": window.end if window else None,
                "capacity": event.capacity.value,
            },
        )

    def delete_event(self, event_id: EventId) -> None:
        models.Event.objects.filter(pk=event_id.value).delete()


class DjangoRegistrationStore(RegistrationStore):
    """Ledger persisted as an ordered table of registration rows."""

    def load(self) -> RegistrationLedger:
        return RegistrationLedger.from_registrations(
            _registration_to_domain(row) for row in models.Registration.objects.all()
        )

    @transaction.atomic
    def save(self, ledger: RegistrationLedger) -> None:
        models.Registration.objects.all().delete()
        models.Registration.objects.bulk_create(
            models.Registration(
                event_id=r.event_id.value,
                user_id=r.user_id.value,
                name=r.name,
                email=r.email,
                role=r.role.value,
                department=r.department,
                registered_at=r.registered_at,
                ticket=r.ticket.value,
                checked_in=r.checked_in,
                checked_in_at=r.checked_in_at,
                position=position,
            )
            for position, r in enumerate(ledger)
        )


class DjangoBookmarkStore(BookmarkStore):
    def load(self) -> BookmarkSet:
        return BookmarkSet.from_pairs(
            (UserId(row.user_id), EventId(row.event_id)) for row in models.Bookmark.objects.all()
        )

    @transaction.atomic
    def save(self, bookmarks: BookmarkSet) -> None:
        models.Bookmark.objects.all().delete()
        models.Bookmark.objects.bulk_create(
            models.Bookmark(user_id=user_id.value, event_id=event_id.value, position=position)
            for position, (user_id, event_id) in enumerate(bookmarks.pairs())
        )
