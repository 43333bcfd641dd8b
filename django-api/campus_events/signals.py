"""Django signal receivers.

- Drop cached catalog entries when an Event row is saved or deleted.
- Email a confirmation when a registration is created.
"""

import structlog
from django.conf import settings
from django.core.cache import cache
from django.core.mail import send_mail
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from campus_events.models import Event
from campus_events.notifications import RegistrationNotice, registration_confirmed
from campus_events.stores.django_store import EVENT_LIST_CACHE_KEY, event_cache_key

logger = structlog.get_logger(__name__)


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    cache.delete_many([EVENT_LIST_CACHE_KEY, event_cache_key(instance.pk)])
    logger.debug("catalog.cache_invalidated", event_id=instance.pk)


@receiver(registration_confirmed)
def send_registration_confirmation(sender, notice: RegistrationNotice, **kwargs):
    """Send the ticket to the registrant."""
    send_mail(
        subject=f"Registration confirmed: {notice.event_name}",
        message=(
            f"Hi {notice.name},\n\n"
            f"You are registered for {notice.event_name}.\n"
            f"Your ticket number is {notice.ticket}.\n\n"
            "Please bring it with you to check in."
        ),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[notice.email],
    )
    logger.info(
        "registration.confirmation_sent",
        event_id=notice.event_id.value,
        user_id=notice.user_id.value,
    )
