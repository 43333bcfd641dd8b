"""Typed access to the campus events settings."""

from zoneinfo import ZoneInfo

from django.conf import settings


def catalog_timezone() -> ZoneInfo:
    """Time zone used to decide which calendar day "now" falls on."""
    return ZoneInfo(getattr(settings, "CAMPUS_EVENTS_TIME_ZONE", "UTC"))


def highlight_limit() -> int:
    return getattr(settings, "CAMPUS_EVENTS_HIGHLIGHT_LIMIT", 3)
