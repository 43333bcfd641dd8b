from django.contrib import admin

from campus_events.models import Bookmark, Event, Registration


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "date_start", "date_end", "venue", "capacity"]
    list_filter = ["category", "registration_required"]
    search_fields = ["name", "venue", "organizer", "department"]


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["name", "event_id", "role", "registered_at", "checked_in"]
    list_filter = ["event_id", "checked_in", "role"]
    search_fields = ["name", "email", "ticket"]


@admin.register(Bookmark)
class BookmarkAdmin(admin.ModelAdmin):
    list_display = ["user_id", "event_id"]
