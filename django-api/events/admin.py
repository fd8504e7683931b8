from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "sport_type", "date_time", "user", "updated_at"]
    list_filter = ["sport_type"]
    search_fields = ["name", "user__email"]
    readonly_fields = ["id", "created_at", "updated_at"]
