from django.contrib import admin

from webinars.models import Webinar


@admin.register(Webinar)
class WebinarAdmin(admin.ModelAdmin):
    """Read-only view; webinars are created and changed through the API."""

    list_display = ["title", "organizer_id", "start_date", "end_date", "seats"]
    list_filter = ["organizer_id"]
    search_fields = ["title", "organizer_id"]
    readonly_fields = [
        "id",
        "organizer_id",
        "title",
        "start_date",
        "end_date",
        "seats",
        "version",
    ]

    def has_add_permission(self, request) -> bool:
        return False

    def has_change_permission(self, request, obj=None) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        return False
