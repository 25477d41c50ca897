from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["code", "title", "category", "location_type", "date", "capacity", "price"]
    list_filter = ["category", "location_type", "date"]
    search_fields = ["code", "title", "description", "location"]
    readonly_fields = ["code", "created_by", "created_at", "updated_at"]

    def save_model(self, request, obj, form, change):
        if not change and obj.created_by_id is None:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)
