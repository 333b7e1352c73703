from django.contrib import admin

from events.models import Event, TicketType


class TicketTypeInline(admin.TabularInline):
    model = TicketType
    extra = 0
    fields = ["name", "price", "quota", "stock", "status"]
    readonly_fields = fields
    show_change_link = True
    can_delete = False

    def has_add_permission(self, request, obj=None) -> bool:
        return False


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "organizer_name", "category", "status", "created_at"]
    list_filter = ["category", "status"]
    search_fields = ["title", "location", "organizer_name"]
    inlines = [TicketTypeInline]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "price", "quota", "stock", "status"]
    list_filter = ["status", "event"]
    search_fields = ["name", "event__title"]

    def get_readonly_fields(self, request, obj=None):
        # Stock only moves through checkout and payment notifications.
        if obj is not None:
            return ["event", "quota", "stock", "created_at", "updated_at"]
        return ["stock", "created_at", "updated_at"]
