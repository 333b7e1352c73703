from django.contrib import admin

from transactions.models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """Read-only view: the lifecycle only moves through checkout, notifications and scans."""

    list_display = ["id", "ticket_name", "user_id", "quantity", "total_price", "status", "created_at"]
    list_filter = ["status", "payment_method"]
    search_fields = ["id", "user_id", "ticket_name"]
    readonly_fields = [field.name for field in Transaction._meta.fields]

    def has_add_permission(self, request) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        return False
