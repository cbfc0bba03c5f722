from django.contrib import admin
from .models import Sale


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    """
    Admin interface for sales (read-only).

    Sales change artwork status, so they are recorded and edited through
    the API only.
    """

    list_display = [
        'transaction_id',
        'artwork',
        'buyer',
        'price',
        'commission',
        'payment_status',
        'payment_method',
        'date',
    ]
    list_filter = ['payment_status', 'payment_method', 'date']
    search_fields = ['transaction_id', 'buyer', 'buyer_email', 'artwork__title']
    ordering = ['-date']
    date_hierarchy = 'date'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def get_queryset(self, request):
        """Optimize query."""
        return super().get_queryset(request).select_related('artwork')
