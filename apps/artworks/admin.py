from django.contrib import admin
from django.utils.html import format_html
from .models import Artwork, ArtworkStatus


STATUS_COLORS = {
    ArtworkStatus.AVAILABLE: '#6B8E5E',
    ArtworkStatus.SOLD: '#B85C5C',
    ArtworkStatus.EXHIBITION: '#A47449',
}


@admin.register(Artwork)
class ArtworkAdmin(admin.ModelAdmin):
    """Admin interface for artworks."""

    list_display = [
        'title',
        'artist',
        'category',
        'price',
        'status_badge',
        'year',
        'created_at',
    ]
    list_filter = ['status', 'category', 'created_at']
    search_fields = ['title', 'description', 'medium', 'artist__name']
    autocomplete_fields = ['artist']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Artwork', {
            'fields': ('title', 'artist', 'description', 'image_url', 'tags')
        }),
        ('Details', {
            'fields': ('category', 'medium', 'year', 'height', 'width', 'dimension_unit'),
        }),
        ('Sale', {
            'fields': ('price', 'status'),
            'description': 'Sold status follows recorded sales.',
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )
    readonly_fields = ['status', 'created_at', 'updated_at']

    def status_badge(self, obj):
        """Display status as colored badge."""
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            STATUS_COLORS.get(obj.status, '#ccc'),
            obj.get_status_display(),
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    def get_queryset(self, request):
        """Optimize query."""
        return super().get_queryset(request).select_related('artist')
