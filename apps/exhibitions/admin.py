from django.contrib import admin
from .models import Exhibition


@admin.register(Exhibition)
class ExhibitionAdmin(admin.ModelAdmin):
    """
    Admin interface for exhibitions.

    Artwork assignment goes through the API so artwork statuses stay in
    step; here the list is read-only.
    """

    list_display = [
        'title',
        'curator',
        'city',
        'start_date',
        'end_date',
        'status',
        'artwork_count',
    ]
    list_filter = ['status', 'city', 'start_date']
    search_fields = ['title', 'description', 'curator', 'venue', 'city']
    ordering = ['-start_date']
    date_hierarchy = 'start_date'

    fieldsets = (
        ('Exhibition', {
            'fields': ('title', 'description', 'curator', 'image_url', 'status', 'ticket_price')
        }),
        ('Dates', {
            'fields': ('start_date', 'end_date'),
        }),
        ('Location', {
            'fields': ('venue', 'address', 'city', 'country'),
        }),
        ('Artworks', {
            'fields': ('artworks',),
        }),
    )
    readonly_fields = ['artworks']

    def artwork_count(self, obj):
        return obj.artworks.count()
    artwork_count.short_description = 'Artworks'

    def get_queryset(self, request):
        """Optimize query."""
        return super().get_queryset(request).prefetch_related('artworks')
