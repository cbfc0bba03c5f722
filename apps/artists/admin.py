from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserCreationForm, UserChangeForm
from django.utils.html import format_html
from .models import Artist


class ArtistCreationForm(UserCreationForm):
    class Meta:
        model = Artist
        fields = ('name', 'email')


class ArtistChangeForm(UserChangeForm):
    class Meta:
        model = Artist
        fields = '__all__'


@admin.register(Artist)
class ArtistAdmin(BaseUserAdmin):
    """
    Admin interface for artists.

    Artists are also the login accounts, so the auth admin is reused with
    the username fields swapped for name/email.
    """

    form = ArtistChangeForm
    add_form = ArtistCreationForm

    list_display = [
        'name',
        'email',
        'is_active_badge',
        'is_staff',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_staff',
        'is_superuser',
        'created_at',
    ]

    search_fields = [
        'name',
        'email',
        'bio',
    ]

    ordering = ['name']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Profile', {
            'fields': ('name', 'bio', 'image_url', 'specialization', 'achievements')
        }),
        ('Contact', {
            'fields': ('email', 'phone', 'website'),
        }),
        ('Account', {
            'fields': ('password', 'is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create Artist', {
            'classes': ('wide',),
            'fields': ('name', 'email', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'created_at',
        'updated_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def is_active_badge(self, obj):
        """Display active status as colored badge."""
        if obj.is_active:
            return format_html(
                '<span style="background: #6B8E5E; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Active</span>'
            )
        return format_html(
            '<span style="background: #B85C5C; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">Inactive</span>'
        )
    is_active_badge.short_description = 'Status'
    is_active_badge.admin_order_field = 'is_active'

    actions = ['activate_artists', 'deactivate_artists']

    @admin.action(description='Mark selected artists as active')
    def activate_artists(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} artist(s).')

    @admin.action(description='Mark selected artists as inactive')
    def deactivate_artists(self, request, queryset):
        """Deactivate selected artists (excludes superusers)."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} artist(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)
