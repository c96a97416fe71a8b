# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import User, UserType

BADGE_HTML = (
    '<span style="background: {}; color: white; padding: 3px 8px; '
    'border-radius: 10px; font-size: 11px;">{}</span>'
)


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Customers and business accounts, searchable by email, name and phone."""

    list_display = ['email', 'name', 'user_type_badge', 'is_active_badge', 'created_at', 'last_login']
    list_filter = ['user_type', 'is_active', 'is_staff', 'created_at']
    search_fields = ['email', 'name', 'phone']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'
    readonly_fields = ['created_at', 'updated_at', 'last_login']
    filter_horizontal = ['groups', 'user_permissions']
    actions = ['activate_users', 'deactivate_users']

    # No username on this model
    fieldsets = (
        ('Account', {'fields': ('email', 'password', 'user_type')}),
        ('Profile', {'fields': ('name', 'phone')}),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'name', 'user_type', 'password1', 'password2'),
        }),
    )

    @admin.display(description='Type', ordering='user_type')
    def user_type_badge(self, obj):
        color = '#2563EB' if obj.user_type == UserType.BUSINESS else '#6B8E5E'
        return format_html(BADGE_HTML, color, obj.get_user_type_display())

    @admin.display(description='Status', ordering='is_active')
    def is_active_badge(self, obj):
        if obj.is_active:
            return format_html(BADGE_HTML, '#6B8E5E', 'Active')
        return format_html(BADGE_HTML, '#B85C5C', 'Inactive')

    @admin.action(description='Activate selected accounts')
    def activate_users(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} account(s).')

    @admin.action(description='Deactivate selected accounts')
    def deactivate_users(self, request, queryset):
        """Superusers are never deactivated from here."""
        count = queryset.filter(is_superuser=False).update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} account(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)
