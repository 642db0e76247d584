# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, UserRole


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for farm accounts.

    Provides:
    - Listing with role and status badges
    - Filtering by role, language and status
    - Bulk promote/demote actions
    """

    list_display = [
        'email',
        'display_name',
        'role_badge',
        'language',
        'is_active',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'language',
        'is_active',
        'is_staff',
        'created_at',
    ]

    search_fields = [
        'email',
        'display_name',
    ]

    ordering = ['-created_at']

    # Remove username field references from BaseUserAdmin
    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'display_name', 'password')
        }),
        ('Farm', {
            'fields': ('role', 'language'),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'role', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'created_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def role_badge(self, obj):
        """Display farm role as colored badge."""
        if obj.role == UserRole.OWNER:
            bg, fg = '#6B8E5E', 'white'
        else:
            bg, fg = '#E5C49A', '#2C1810'
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_role_display()
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'

    actions = ['make_owners', 'make_workers']

    @admin.action(description='Promote selected users to owner')
    def make_owners(self, request, queryset):
        count = queryset.update(role=UserRole.OWNER)
        self.message_user(request, f'Promoted {count} user(s).')

    @admin.action(description='Demote selected users to worker')
    def make_workers(self, request, queryset):
        """Demote users, keeping superusers as owners."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(role=UserRole.WORKER)
        skipped = queryset.count() - count
        msg = f'Demoted {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)
