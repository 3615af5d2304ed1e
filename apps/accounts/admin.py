"""
Admin configuration for accounts app.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _
from django.utils.html import format_html

from .models import User, StaffMember


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """User admin with email as the login field."""

    list_display = (
        'email', 'full_name_display', 'is_active_display', 'is_staff', 'created_at'
    )
    list_filter = ('is_active', 'is_staff')
    search_fields = ('email', 'first_name', 'last_name')
    ordering = ('first_name', 'last_name')
    list_per_page = 25

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        (_('Personal Info'), {'fields': ('first_name', 'last_name')}),
        (_('Permissions'), {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        (_('Important dates'), {
            'fields': ('last_login', 'created_at', 'updated_at'),
        }),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'first_name', 'last_name', 'password1', 'password2'),
        }),
    )

    readonly_fields = ('created_at', 'updated_at', 'last_login')

    def full_name_display(self, obj):
        return obj.get_full_name() or '-'
    full_name_display.short_description = 'Name'
    full_name_display.admin_order_field = 'first_name'

    def is_active_display(self, obj):
        if obj.is_active:
            return format_html('<span style="color: #16A34A;">Active</span>')
        return format_html('<span style="color: #DC2626;">Inactive</span>')
    is_active_display.short_description = 'Status'
    is_active_display.admin_order_field = 'is_active'


@admin.register(StaffMember)
class StaffMemberAdmin(admin.ModelAdmin):
    """Admin for StaffMember model."""

    list_display = ('name', 'email', 'owner', 'role', 'linked_login', 'is_active', 'created_at')
    list_filter = ('is_active', 'role')
    search_fields = ('name', 'email', 'owner__email')
    ordering = ('name',)
    raw_id_fields = ('owner', 'user')

    readonly_fields = ('created_at', 'updated_at')

    def linked_login(self, obj):
        """Show whether the staff row has been linked to a login yet."""
        return obj.user.email if obj.user else '-'
    linked_login.short_description = 'Login'

    def get_queryset(self, request):
        """Optimize with select_related."""
        return super().get_queryset(request).select_related('owner', 'user')
