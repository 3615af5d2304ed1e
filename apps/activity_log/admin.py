"""
Admin configuration for activity_log app.
"""

from django.contrib import admin
from .models import WorkActivity


@admin.register(WorkActivity)
class WorkActivityAdmin(admin.ModelAdmin):
    """Read-only admin for WorkActivity model."""

    list_display = ('work', 'user', 'action_type', 'description_preview', 'created_at')
    list_filter = ('action_type', 'created_at')
    search_fields = (
        'work__title', 'description',
        'user__email', 'user__first_name', 'user__last_name'
    )
    ordering = ('-created_at',)
    date_hierarchy = 'created_at'

    readonly_fields = (
        'work', 'user', 'action_type', 'description',
        'old_value', 'new_value', 'created_at'
    )

    def description_preview(self, obj):
        """Show truncated description."""
        return obj.description[:80] + '...' if len(obj.description) > 80 else obj.description
    description_preview.short_description = 'Description'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def get_queryset(self, request):
        """Optimize with select_related."""
        return super().get_queryset(request).select_related('work', 'user')
