"""
Admin configuration for customers app.
"""

from django.contrib import admin
from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    """Admin for Customer model."""

    list_display = ('name', 'email', 'phone', 'owner', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('name', 'email', 'phone')
    ordering = ('name',)
    raw_id_fields = ('owner',)

    readonly_fields = ('created_at', 'updated_at')

    def get_queryset(self, request):
        """Optimize with select_related."""
        return super().get_queryset(request).select_related('owner')
