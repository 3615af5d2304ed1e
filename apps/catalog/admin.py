"""
Admin configuration for catalog app.
"""

from django.contrib import admin
from .models import Service


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    """Admin for Service model."""

    list_display = ('name', 'owner', 'created_at')
    search_fields = ('name', 'description')
    ordering = ('name',)
    raw_id_fields = ('owner',)

    readonly_fields = ('created_at', 'updated_at')
