"""
Admin configuration for works app.
"""

from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html

from apps.reports.services import compute_days_overdue, due_instant
from .models import RecurringPeriod, RecurringPeriodTask, Work, WorkTask

STATUS_COLORS = {
    'pending': '#FFA500',
    'in_progress': '#3498db',
    'completed': '#27ae60',
    'on_hold': '#8e44ad',
    'cancelled': '#95a5a6',
}

PRIORITY_COLORS = {
    'low': '#95a5a6',
    'medium': '#3498db',
    'high': '#e67e22',
    'urgent': '#e74c3c',
}


def _colored(color, label):
    return format_html(
        '<span style="color: {}; font-weight: bold;">{}</span>',
        color, label
    )


def _overdue_label(item):
    """Days-overdue label for an active item, or '' when on time."""
    if not item.due_date or item.status not in ('pending', 'in_progress'):
        return ''
    days = compute_days_overdue(due_instant(item.due_date), timezone.now())
    if days < 1:
        return ''
    return format_html('<span style="color: red;">{} days overdue</span>', days)


class WorkTaskInline(admin.TabularInline):
    """Inline admin for ad-hoc tasks on work detail."""
    model = WorkTask
    extra = 0
    fields = ('title', 'status', 'priority', 'due_date', 'assigned_to', 'sort_order')
    raw_id_fields = ('assigned_to',)


class RecurringPeriodInline(admin.TabularInline):
    """Inline admin for periods on recurring work detail."""
    model = RecurringPeriod
    extra = 0
    fields = ('period_name', 'period_start_date', 'period_end_date', 'status')
    show_change_link = True


@admin.register(Work)
class WorkAdmin(admin.ModelAdmin):
    """Admin for Work model."""

    list_display = (
        'title', 'customer', 'service', 'assigned_to',
        'status_display', 'priority_display', 'due_date',
        'is_overdue_display', 'created_at'
    )
    list_filter = ('status', 'priority', 'is_recurring', 'due_date')
    search_fields = ('title', 'description', 'customer__name', 'overdue_reason')
    ordering = ('-created_at',)
    date_hierarchy = 'created_at'
    raw_id_fields = ('owner', 'customer', 'service', 'assigned_to')

    readonly_fields = ('overdue_marked_at', 'created_at', 'updated_at')

    fieldsets = (
        (None, {
            'fields': ('owner', 'title', 'description')
        }),
        ('Customer & Service', {
            'fields': ('customer', 'service', 'assigned_to')
        }),
        ('Status & Priority', {
            'fields': ('status', 'priority', 'due_date')
        }),
        ('Recurrence', {
            'fields': ('is_recurring', 'recurrence_pattern'),
            'classes': ('collapse',),
        }),
        ('Overdue Tracking', {
            'fields': ('overdue_reason', 'overdue_marked_at'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    inlines = [RecurringPeriodInline, WorkTaskInline]

    def get_queryset(self, request):
        """Optimize with select_related."""
        return super().get_queryset(request).select_related(
            'owner', 'customer', 'service', 'assigned_to'
        )

    def status_display(self, obj):
        """Display status with color coding."""
        return _colored(STATUS_COLORS.get(obj.status, '#000'), obj.get_status_display())
    status_display.short_description = 'Status'
    status_display.admin_order_field = 'status'

    def priority_display(self, obj):
        """Display priority with color coding."""
        return _colored(PRIORITY_COLORS.get(obj.priority, '#000'), obj.get_priority_display())
    priority_display.short_description = 'Priority'
    priority_display.admin_order_field = 'priority'

    def is_overdue_display(self, obj):
        return _overdue_label(obj)
    is_overdue_display.short_description = 'Overdue'


class RecurringPeriodTaskInline(admin.TabularInline):
    """Inline admin for tasks on period detail."""
    model = RecurringPeriodTask
    extra = 0
    fields = ('title', 'status', 'priority', 'due_date', 'assigned_to', 'sort_order')
    raw_id_fields = ('assigned_to',)


@admin.register(RecurringPeriod)
class RecurringPeriodAdmin(admin.ModelAdmin):
    """Admin for RecurringPeriod model."""

    list_display = ('period_name', 'work', 'period_start_date', 'period_end_date', 'status')
    list_filter = ('status',)
    search_fields = ('period_name', 'work__title')
    ordering = ('-period_start_date',)
    raw_id_fields = ('work',)

    inlines = [RecurringPeriodTaskInline]


@admin.register(RecurringPeriodTask)
class RecurringPeriodTaskAdmin(admin.ModelAdmin):
    """Admin for RecurringPeriodTask model."""

    list_display = ('title', 'period', 'assigned_to', 'status', 'priority', 'due_date', 'is_overdue_display')
    list_filter = ('status', 'priority')
    search_fields = ('title', 'period__period_name', 'period__work__title')
    raw_id_fields = ('period', 'assigned_to')

    def get_queryset(self, request):
        """Optimize with select_related."""
        return super().get_queryset(request).select_related('period__work', 'assigned_to')

    def is_overdue_display(self, obj):
        return _overdue_label(obj)
    is_overdue_display.short_description = 'Overdue'


@admin.register(WorkTask)
class WorkTaskAdmin(admin.ModelAdmin):
    """Admin for WorkTask model."""

    list_display = ('title', 'work', 'assigned_to', 'status', 'priority', 'due_date', 'is_overdue_display')
    list_filter = ('status', 'priority')
    search_fields = ('title', 'work__title')
    raw_id_fields = ('work', 'assigned_to')

    def get_queryset(self, request):
        """Optimize with select_related."""
        return super().get_queryset(request).select_related('work', 'assigned_to')

    def is_overdue_display(self, obj):
        return _overdue_label(obj)
    is_overdue_display.short_description = 'Overdue'
