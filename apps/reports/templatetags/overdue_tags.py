"""
Custom template tags and filters for the overdue report.

Usage in templates:
    {% load overdue_tags %}

    {# Filters #}
    {{ item.days_overdue|urgency_band }}
    {{ item.days_overdue|urgency_class }}
    {{ item.priority|priority_class }}
    {{ item.priority|priority_display }}
    {{ item.status|status_display }}
    {{ item.kind|kind_display }}
    {{ item.due_date|format_due_date }}

    {# Tags #}
    {% urgency_badge item %}
    {% priority_badge item %}
    {% kind_badge item %}
"""

from django import template
from django.utils.html import format_html

from apps.reports.services import ItemKind, urgency_band as classify_urgency
from apps.works.models import Priority, Work

register = template.Library()

BADGE_HTML = (
    '<span class="inline-flex items-center px-2 py-0.5 rounded text-xs font-medium {}">'
    '{}</span>'
)


# =============================================================================
# FILTERS - Urgency
# =============================================================================

@register.filter
def urgency_band(days_overdue):
    """
    Classify days overdue: critical (> 30), high (> 14), medium (> 7), low.

    Usage: {{ item.days_overdue|urgency_band }}
    """
    try:
        days = int(days_overdue)
    except (ValueError, TypeError):
        return ''
    return classify_urgency(days).value


@register.filter
def urgency_class(days_overdue):
    """
    Return Tailwind classes for the days-overdue cell.

    Usage: <span class="{{ item.days_overdue|urgency_class }}">
    """
    band_classes = {
        'critical': 'bg-red-100 text-red-800',
        'high': 'bg-orange-100 text-orange-800',
        'medium': 'bg-yellow-100 text-yellow-800',
        'low': 'bg-blue-100 text-blue-800',
    }
    return band_classes.get(urgency_band(days_overdue), '')


# =============================================================================
# FILTERS - Display
# =============================================================================

@register.filter
def priority_class(priority):
    """
    Return CSS class for a priority.

    Usage: {{ item.priority|priority_class }}
    """
    priority_classes = {
        'low': 'priority-low',
        'medium': 'priority-medium',
        'high': 'priority-high',
        'urgent': 'priority-urgent',
    }
    return priority_classes.get(priority, '')


@register.filter
def priority_display(priority):
    """Usage: {{ item.priority|priority_display }}"""
    return dict(Priority.choices).get(priority, priority)


@register.filter
def status_display(status):
    """Usage: {{ item.status|status_display }}"""
    return dict(Work.Status.choices).get(status, status)


@register.filter
def kind_display(kind):
    """Usage: {{ item.kind|kind_display }}"""
    return dict(ItemKind.choices).get(kind, kind)


@register.filter
def format_due_date(due_date):
    """
    Format a due date for the report table, e.g. "Mar 5, 2025".

    Usage: {{ item.due_date|format_due_date }}
    """
    if not due_date:
        return "No due date"
    return f"{due_date:%b} {due_date.day}, {due_date.year}"


# =============================================================================
# SIMPLE TAGS - Badge Generation
# =============================================================================

@register.simple_tag
def urgency_badge(item):
    """
    Generate HTML badge with the days overdue, colored by urgency.

    Usage: {% urgency_badge item %}
    """
    if not item or not item.days_overdue:
        return ''

    days = item.days_overdue
    label = f"{days} day{'s' if days != 1 else ''}"
    return format_html(BADGE_HTML, urgency_class(days), label)


@register.simple_tag
def priority_badge(item):
    """
    Generate HTML badge for priority.

    Usage: {% priority_badge item %}
    """
    if not item or not item.priority:
        return ''

    colors = {
        'low': 'bg-gray-100 text-gray-800',
        'medium': 'bg-blue-100 text-blue-800',
        'high': 'bg-amber-100 text-amber-800',
        'urgent': 'bg-red-100 text-red-800',
    }

    color_class = colors.get(item.priority, 'bg-gray-100 text-gray-800')
    return format_html(BADGE_HTML, color_class, priority_display(item.priority))


@register.simple_tag
def kind_badge(item):
    """
    Generate HTML badge telling works from tasks.

    Usage: {% kind_badge item %}
    """
    if not item:
        return ''

    if item.kind == ItemKind.WORK:
        color_class = 'bg-indigo-100 text-indigo-800'
    else:
        color_class = 'bg-purple-100 text-purple-800'
    return format_html(BADGE_HTML, color_class, kind_display(item.kind))
