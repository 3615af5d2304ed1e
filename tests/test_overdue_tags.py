"""
Tests for overdue_tags template filters and badges.
"""

from datetime import date

import pytest
from django.template import Context, Template

from apps.reports.services import ItemKind, OverdueItem
from apps.reports.templatetags import overdue_tags


def make_item(**kwargs):
    values = {
        'id': 1,
        'kind': ItemKind.WORK,
        'title': 'Late filing',
        'customer_name': 'Acme Traders',
        'service_name': 'GST Filing',
        'due_date': date(2025, 3, 5),
        'days_overdue': 10,
        'priority': 'high',
        'status': 'pending',
    }
    values.update(kwargs)
    return OverdueItem(**values)


# =============================================================================
# Filters
# =============================================================================

@pytest.mark.parametrize('days, band, css', [
    (3, 'low', 'bg-blue-100 text-blue-800'),
    (10, 'medium', 'bg-yellow-100 text-yellow-800'),
    (20, 'high', 'bg-orange-100 text-orange-800'),
    (45, 'critical', 'bg-red-100 text-red-800'),
])
def test_urgency_filters(days, band, css):
    assert overdue_tags.urgency_band(days) == band
    assert overdue_tags.urgency_class(days) == css


def test_urgency_filters_ignore_bad_input():
    assert overdue_tags.urgency_band(None) == ''
    assert overdue_tags.urgency_class('soon') == ''


def test_display_filters():
    assert overdue_tags.priority_display('urgent') == 'Urgent'
    assert overdue_tags.priority_class('urgent') == 'priority-urgent'
    assert overdue_tags.status_display('in_progress') == 'In Progress'
    assert overdue_tags.kind_display('task') == 'Task'
    assert overdue_tags.priority_display('unknown') == 'unknown'


def test_format_due_date():
    assert overdue_tags.format_due_date(date(2025, 3, 5)) == 'Mar 5, 2025'
    assert overdue_tags.format_due_date(None) == 'No due date'


# =============================================================================
# Badges
# =============================================================================

def test_urgency_badge_pluralizes():
    assert '10 days' in overdue_tags.urgency_badge(make_item())
    assert '1 day<' in overdue_tags.urgency_badge(make_item(days_overdue=1))


def test_kind_and_priority_badges():
    assert 'Work' in overdue_tags.kind_badge(make_item())
    assert 'Task' in overdue_tags.kind_badge(make_item(kind=ItemKind.TASK))
    assert 'bg-amber-100' in overdue_tags.priority_badge(make_item())


def test_tags_render_in_template():
    template = Template(
        '{% load overdue_tags %}'
        '{% kind_badge item %}|{{ item.days_overdue|urgency_band }}|{{ item.due_date|format_due_date }}'
    )

    rendered = template.render(Context({'item': make_item()}))

    assert 'Work</span>|medium|Mar 5, 2025' in rendered
