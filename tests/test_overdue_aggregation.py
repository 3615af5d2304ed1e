"""
Tests for overdue aggregation: list_overdue_items and its date arithmetic.
"""

from datetime import timedelta
from unittest import mock

import pytest
from django.db import DatabaseError

from apps.reports import services
from apps.reports.services import (
    ItemKind, UNKNOWN, UrgencyBand, compute_days_overdue, due_instant,
    list_overdue_items, urgency_band,
)

pytestmark = pytest.mark.django_db


# =============================================================================
# Date arithmetic
# =============================================================================

class TestComputeDaysOverdue:

    def test_exactly_one_day_late_is_one(self, now):
        assert compute_days_overdue(now - timedelta(hours=24), now) == 1

    def test_one_millisecond_late_rounds_up_to_one(self, now):
        assert compute_days_overdue(now - timedelta(milliseconds=1), now) == 1

    def test_partial_day_rounds_up(self, now):
        assert compute_days_overdue(now - timedelta(days=2, hours=1), now) == 3

    def test_not_yet_due_is_zero(self, now):
        assert compute_days_overdue(now, now) == 0
        assert compute_days_overdue(now + timedelta(minutes=5), now) == 0

    def test_non_decreasing_as_now_advances(self, now):
        due_at = now - timedelta(hours=5)
        previous = 0
        for minutes in range(0, 5 * 24 * 60, 97):
            days = compute_days_overdue(due_at, now + timedelta(minutes=minutes))
            assert days >= previous
            previous = days

    def test_due_instant_is_local_midnight(self, today, now):
        assert due_instant(today) == now


class TestUrgencyBand:

    @pytest.mark.parametrize('days, band', [
        (1, UrgencyBand.LOW),
        (7, UrgencyBand.LOW),
        (8, UrgencyBand.MEDIUM),
        (14, UrgencyBand.MEDIUM),
        (15, UrgencyBand.HIGH),
        (30, UrgencyBand.HIGH),
        (31, UrgencyBand.CRITICAL),
    ])
    def test_band_boundaries(self, days, band):
        assert urgency_band(days) == band


# =============================================================================
# Inclusion and exclusion
# =============================================================================

class TestWorks:

    def test_active_past_due_work_is_listed_once(self, owner, make_work, now):
        pending = make_work('Pending', days_ago=4, status='pending')
        started = make_work('Started', days_ago=2, status='in_progress')

        items = list_overdue_items(owner, now=now)

        assert [(i.kind, i.id) for i in items] == [
            (ItemKind.WORK, pending.pk),
            (ItemKind.WORK, started.pk),
        ]
        assert items[0].days_overdue == 4
        assert items[0].customer_name == 'Acme Traders'
        assert items[0].service_name == 'GST Filing'

    @pytest.mark.parametrize('status', ['completed', 'on_hold', 'cancelled'])
    def test_inactive_work_is_excluded(self, owner, make_work, now, status):
        make_work(days_ago=10, status=status)
        assert list_overdue_items(owner, now=now) == []

    def test_work_without_due_date_is_excluded(self, owner, make_work, now):
        make_work(due_date=None)
        assert list_overdue_items(owner, now=now) == []

    def test_work_due_today_or_later_is_excluded(self, owner, make_work, now):
        make_work('Today', days_ago=0)
        make_work('Tomorrow', days_ago=-1)
        assert list_overdue_items(owner, now=now) == []

    def test_missing_customer_and_service_show_unknown(self, owner, make_work, now):
        make_work(customer=None, service=None)

        item = list_overdue_items(owner, now=now)[0]

        assert item.customer_name == UNKNOWN
        assert item.service_name == UNKNOWN

    def test_assignee_and_reason_are_carried(self, owner, make_work, staff, now):
        make_work(assigned_to=staff, overdue_reason='Waiting on client', overdue_marked_at=now)

        item = list_overdue_items(owner, now=now)[0]

        assert item.assigned_to == 'Priya Nair'
        assert item.overdue_reason == 'Waiting on client'
        assert item.overdue_marked_at == now
        assert item.parent_work_id is None


class TestPeriodTasks:

    def test_pending_task_in_active_period_is_listed(
        self, owner, make_work, make_period, make_period_task, now
    ):
        work = make_work('Monthly GST', due_date=None, is_recurring=True)
        period = make_period(work, 'March 2025', status='in_progress')
        task = make_period_task(period, 'Collect invoices', days_ago=3)

        items = list_overdue_items(owner, now=now)

        assert len(items) == 1
        assert items[0].id == task.pk
        assert items[0].kind == ItemKind.TASK
        assert items[0].title == 'Monthly GST - March 2025 - Collect invoices'
        assert items[0].parent_work_id == work.pk
        assert items[0].overdue_reason is None

    def test_task_in_completed_period_is_excluded(
        self, owner, make_work, make_period, make_period_task, now
    ):
        work = make_work(due_date=None, is_recurring=True)
        period = make_period(work, status='completed')
        make_period_task(period, days_ago=5, status='pending')

        assert list_overdue_items(owner, now=now) == []

    def test_completed_task_is_excluded(
        self, owner, make_work, make_period, make_period_task, now
    ):
        work = make_work(due_date=None, is_recurring=True)
        period = make_period(work)
        make_period_task(period, days_ago=5, status='completed')
        make_period_task(period, due_date=None)

        assert list_overdue_items(owner, now=now) == []


class TestAdhocTasks:

    def test_task_on_one_off_work_is_listed(self, owner, make_work, make_work_task, now):
        work = make_work('Audit', due_date=None)
        task = make_work_task(work, 'Send checklist', days_ago=6)

        items = list_overdue_items(owner, now=now)

        assert len(items) == 1
        assert items[0].id == task.pk
        assert items[0].title == 'Audit - Send checklist'
        assert items[0].days_overdue == 6

    def test_recurring_work_task_never_listed_as_adhoc(
        self, owner, make_work, make_period, make_period_task, make_work_task, now
    ):
        work = make_work('Monthly GST', due_date=None, is_recurring=True)
        period = make_period(work)
        period_task = make_period_task(period, 'Period task', days_ago=2)
        make_work_task(work, 'Stray task', days_ago=2)

        items = list_overdue_items(owner, now=now)

        assert [i.id for i in items] == [period_task.pk]
        assert items[0].title.startswith('Monthly GST - March 2025')


# =============================================================================
# Ordering, scoping and failures
# =============================================================================

class TestAggregation:

    def test_sorted_most_overdue_first(
        self, owner, make_work, make_period, make_period_task, make_work_task, now
    ):
        make_work('W', days_ago=3)
        recurring = make_work('R', due_date=None, is_recurring=True)
        make_period_task(make_period(recurring), 'P', days_ago=20)
        make_work_task(make_work('A', due_date=None), 'T', days_ago=9)

        items = list_overdue_items(owner, now=now)

        assert [i.days_overdue for i in items] == [20, 9, 3]
        for a, b in zip(items, items[1:]):
            assert a.days_overdue >= b.days_overdue

    def test_ties_keep_source_order(
        self, owner, make_work, make_period, make_period_task, make_work_task, now
    ):
        work = make_work('W', days_ago=4)
        recurring = make_work('R', due_date=None, is_recurring=True)
        period_task = make_period_task(make_period(recurring), 'P', days_ago=4)
        adhoc = make_work_task(make_work('A', due_date=None), 'T', days_ago=4)

        items = list_overdue_items(owner, now=now)

        assert [i.id for i in items] == [work.pk, period_task.pk, adhoc.pk]

    def test_other_tenant_rows_are_never_listed(
        self, owner, other_owner, make_work, make_work_task, now
    ):
        make_work('Mine', days_ago=2)
        theirs = make_work('Theirs', days_ago=2, owner=other_owner, customer=None, service=None)
        make_work_task(theirs, days_ago=2)

        items = list_overdue_items(owner, now=now)

        assert [i.title for i in items] == ['Mine']
        assert len(list_overdue_items(other_owner, now=now)) == 2

    def test_scenario_mixed_sources(
        self, owner, make_work, make_period, make_period_task, now
    ):
        w1 = make_work('W1', days_ago=10, status='pending')
        make_work('W2', days_ago=-1)
        recurring = make_work('Recurring', due_date=None, is_recurring=True)
        closed = make_period(recurring, 'February 2025', status='completed')
        make_period_task(closed, 'T1', days_ago=5)
        open_period = make_period(recurring, 'March 2025', status='pending')
        t2 = make_period_task(open_period, 'T2', days_ago=3, status='pending')

        items = list_overdue_items(owner, now=now)

        assert [(i.kind, i.id) for i in items] == [
            (ItemKind.WORK, w1.pk),
            (ItemKind.TASK, t2.pk),
        ]
        assert items[0].days_overdue == 10
        assert items[0].urgency == UrgencyBand.MEDIUM
        assert items[1].days_overdue == 3
        assert items[1].urgency == UrgencyBand.LOW

    def test_any_source_failure_fails_whole_aggregation(self, owner, make_work, now):
        make_work(days_ago=2)

        with mock.patch.object(
            services, '_adhoc_task_rows', side_effect=DatabaseError('connection lost')
        ):
            with pytest.raises(DatabaseError):
                list_overdue_items(owner, now=now)

    def test_repeated_calls_are_independent(self, owner, make_work, now):
        work = make_work(days_ago=2)
        first = list_overdue_items(owner, now=now)

        work.status = 'completed'
        work.save()

        assert len(first) == 1
        assert list_overdue_items(owner, now=now) == []
