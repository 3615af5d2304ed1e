"""
Tests for set_overdue_reason.
"""

from datetime import timedelta

import pytest
from django.core.exceptions import ValidationError

from apps.activity_log.models import WorkActivity
from apps.reports.services import ItemKind, list_overdue_items, set_overdue_reason
from apps.works.models import Work

pytestmark = pytest.mark.django_db


def test_reason_is_recorded_with_timestamp(owner, make_work, now):
    work = make_work(days_ago=5)

    set_overdue_reason(owner, work.pk, ItemKind.WORK, 'delay', user=owner, now=now)

    item = list_overdue_items(owner, now=now)[0]
    assert item.overdue_reason == 'delay'
    assert item.overdue_marked_at == now


def test_empty_reason_clears_both_fields(owner, make_work, now):
    work = make_work(days_ago=5, overdue_reason='old', overdue_marked_at=now)

    updated = set_overdue_reason(owner, work.pk, ItemKind.WORK, '', user=owner, now=now)

    assert updated.overdue_reason is None
    assert updated.overdue_marked_at is None
    item = list_overdue_items(owner, now=now)[0]
    assert item.overdue_reason is None
    assert item.overdue_marked_at is None


def test_whitespace_reason_clears(owner, make_work, now):
    work = make_work(days_ago=5, overdue_reason='old', overdue_marked_at=now)

    updated = set_overdue_reason(owner, work.pk, ItemKind.WORK, '   \n', now=now)

    assert updated.overdue_reason is None
    assert updated.overdue_marked_at is None


def test_reason_is_stripped(owner, make_work, now):
    work = make_work(days_ago=5)

    updated = set_overdue_reason(owner, work.pk, ItemKind.WORK, '  Client away  ', now=now)

    assert updated.overdue_reason == 'Client away'


def test_updating_reason_moves_timestamp(owner, make_work, now):
    work = make_work(days_ago=5)
    later = now + timedelta(hours=3)

    set_overdue_reason(owner, work.pk, ItemKind.WORK, 'first', now=now)
    updated = set_overdue_reason(owner, work.pk, ItemKind.WORK, 'second', now=later)

    assert updated.overdue_reason == 'second'
    assert updated.overdue_marked_at == later


def test_activity_is_logged(owner, make_work, now):
    work = make_work(days_ago=5)

    set_overdue_reason(owner, work.pk, ItemKind.WORK, 'delay', user=owner, now=now)
    set_overdue_reason(owner, work.pk, ItemKind.WORK, '', user=owner, now=now)

    activities = list(WorkActivity.objects.filter(work=work).order_by('pk'))
    assert [a.action_type for a in activities] == [
        WorkActivity.ActionType.OVERDUE_REASON_SET,
        WorkActivity.ActionType.OVERDUE_REASON_CLEARED,
    ]
    assert activities[0].new_value == 'delay'
    assert activities[1].old_value == 'delay'
    assert activities[0].user == owner


def test_task_kind_is_rejected(owner, make_work, make_work_task, now):
    task = make_work_task(make_work(due_date=None), days_ago=3)

    with pytest.raises(ValidationError):
        set_overdue_reason(owner, task.pk, ItemKind.TASK, 'delay', now=now)


def test_other_tenant_work_is_not_found(owner, other_owner, make_work, now):
    work = make_work(days_ago=5)

    with pytest.raises(Work.DoesNotExist):
        set_overdue_reason(other_owner, work.pk, ItemKind.WORK, 'delay', now=now)

    work.refresh_from_db()
    assert work.overdue_reason is None
