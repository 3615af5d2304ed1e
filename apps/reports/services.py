"""
Service layer for reports app: the overdue works & tasks report.

Overdue items come from three sources:
- Works (pending/in_progress, due date set)
- Recurring period tasks whose period is not completed
- Ad-hoc tasks on non-recurring works

Each source row is normalized into an OverdueItem, the three lists are
merged and sorted most-overdue first. Aggregation is read-only and keeps no
state between calls; any database error aborts the whole aggregation.

Services:
- list_overdue_items: Build the sorted overdue list for a tenant
- set_overdue_reason: Record or clear the overdue reason of a work
- filter_overdue_items: Apply report filters to an aggregated list
- summarize_overdue_items: Counts for the summary cards
- urgency_band: Classify days overdue for display
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.utils import timezone
from django.utils.text import Truncator

from apps.activity_log.models import WorkActivity, log_work_activity
from apps.customers.models import Customer
from apps.works.models import (
    ACTIVE_STATUSES, RecurringPeriodTask, TaskStatus, Work, WorkTask,
)

logger = logging.getLogger(__name__)

UNKNOWN = 'Unknown'
ONE_DAY = timedelta(days=1)


class ItemKind(models.TextChoices):
    WORK = 'work', 'Work'
    TASK = 'task', 'Task'


class UrgencyBand(models.TextChoices):
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'
    CRITICAL = 'critical', 'Critical'


@dataclass(frozen=True)
class OverdueItem:
    """One overdue work or task, normalized for the report."""

    id: int
    kind: str
    title: str
    customer_name: str
    service_name: str
    due_date: date
    days_overdue: int
    priority: str
    status: str
    assigned_to: Optional[str] = None
    overdue_reason: Optional[str] = None
    overdue_marked_at: Optional[datetime] = None
    parent_work_id: Optional[int] = None

    @property
    def is_work(self):
        return self.kind == ItemKind.WORK

    @property
    def urgency(self):
        return urgency_band(self.days_overdue)


# =============================================================================
# Date arithmetic
# =============================================================================

def due_instant(value):
    """
    Return the aware datetime at which a due date falls due.

    Calendar dates fall due at the start of the day in the active time zone.
    Naive datetimes are interpreted in the active time zone.
    """
    if isinstance(value, datetime):
        if timezone.is_naive(value):
            return timezone.make_aware(value)
        return value
    return timezone.make_aware(datetime.combine(value, time.min))


def compute_days_overdue(due_at, now):
    """
    Whole days overdue, rounded up: ceil((now - due_at) / 1 day).

    Any positive lateness counts as at least one day. Returns 0 when
    `due_at` is not before `now`.
    """
    delta = now - due_at
    if delta <= timedelta(0):
        return 0
    days, remainder = divmod(delta, ONE_DAY)
    return days + (1 if remainder else 0)


def urgency_band(days_overdue):
    """
    Classify days overdue.

    > 30 critical, 15-30 high, 8-14 medium, 1-7 low
    """
    if days_overdue > 30:
        return UrgencyBand.CRITICAL
    if days_overdue > 14:
        return UrgencyBand.HIGH
    if days_overdue > 7:
        return UrgencyBand.MEDIUM
    return UrgencyBand.LOW


# =============================================================================
# Source queries
# =============================================================================

def _overdue_candidates(queryset, now):
    """Restrict a task/work queryset to active rows due on or before today."""
    return queryset.filter(
        status__in=ACTIVE_STATUSES,
        due_date__isnull=False,
        due_date__lte=timezone.localdate(now),
    )


def _work_rows(tenant, now):
    return _overdue_candidates(
        Work.objects.filter(owner=tenant),
        now,
    ).select_related('customer', 'service', 'assigned_to')


def _period_task_rows(tenant, now):
    return _overdue_candidates(
        RecurringPeriodTask.objects.filter(period__work__owner=tenant),
        now,
    ).exclude(
        period__status=TaskStatus.COMPLETED
    ).select_related(
        'period__work__customer', 'period__work__service', 'assigned_to'
    )


def _adhoc_task_rows(tenant, now):
    # Tasks of recurring works are reported through their periods
    return _overdue_candidates(
        WorkTask.objects.filter(work__owner=tenant, work__is_recurring=False),
        now,
    ).select_related('work__customer', 'work__service', 'assigned_to')


# =============================================================================
# Normalization (one function per source)
# =============================================================================

def _related_name(obj):
    return obj.name if obj is not None else UNKNOWN


def _assignee_name(staff):
    return staff.name if staff is not None else None


def overdue_item_from_work(work, now):
    """Build the OverdueItem for a work, or None if it is not overdue."""
    if work.due_date is None:
        return None
    days = compute_days_overdue(due_instant(work.due_date), now)
    if days < 1:
        return None
    return OverdueItem(
        id=work.pk,
        kind=ItemKind.WORK,
        title=work.title,
        customer_name=_related_name(work.customer),
        service_name=_related_name(work.service),
        due_date=work.due_date,
        days_overdue=days,
        priority=work.priority,
        status=work.status,
        assigned_to=_assignee_name(work.assigned_to),
        overdue_reason=work.overdue_reason,
        overdue_marked_at=work.overdue_marked_at,
    )


def overdue_item_from_period_task(task, now):
    """Build the OverdueItem for a recurring period task, or None."""
    days = compute_days_overdue(due_instant(task.due_date), now)
    if days < 1:
        return None
    period = task.period
    work = period.work
    return OverdueItem(
        id=task.pk,
        kind=ItemKind.TASK,
        title=f"{work.title} - {period.period_name} - {task.title}",
        customer_name=_related_name(work.customer),
        service_name=_related_name(work.service),
        due_date=task.due_date,
        days_overdue=days,
        priority=task.priority,
        status=task.status,
        assigned_to=_assignee_name(task.assigned_to),
        parent_work_id=work.pk,
    )


def overdue_item_from_work_task(task, now):
    """Build the OverdueItem for an ad-hoc work task, or None."""
    days = compute_days_overdue(due_instant(task.due_date), now)
    if days < 1:
        return None
    work = task.work
    return OverdueItem(
        id=task.pk,
        kind=ItemKind.TASK,
        title=f"{work.title} - {task.title}",
        customer_name=_related_name(work.customer),
        service_name=_related_name(work.service),
        due_date=task.due_date,
        days_overdue=days,
        priority=task.priority,
        status=task.status,
        assigned_to=_assignee_name(task.assigned_to),
        parent_work_id=work.pk,
    )


# =============================================================================
# Aggregation
# =============================================================================

def list_overdue_items(tenant, now=None) -> List[OverdueItem]:
    """
    Return every actively overdue work and task of a tenant.

    Args:
        tenant: Business owner (User) whose records are reported
        now: Evaluation instant (defaults to timezone.now())

    Returns:
        List of OverdueItem sorted by days_overdue, most overdue first.
        Ties keep source order: works, period tasks, ad-hoc tasks.

    Raises:
        DatabaseError: If any of the three source reads fails. No partial
        result is ever returned.
    """
    if now is None:
        now = timezone.now()

    # Evaluate all three reads before building anything
    works = list(_work_rows(tenant, now))
    period_tasks = list(_period_task_rows(tenant, now))
    adhoc_tasks = list(_adhoc_task_rows(tenant, now))

    logger.debug(
        'Overdue candidates for %s: %d works, %d period tasks, %d ad-hoc tasks',
        tenant.pk, len(works), len(period_tasks), len(adhoc_tasks)
    )

    items = []
    for rows, build in (
        (works, overdue_item_from_work),
        (period_tasks, overdue_item_from_period_task),
        (adhoc_tasks, overdue_item_from_work_task),
    ):
        for row in rows:
            item = build(row, now)
            if item is not None:
                items.append(item)

    items.sort(key=lambda item: item.days_overdue, reverse=True)
    return items


def set_overdue_reason(tenant, item_id, kind, reason_text, user=None, now=None):
    """
    Record or clear the overdue reason of a work.

    A non-empty reason is stored with the current time as overdue_marked_at;
    an empty reason clears both fields. Both columns are written by a single
    UPDATE, logged to the work's activity trail in the same transaction.

    Args:
        tenant: Business owner (User) who owns the work
        item_id: Work primary key
        kind: Item kind; only 'work' items carry a reason
        reason_text: Reason text, empty or None to clear
        user: User performing the change (for the activity log)
        now: Timestamp to record (defaults to timezone.now())

    Returns:
        The refreshed Work instance

    Raises:
        ValidationError: If kind is not 'work'
        Work.DoesNotExist: If the work does not exist for this tenant
    """
    if kind != ItemKind.WORK:
        raise ValidationError("Overdue reasons can only be recorded on works.")

    if now is None:
        now = timezone.now()

    reason = (reason_text or '').strip()
    work = Work.objects.get(pk=item_id, owner=tenant)
    old_reason = work.overdue_reason

    with transaction.atomic():
        Work.objects.filter(pk=work.pk).update(
            overdue_reason=reason or None,
            overdue_marked_at=now if reason else None,
            updated_at=now,
        )

        if reason:
            log_work_activity(
                work=work,
                user=user,
                action_type=WorkActivity.ActionType.OVERDUE_REASON_SET,
                description=f'Overdue reason recorded: "{Truncator(reason).chars(50)}"',
                old_value=old_reason,
                new_value=reason,
            )
        else:
            log_work_activity(
                work=work,
                user=user,
                action_type=WorkActivity.ActionType.OVERDUE_REASON_CLEARED,
                description='Overdue reason cleared',
                old_value=old_reason,
                new_value=None,
            )

    logger.info(
        'Overdue reason %s for work %s',
        'recorded' if reason else 'cleared', work.pk
    )
    work.refresh_from_db()
    return work


# =============================================================================
# Presentation helpers
# =============================================================================

def filter_overdue_items(items, kind='all', priority='', customer=''):
    """
    Apply the report filters to an aggregated list.

    Filters compose; an empty value (or kind 'all') disables that filter.
    Returns a new list, the input is left untouched.
    """
    filtered = []
    for item in items:
        if kind and kind != 'all' and item.kind != kind:
            continue
        if priority and item.priority != priority:
            continue
        if customer and item.customer_name != customer:
            continue
        filtered.append(item)
    return filtered


def summarize_overdue_items(items):
    """
    Counts for the report summary cards.

    `with_reasons` can only count works, since tasks carry no reason,
    while `total` includes tasks.
    """
    works = [item for item in items if item.kind == ItemKind.WORK]
    return {
        'total': len(items),
        'works': len(works),
        'tasks': len(items) - len(works),
        'with_reasons': sum(1 for item in works if item.overdue_reason),
    }


def get_customer_names(tenant):
    """Customer names of a tenant, for the customer filter drop-down."""
    return list(
        Customer.objects.filter(owner=tenant)
        .order_by('name')
        .values_list('name', flat=True)
        .distinct()
    )
