"""
Work management models.

Models:
- Work: a job done for a customer, optionally recurring
- RecurringPeriod: one cycle (month, quarter, ...) of a recurring work
- RecurringPeriodTask: a task scoped to one recurring period
- WorkTask: a task attached directly to a non-recurring work

Status workflow for works and tasks:
    pending → in_progress → completed
Works can additionally be put on hold or cancelled. Only pending and
in_progress items count as active for overdue tracking.
"""

from django.conf import settings
from django.db import models


class Priority(models.TextChoices):
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'
    URGENT = 'urgent', 'Urgent'


class TaskStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    IN_PROGRESS = 'in_progress', 'In Progress'
    COMPLETED = 'completed', 'Completed'


# Statuses whose items can be overdue
ACTIVE_STATUSES = [TaskStatus.PENDING, TaskStatus.IN_PROGRESS]


class Work(models.Model):
    """
    A unit of work performed for a customer.

    `overdue_reason` and `overdue_marked_at` are written together by
    reports.services.set_overdue_reason: both set or both empty.
    """

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        IN_PROGRESS = 'in_progress', 'In Progress'
        COMPLETED = 'completed', 'Completed'
        ON_HOLD = 'on_hold', 'On Hold'
        CANCELLED = 'cancelled', 'Cancelled'

    class RecurrencePattern(models.TextChoices):
        MONTHLY = 'monthly', 'Monthly'
        QUARTERLY = 'quarterly', 'Quarterly'
        HALF_YEARLY = 'half_yearly', 'Half Yearly'
        YEARLY = 'yearly', 'Yearly'

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='works',
    )
    customer = models.ForeignKey(
        'customers.Customer',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='works',
    )
    service = models.ForeignKey(
        'catalog.Service',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='works',
    )
    assigned_to = models.ForeignKey(
        'accounts.StaffMember',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_works',
    )

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    status = models.CharField(
        max_length=15,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )
    priority = models.CharField(
        max_length=10,
        choices=Priority.choices,
        default=Priority.MEDIUM,
        db_index=True,
    )
    due_date = models.DateField(null=True, blank=True, db_index=True)

    # Recurrence
    is_recurring = models.BooleanField(default=False)
    recurrence_pattern = models.CharField(
        max_length=15,
        choices=RecurrencePattern.choices,
        blank=True,
    )

    # Overdue tracking
    overdue_reason = models.TextField(
        null=True,
        blank=True,
        help_text='Why the work is running late'
    )
    overdue_marked_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text='When the overdue reason was recorded'
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'work'
        verbose_name_plural = 'works'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['owner', 'status'], name='work_owner_status_idx'),
            models.Index(fields=['due_date', 'status'], name='work_due_status_idx'),
        ]

    def __str__(self):
        return self.title

    @property
    def is_active(self):
        return self.status in ACTIVE_STATUSES


class RecurringPeriod(models.Model):
    """One cycle of a recurring work, e.g. "October 2025" or "Q3 FY 2025-26"."""

    work = models.ForeignKey(
        Work,
        on_delete=models.CASCADE,
        related_name='periods',
    )
    period_name = models.CharField(max_length=100)
    period_start_date = models.DateField()
    period_end_date = models.DateField()
    status = models.CharField(
        max_length=15,
        choices=TaskStatus.choices,
        default=TaskStatus.PENDING,
        db_index=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'recurring period'
        verbose_name_plural = 'recurring periods'
        ordering = ['-period_start_date']

    def __str__(self):
        return f"{self.work.title} - {self.period_name}"


class AbstractWorkItemTask(models.Model):
    """Fields shared by period tasks and ad-hoc work tasks."""

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    status = models.CharField(
        max_length=15,
        choices=TaskStatus.choices,
        default=TaskStatus.PENDING,
        db_index=True,
    )
    priority = models.CharField(
        max_length=10,
        choices=Priority.choices,
        default=Priority.MEDIUM,
    )
    due_date = models.DateField(null=True, blank=True, db_index=True)
    sort_order = models.PositiveIntegerField(default=0)
    completed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['sort_order', 'due_date']

    def __str__(self):
        return self.title


class RecurringPeriodTask(AbstractWorkItemTask):
    """Task belonging to one recurring period."""

    period = models.ForeignKey(
        RecurringPeriod,
        on_delete=models.CASCADE,
        related_name='tasks',
    )
    assigned_to = models.ForeignKey(
        'accounts.StaffMember',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_period_tasks',
    )

    class Meta(AbstractWorkItemTask.Meta):
        verbose_name = 'recurring period task'
        verbose_name_plural = 'recurring period tasks'


class WorkTask(AbstractWorkItemTask):
    """Task attached directly to a work."""

    work = models.ForeignKey(
        Work,
        on_delete=models.CASCADE,
        related_name='tasks',
    )
    assigned_to = models.ForeignKey(
        'accounts.StaffMember',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_work_tasks',
    )

    class Meta(AbstractWorkItemTask.Meta):
        verbose_name = 'work task'
        verbose_name_plural = 'work tasks'
