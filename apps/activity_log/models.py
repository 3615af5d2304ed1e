"""
Activity log model for work audit trails.

Logs changes to works made from the back office, currently:
- Overdue reason recorded or updated
- Overdue reason cleared
"""

from django.db import models
from django.conf import settings


class WorkActivity(models.Model):
    """Audit log entry for a work."""

    class ActionType(models.TextChoices):
        OVERDUE_REASON_SET = 'overdue_reason_set', 'Overdue Reason Set'
        OVERDUE_REASON_CLEARED = 'overdue_reason_cleared', 'Overdue Reason Cleared'

    work = models.ForeignKey(
        'works.Work',
        on_delete=models.CASCADE,
        related_name='activities',
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='work_activities',
        help_text='User who performed the action'
    )
    action_type = models.CharField(
        max_length=30,
        choices=ActionType.choices,
        db_index=True,
    )
    description = models.TextField(
        help_text='Human-readable description of the change'
    )
    old_value = models.TextField(null=True, blank=True)
    new_value = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        verbose_name = 'work activity'
        verbose_name_plural = 'work activities'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['work', '-created_at'], name='activity_work_created_idx'),
        ]

    def __str__(self):
        return f"{self.work.title} - {self.get_action_type_display()}"


def log_work_activity(work, user, action_type, description,
                      old_value=None, new_value=None):
    """
    Helper function to create activity log entries.

    Args:
        work: Work instance
        user: User who performed the action (may be None)
        action_type: One of WorkActivity.ActionType choices
        description: Human-readable description
        old_value: Optional previous value
        new_value: Optional new value

    Returns:
        Created WorkActivity instance
    """
    if user is not None and not getattr(user, 'is_authenticated', False):
        user = None

    return WorkActivity.objects.create(
        work=work,
        user=user,
        action_type=action_type,
        description=description,
        old_value=old_value,
        new_value=new_value,
    )
