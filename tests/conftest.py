"""
Shared pytest fixtures.

`now` is pinned to local midnight so that a due date N calendar days back
is exactly N days overdue.
"""

from datetime import datetime, timedelta

import pytest
from django.utils import timezone

from apps.accounts.models import StaffMember, User
from apps.catalog.models import Service
from apps.customers.models import Customer
from apps.works.models import RecurringPeriod, RecurringPeriodTask, Work, WorkTask


@pytest.fixture
def now():
    return timezone.make_aware(datetime(2025, 3, 15, 0, 0))


@pytest.fixture
def today(now):
    return timezone.localdate(now)


@pytest.fixture
def owner(db):
    return User.objects.create_user(
        email='owner@example.com',
        password='testpass123',
        first_name='Asha',
        last_name='Mehta',
    )


@pytest.fixture
def other_owner(db):
    return User.objects.create_user(
        email='other@example.com',
        password='testpass123',
        first_name='Ravi',
        last_name='Shah',
    )


@pytest.fixture
def customer(owner):
    return Customer.objects.create(owner=owner, name='Acme Traders')


@pytest.fixture
def service(owner):
    return Service.objects.create(owner=owner, name='GST Filing')


@pytest.fixture
def staff(owner):
    return StaffMember.objects.create(
        owner=owner,
        name='Priya Nair',
        email='priya@example.com',
    )


@pytest.fixture
def make_work(owner, customer, service, today):
    """Create a work due `days_ago` days before today (negative = future)."""

    def _make(title='Work', days_ago=1, **kwargs):
        kwargs.setdefault('owner', owner)
        kwargs.setdefault('customer', customer)
        kwargs.setdefault('service', service)
        if 'due_date' not in kwargs:
            kwargs['due_date'] = today - timedelta(days=days_ago)
        return Work.objects.create(title=title, **kwargs)

    return _make


@pytest.fixture
def make_period(today):
    def _make(work, name='March 2025', status='pending'):
        return RecurringPeriod.objects.create(
            work=work,
            period_name=name,
            period_start_date=today.replace(day=1),
            period_end_date=today.replace(day=28),
            status=status,
        )

    return _make


@pytest.fixture
def make_period_task(today):
    def _make(period, title='Task', days_ago=1, **kwargs):
        if 'due_date' not in kwargs:
            kwargs['due_date'] = today - timedelta(days=days_ago)
        return RecurringPeriodTask.objects.create(period=period, title=title, **kwargs)

    return _make


@pytest.fixture
def make_work_task(today):
    def _make(work, title='Task', days_ago=1, **kwargs):
        if 'due_date' not in kwargs:
            kwargs['due_date'] = today - timedelta(days=days_ago)
        return WorkTask.objects.create(work=work, title=title, **kwargs)

    return _make
