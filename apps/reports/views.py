"""
Views for reports app.

Includes:
- Overdue report: merged list of overdue works and tasks with filters
- Overdue reason: record or clear why a work is running late
"""

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.shortcuts import get_object_or_404, redirect, render
from django.utils import timezone
from django.views.decorators.http import require_GET, require_http_methods

from apps.accounts.services import get_request_tenant
from apps.works.models import Work
from .forms import OverdueFilterForm, OverdueReasonForm
from .services import (
    ItemKind, compute_days_overdue, due_instant, get_customer_names,
    list_overdue_items, set_overdue_reason, summarize_overdue_items,
)

logger = logging.getLogger(__name__)


@login_required
@require_GET
def overdue_report(request):
    """
    Overdue works & tasks report.

    The full list is aggregated on every request; filters from the query
    string are applied afterwards. On a read failure the list and summary
    cards are replaced by an error state and a single error message is
    raised; HTMX requests render that message inside the partial.
    """
    tenant = get_request_tenant(request)

    load_failed = False
    try:
        items = list_overdue_items(tenant)
        customer_names = get_customer_names(tenant)
    except DatabaseError:
        logger.exception('Error fetching overdue items for tenant %s', tenant.pk)
        messages.error(request, 'Failed to load overdue items')
        load_failed = True
        items = []
        customer_names = []

    filter_form = OverdueFilterForm(request.GET or None, customer_names=customer_names)
    filtered_items = filter_form.filter_items(items)

    context = {
        'items': filtered_items,
        'stats': None if load_failed else summarize_overdue_items(items),
        'load_failed': load_failed,
        'filter_form': filter_form,
        'has_filters': filter_form.has_filters(),
    }

    # Handle HTMX partial requests
    if request.htmx:
        return render(request, 'reports/partials/overdue_items.html', context)

    return render(request, 'reports/overdue_report.html', context)


@login_required
@require_http_methods(["GET", "POST"])
def overdue_reason_edit(request, pk):
    """
    Record or clear the overdue reason of a work.

    Only active works past their due date take a reason; anything else is
    sent back to the report.
    """
    tenant = get_request_tenant(request)
    work = get_object_or_404(
        Work.objects.select_related('customer', 'service'),
        pk=pk,
        owner=tenant,
    )

    days_overdue = 0
    if work.due_date:
        days_overdue = compute_days_overdue(due_instant(work.due_date), timezone.now())

    if not work.is_active or days_overdue < 1:
        messages.info(request, 'This work is not overdue')
        return redirect('reports:overdue_report')

    if request.method == 'POST':
        form = OverdueReasonForm(request.POST)
        if form.is_valid():
            try:
                set_overdue_reason(
                    tenant,
                    work.pk,
                    ItemKind.WORK,
                    form.cleaned_data['reason'],
                    user=request.user,
                )
                messages.success(request, 'Overdue reason saved')
                return redirect('reports:overdue_report')
            except DatabaseError:
                logger.exception('Error saving overdue reason for work %s', work.pk)
                messages.error(request, 'Failed to save reason')
    else:
        form = OverdueReasonForm(initial={'reason': work.overdue_reason or ''})

    return render(request, 'reports/overdue_reason_form.html', {
        'work': work,
        'form': form,
        'days_overdue': days_overdue,
    })
