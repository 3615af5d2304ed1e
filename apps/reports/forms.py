"""
Forms for reports app.

Includes:
- OverdueFilterForm: Kind/priority/customer filters for the overdue report
- OverdueReasonForm: Record or clear the overdue reason of a work
"""

from django import forms

from apps.works.models import Priority
from .services import ItemKind, filter_overdue_items

INPUT_CLASS = (
    'block w-full rounded-md border-gray-300 shadow-sm '
    'focus:border-indigo-500 focus:ring-indigo-500 sm:text-sm'
)


class OverdueFilterForm(forms.Form):
    """
    Filters for the overdue report.

    Bound to request.GET so filter state lives in the query string. Every
    field is optional; an empty value disables that filter.
    """

    kind = forms.ChoiceField(
        choices=[('all', 'All Types'), *ItemKind.choices],
        required=False,
        widget=forms.Select(attrs={'class': INPUT_CLASS}),
    )
    priority = forms.ChoiceField(
        choices=[('', 'All Priorities'), *Priority.choices],
        required=False,
        widget=forms.Select(attrs={'class': INPUT_CLASS}),
    )
    customer = forms.ChoiceField(
        choices=[('', 'All Customers')],
        required=False,
        widget=forms.Select(attrs={'class': INPUT_CLASS}),
    )

    def __init__(self, *args, customer_names=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['customer'].choices = [('', 'All Customers')] + [
            (name, name) for name in customer_names
        ]

    def get_filters(self):
        """
        Return cleaned filter values.

        Each filter stands on its own: a field that fails validation (e.g. a
        customer that no longer exists) is disabled, the others still apply.
        """
        cleaned = {}
        if self.is_bound:
            self.is_valid()
            cleaned = self.cleaned_data
        return {
            'kind': cleaned.get('kind') or 'all',
            'priority': cleaned.get('priority') or '',
            'customer': cleaned.get('customer') or '',
        }

    def has_filters(self):
        filters = self.get_filters()
        return filters['kind'] != 'all' or bool(filters['priority'] or filters['customer'])

    def filter_items(self, items):
        return filter_overdue_items(items, **self.get_filters())


class OverdueReasonForm(forms.Form):
    """
    Reason a work is running late.

    Submitting an empty (or whitespace-only) reason clears it.
    """

    reason = forms.CharField(
        required=False,
        strip=True,
        widget=forms.Textarea(attrs={
            'class': INPUT_CLASS,
            'rows': 4,
            'placeholder': 'Enter the reason for delay...',
        }),
        help_text='Leave empty to clear the reason',
    )
