"""
Signal receivers for accounts app.
"""

from django.contrib.auth.signals import user_logged_in
from django.dispatch import receiver

from .services import resolve_staff_member, SESSION_STAFF_KEY


@receiver(user_logged_in)
def remember_staff_member(sender, request, user, **kwargs):
    """Resolve the staff identity once per session and keep its id."""
    if request is None or not hasattr(request, 'session'):
        return

    staff = resolve_staff_member(user)
    if staff and staff.is_active:
        request.session[SESSION_STAFF_KEY] = staff.pk
    else:
        request.session.pop(SESSION_STAFF_KEY, None)
