"""
Service layer for accounts app.

- resolve_staff_member: find the staff row for a login, linking it by email
  the first time
- get_request_tenant: the business owner whose data a request works on
"""

import logging

from .models import StaffMember

logger = logging.getLogger(__name__)

SESSION_STAFF_KEY = 'staff_member_id'


def resolve_staff_member(user):
    """
    Resolve the staff member for a logged-in user, linking by email if needed.

    Lookup order:
    1. Staff row already linked to the user
    2. Unlinked staff row whose email matches the user's email; the row is
       linked to the user so the next call takes path 1

    Safe to call repeatedly.

    Args:
        user: Authenticated User instance

    Returns:
        StaffMember instance, or None if the user is not a staff member
    """
    if user is None or not user.is_authenticated:
        return None

    staff = StaffMember.objects.select_related('owner').filter(user=user).first()
    if staff:
        return staff

    if not user.email:
        return None

    staff = (
        StaffMember.objects.select_related('owner')
        .filter(email__iexact=user.email, user__isnull=True)
        .order_by('created_at')
        .first()
    )
    if staff is None:
        return None

    staff.user = user
    staff.save(update_fields=['user', 'updated_at'])
    logger.info('Linked staff member %s to login %s', staff.pk, user.email)
    return staff


def get_request_tenant(request):
    """
    Return the business owner whose records the request operates on.

    Staff members work on their employer's records; owners on their own.
    The staff id is put in the session at login (see accounts.signals).
    """
    user = request.user
    staff_id = request.session.get(SESSION_STAFF_KEY)
    if staff_id:
        staff = StaffMember.objects.select_related('owner').filter(
            pk=staff_id,
            user=user,
            is_active=True,
        ).first()
        if staff:
            return staff.owner
    return user
