"""
Permission checking utilities for campus.
Centralizes authorization logic for students and school resources.
"""
import logging

from django.core.exceptions import PermissionDenied

logger = logging.getLogger(__name__)


class StudentPermissions:
    """Handles permission checks for student (founder) records."""

    @staticmethod
    def can_view(user, founder, school):
        """Check if user can view a student of the current school."""
        # Students of other schools are never visible
        if school is None or founder.school.pk != school.pk:
            return False

        # School admins can view every student of their school
        if user.is_school_admin(school):
            return True

        # Organisation admins can view students belonging to their organisations
        return user.administers_organisation(founder.user.organisation_id)

    can_view_submissions = can_view


class CalendarPermissions:
    """Handles permission checks for course calendars."""

    @staticmethod
    def can_create(user, course, school):
        """Only admins of the course's school can create calendars."""
        if not user.is_authenticated or school is None:
            return False

        if course.school_id != school.pk:
            return False

        return user.is_school_admin(school)


def authorize(request, allowed, resource_type, resource_id):
    """
    Raise PermissionDenied unless ``allowed``; the 403 handler renders the
    standard error page.
    """
    if allowed:
        return

    logger.warning(
        f"Access denied: User {request.user.pk} attempted to access {resource_type} {resource_id} "
        f"from IP {request.META.get('REMOTE_ADDR', 'unknown')}"
    )
    raise PermissionDenied(f"You don't have permission to access this {resource_type}.")
