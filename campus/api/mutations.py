import logging

import graphene
from django.contrib import messages
from django.db import transaction
from graphene.utils.str_converters import to_camel_case

from campus.api.errors import field_error, not_found_error, unauthorized_error
from campus.forms.calendar import CalendarForm
from campus.models import Calendar, CalendarCohort, Course
from campus.permissions import CalendarPermissions

logger = logging.getLogger(__name__)


class CreateCalendar(graphene.Mutation):
    """Create a new calendar"""

    class Arguments:
        course_id = graphene.ID(required=True)
        cohort_ids = graphene.List(graphene.NonNull(graphene.ID))
        name = graphene.String(required=True)

    success = graphene.Boolean(required=True)

    @classmethod
    def mutate(cls, root, info, course_id, name, cohort_ids=None):
        request = info.context
        school = getattr(request, "school", None)

        if not request.user.is_authenticated or not request.user.is_school_admin(school):
            raise unauthorized_error()

        course = cls.find_course(school, course_id)
        if not CalendarPermissions.can_create(request.user, course, school):
            raise unauthorized_error()

        form = CalendarForm(data={"name": name, "cohort_ids": cohort_ids or []}, course=course)
        if not form.is_valid():
            field, errors = next(iter(form.errors.items()))
            raise field_error(to_camel_case(field), errors[0])

        with transaction.atomic():
            calendar = Calendar.objects.create(course=course, name=form.cleaned_data["name"])
            CalendarCohort.objects.bulk_create(
                [CalendarCohort(calendar=calendar, cohort=cohort) for cohort in form.cleaned_data["cohort_ids"]]
            )

        logger.info(f"Calendar {calendar.pk} created for course {course.pk} by user {request.user.pk}")
        messages.success(request, "Done! Calendar created successfully")

        return CreateCalendar(success=True)

    @staticmethod
    def find_course(school, course_id):
        # int() only parses decimal digits, not superscripts
        if not str(course_id).isdecimal():
            raise not_found_error("course")

        course = Course.objects.filter(school=school, pk=int(course_id)).first()
        if course is None:
            raise not_found_error("course")
        return course
