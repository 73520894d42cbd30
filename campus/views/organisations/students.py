"""
Student pages for organisation and school admins.
"""
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, render

from campus.models import Founder
from campus.permissions import StudentPermissions, authorize


class StudentPresenter:
    """View-facing summary of a student."""

    def __init__(self, student):
        self.student = student

    @property
    def name(self):
        return self.student.name

    @property
    def email(self):
        return self.student.email

    @property
    def course_name(self):
        return self.student.course.name

    @property
    def cohort_name(self):
        return self.student.cohort.name

    @property
    def team_name(self):
        return self.student.team.name if self.student.team_id else None

    @property
    def organisation_name(self):
        organisation = self.student.user.organisation
        return organisation.name if organisation else None

    @property
    def cohort_status(self):
        return "Ended" if self.student.cohort.ended else "Active"


def find_student(request, student_id, permission):
    student = get_object_or_404(
        Founder.objects.select_related('user__organisation', 'cohort__course__school', 'team'),
        pk=student_id,
    )
    authorize(request, permission(request.user, student, request.school), 'student', student_id)
    return student


@login_required
def student_show(request, student_id):
    student = find_student(request, student_id, StudentPermissions.can_view)
    return render(request, 'organisations/students/show.html', {
        'student': student,
        'presenter': StudentPresenter(student),
    })


@login_required
def student_submissions(request, student_id):
    student = find_student(request, student_id, StudentPermissions.can_view_submissions)
    return render(request, 'organisations/students/submissions.html', {
        'student': student,
        'presenter': StudentPresenter(student),
    })
