"""
Base test classes for campus tests.

Every test request is served from the "testserver" host, which the fixture
school owns through its Domain row.
"""
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone

from campus.models import (
    Cohort,
    Course,
    Domain,
    Organisation,
    OrganisationAdmin,
    School,
    SchoolAdmin,
    Team,
)

User = get_user_model()


class CampusTestCase(TestCase):
    """
    Test case with one school served on the test client's host, a featured
    course with an active cohort and team, and a school admin.
    """

    @classmethod
    def setUpTestData(cls):
        cls.school = School.objects.create(name="Test School")
        Domain.objects.create(school=cls.school, fqdn="testserver", primary=True)

        cls.course = Course.objects.create(school=cls.school, name="Web Development", featured=True)
        cls.cohort = Cohort.objects.create(
            course=cls.course,
            name="Spring Cohort",
            ends_at=timezone.now() + timedelta(days=90),
        )
        cls.team = Team.objects.create(cohort=cls.cohort, name="Team Alpha")

        cls.organisation = Organisation.objects.create(school=cls.school, name="Acme Inc")

        cls.school_admin = cls.create_user("admin@test.org", school=cls.school)
        SchoolAdmin.objects.create(user=cls.school_admin, school=cls.school)

        cls.organisation_admin = cls.create_user("orgadmin@test.org", school=cls.school)
        OrganisationAdmin.objects.create(user=cls.organisation_admin, organisation=cls.organisation)

    @staticmethod
    def create_user(email, **extra):
        return User.objects.create_user(username=email, email=email, password="testpass123", **extra)

    @classmethod
    def create_other_school(cls, fqdn="other.test"):
        """A second tenant, for cross-school checks."""
        school = School.objects.create(name="Other School")
        Domain.objects.create(school=school, fqdn=fqdn, primary=True)
        course = Course.objects.create(school=school, name="Other Course")
        cohort = Cohort.objects.create(course=course, name="Other Cohort")
        return school, course, cohort
