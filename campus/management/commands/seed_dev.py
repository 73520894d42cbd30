from datetime import timedelta

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.utils import timezone

from campus.models import (
    Cohort,
    Course,
    DbConfig,
    Domain,
    Faculty,
    FacultyCohortEnrollment,
    School,
    SchoolAdmin,
    Team,
)


class Command(BaseCommand):
    help = "Seed a demo school with a course, cohort, team and faculty for local development"

    def add_arguments(self, parser):
        parser.add_argument("--domain", default="localhost", help="Host the demo school is served on")
        parser.add_argument("--admin-email", default="admin@example.com")

    def handle(self, *args, **options):
        User = get_user_model()

        school, _ = School.objects.get_or_create(name="Demo School")
        Domain.objects.get_or_create(fqdn=options["domain"], defaults={"school": school, "primary": True})

        admin, created = User.objects.get_or_create(
            username=options["admin_email"],
            defaults={"email": options["admin_email"], "school": school, "is_staff": True},
        )
        if created:
            admin.set_unusable_password()
            admin.save()
        SchoolAdmin.objects.get_or_create(user=admin, school=school)

        course, _ = Course.objects.get_or_create(
            school=school,
            name="Web Development",
            defaults={"featured": True, "description": "Build and ship web applications."},
        )
        cohort, _ = Cohort.objects.get_or_create(
            course=course,
            name="Spring Cohort",
            defaults={"ends_at": timezone.now() + timedelta(days=180)},
        )
        Team.objects.get_or_create(cohort=cohort, name="Team Alpha")

        faculty, _ = Faculty.objects.get_or_create(
            school=school,
            email="coach@example.com",
            defaults={
                "name": "Demo Coach",
                "title": "Coach",
                "current_commitment": "20 mins per week for the first 6 months this year",
            },
        )
        FacultyCohortEnrollment.objects.get_or_create(faculty=faculty, cohort=cohort)

        DbConfig.objects.get_or_create(key="feature_faculty_page", defaults={"value": {"active": True}})

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded '{school.name}' on {options['domain']}. "
                f"Faculty slots page: /faculty/weekly_slots/{faculty.token}"
            )
        )
