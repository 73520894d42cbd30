from io import StringIO

from django.core.management import call_command
from django.test import Client

from campus.models import Cohort, DbConfig, Domain, Faculty, SchoolAdmin
from campus.tests.base import CampusTestCase


class AdminSiteTest(CampusTestCase):
    def setUp(self):
        self.superuser = self.create_user("root@test.org", is_staff=True, is_superuser=True)
        self.client = Client()
        self.client.force_login(self.superuser)

    def test_changelists_render(self):
        for model in ("school", "user", "course", "cohort", "team", "founder", "faculty", "connectslot", "dbconfig"):
            with self.subTest(model=model):
                response = self.client.get(f"/admin/campus/{model}/")
                self.assertEqual(response.status_code, 200)

    def test_admin_requires_staff(self):
        self.client.force_login(self.create_user("plain@test.org"))
        response = self.client.get("/admin/campus/school/")
        self.assertEqual(response.status_code, 302)


class SeedDevCommandTest(CampusTestCase):
    def test_seeds_demo_school_once(self):
        out = StringIO()
        call_command("seed_dev", "--domain", "demo.test", stdout=out)
        call_command("seed_dev", "--domain", "demo.test", stdout=StringIO())

        school = Domain.objects.get(fqdn="demo.test").school
        self.assertEqual(school.name, "Demo School")
        self.assertEqual(SchoolAdmin.objects.filter(school=school).count(), 1)
        self.assertEqual(Cohort.objects.filter(course__school=school).count(), 1)
        self.assertTrue(DbConfig.feature_active("faculty_page"))

        faculty = Faculty.objects.get(school=school)
        self.assertIn(f"/faculty/weekly_slots/{faculty.token}", out.getvalue())
