import json

from django.test import Client
from django.urls import reverse

from campus.models import Course, DbConfig, Faculty
from campus.tests.base import CampusTestCase


class IndexPageTest(CampusTestCase):
    def test_lists_featured_courses_of_current_school(self):
        Course.objects.create(school=self.school, name="Hidden Course", featured=False)
        _school, other_course, _cohort = self.create_other_school()
        other_course.featured = True
        other_course.save()

        response = self.client.get(reverse('index'))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Welcome to Test School")
        self.assertContains(response, "Web Development")
        self.assertNotContains(response, "Hidden Course")
        self.assertNotContains(response, "Other Course")

    def test_no_featured_courses(self):
        Course.objects.update(featured=False)
        response = self.client.get(reverse('index'))
        self.assertContains(response, "There are no featured courses right now.")


class FeaturePagesTest(CampusTestCase):
    def setUp(self):
        self.client = Client()
        self.staff = self.create_user("staff@test.org", school=self.school, is_staff=True)
        Faculty.objects.create(school=self.school, name="Dr. Jane Coach", title="Mentor", email="jane@test.org")

    def test_faculty_page_hidden_when_flag_off(self):
        response = self.client.get(reverse('faculty'))
        self.assertEqual(response.status_code, 404)

    def test_faculty_page_visible_when_flag_on(self):
        DbConfig.objects.create(key="feature_faculty_page", value={"active": True})

        response = self.client.get(reverse('faculty'))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Dr. Jane Coach")
        self.assertContains(response, "Mentor")

    def test_navigation_links_follow_flags(self):
        response = self.client.get(reverse('index'))
        self.assertNotContains(response, 'href="/faculty"')

        DbConfig.objects.create(key="feature_faculty_page", value={"active": True})
        response = self.client.get(reverse('index'))
        self.assertContains(response, 'href="/faculty"')
        self.assertNotContains(response, 'href="/foundation"')

    def test_foundation_page_for_admins_only(self):
        DbConfig.objects.create(key="feature_foundation_page", value={"admin": True})

        self.assertEqual(self.client.get(reverse('foundation')).status_code, 404)

        self.client.force_login(self.staff)
        response = self.client.get(reverse('foundation'))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Foundation")


class CspReportTest(CampusTestCase):
    def setUp(self):
        self.client = Client(enforce_csrf_checks=True)
        self.url = reverse('csp_report')

    def post(self, body):
        return self.client.post(self.url, data=body, content_type="application/csp-report")

    def test_logs_selected_fields(self):
        report = {
            "csp-report": {
                "blocked-uri": "https://evil.example/x.js",
                "violated-directive": "script-src",
                "source-file": "https://testserver/",
                "original-policy": "default-src 'self'",
            }
        }

        with self.assertLogs("campus.views.home", level="DEBUG") as logs:
            response = self.post(json.dumps(report))

        self.assertEqual(response.status_code, 200)

        summary = json.loads(logs.records[0].getMessage())
        self.assertEqual(logs.records[0].levelname, "WARNING")
        self.assertEqual(summary, {
            "event": "csp_report",
            "blocked-uri": "https://evil.example/x.js",
            "violated-directive": "script-src",
            "source-file": "https://testserver/",
        })

        full = json.loads(logs.records[1].getMessage())
        self.assertEqual(logs.records[1].levelname, "DEBUG")
        self.assertEqual(full["csp-report"]["original-policy"], "default-src 'self'")

    def test_report_without_details(self):
        with self.assertLogs("campus.views.home", level="WARNING") as logs:
            response = self.post(json.dumps({}))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(logs.records[0].getMessage()), {"event": "csp_report"})

    def test_malformed_body(self):
        with self.assertLogs("campus.views.home", level="WARNING"):
            response = self.post("not json")
        self.assertEqual(response.status_code, 400)

    def test_non_object_body(self):
        with self.assertLogs("campus.views.home", level="WARNING"):
            response = self.post(json.dumps(["csp-report"]))
        self.assertEqual(response.status_code, 400)

    def test_get_not_allowed(self):
        self.assertEqual(self.client.get(self.url).status_code, 405)


class HealthCheckTest(CampusTestCase):
    def test_healthy(self):
        response = self.client.get(reverse('health_check'))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"school": "Test School", "status": "healthy", "database": "connected"})
