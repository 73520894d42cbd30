from django.http import HttpResponse
from django.test import RequestFactory, override_settings

from campus.middleware.current_school import CurrentSchoolMiddleware
from campus.tests.base import CampusTestCase


@override_settings(ALLOWED_HOSTS=["testserver", "other.test", "unknown.test"])
class CurrentSchoolMiddlewareTest(CampusTestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.middleware = CurrentSchoolMiddleware(lambda request: HttpResponse())

    def resolve(self, host):
        request = self.factory.get("/", HTTP_HOST=host)
        self.middleware(request)
        return request.school

    def test_resolves_school_from_host(self):
        self.assertEqual(self.resolve("testserver"), self.school)

    def test_ignores_port_and_case(self):
        self.assertEqual(self.resolve("TestServer:8000"), self.school)

    def test_each_host_gets_its_own_school(self):
        other_school, _course, _cohort = self.create_other_school("other.test")
        self.assertEqual(self.resolve("other.test"), other_school)

    def test_unknown_host(self):
        self.assertIsNone(self.resolve("unknown.test"))

    def test_unknown_host_shows_no_school_content(self):
        response = self.client.get("/", HTTP_HOST="unknown.test")

        self.assertEqual(response.status_code, 200)
        self.assertNotContains(response, "Test School")
        self.assertContains(response, "There are no featured courses right now.")
