import json

from django.contrib.messages import get_messages
from django.test import Client

from campus.models import Calendar, CalendarCohort, Cohort
from campus.tests.base import CampusTestCase

CREATE_CALENDAR = """
mutation CreateCalendar($courseId: ID!, $cohortIds: [ID!], $name: String!) {
  createCalendar(courseId: $courseId, cohortIds: $cohortIds, name: $name) {
    success
  }
}
"""

COURSES = """
query { courses { id name cohorts { name } } }
"""


class GraphQLTestCase(CampusTestCase):
    def setUp(self):
        self.client = Client()

    def execute(self, query, variables=None):
        response = self.client.post(
            "/graphql",
            data=json.dumps({"query": query, "variables": variables or {}}),
            content_type="application/json",
        )
        return response, response.json()

    def create_calendar(self, **variables):
        payload = {"courseId": str(self.course.id), "cohortIds": [str(self.cohort.id)], "name": "Main Calendar"}
        payload.update(variables)
        return self.execute(CREATE_CALENDAR, payload)

    def assert_error(self, body, code, field=None):
        self.assertEqual(len(body["errors"]), 1)
        extensions = body["errors"][0]["extensions"]
        self.assertEqual(extensions["code"], code)
        if field is not None:
            self.assertEqual(extensions["field"], field)


class CreateCalendarMutationTest(GraphQLTestCase):
    def test_school_admin_creates_calendar(self):
        self.client.force_login(self.school_admin)

        response, body = self.create_calendar()

        self.assertEqual(response.status_code, 200)
        self.assertNotIn("errors", body)
        self.assertEqual(body["data"]["createCalendar"], {"success": True})

        calendar = Calendar.objects.get()
        self.assertEqual(calendar.name, "Main Calendar")
        self.assertEqual(calendar.course, self.course)
        self.assertEqual(list(calendar.cohorts.all()), [self.cohort])

        messages = [str(m) for m in get_messages(response.wsgi_request)]
        self.assertIn("Done! Calendar created successfully", messages)

    def test_without_cohorts(self):
        self.client.force_login(self.school_admin)

        _response, body = self.create_calendar(cohortIds=None)

        self.assertEqual(body["data"]["createCalendar"], {"success": True})
        self.assertEqual(CalendarCohort.objects.count(), 0)

    def test_anonymous_user_is_unauthorized(self):
        _response, body = self.create_calendar()

        self.assert_error(body, "unauthorized")
        self.assertFalse(Calendar.objects.exists())

    def test_non_admin_is_unauthorized(self):
        self.client.force_login(self.organisation_admin)

        _response, body = self.create_calendar()

        self.assert_error(body, "unauthorized")
        self.assertFalse(Calendar.objects.exists())

    def test_name_too_long(self):
        self.client.force_login(self.school_admin)

        _response, body = self.create_calendar(name="x" * 51)

        self.assert_error(body, "invalid", field="name")
        self.assertEqual(body["errors"][0]["message"], "Name must be between 1 and 50 characters.")
        self.assertFalse(Calendar.objects.exists())

    def test_blank_name(self):
        self.client.force_login(self.school_admin)

        _response, body = self.create_calendar(name="")

        self.assert_error(body, "invalid", field="name")

    def test_fifty_character_name_is_accepted(self):
        self.client.force_login(self.school_admin)

        _response, body = self.create_calendar(name="x" * 50)

        self.assertEqual(body["data"]["createCalendar"], {"success": True})

    def test_unknown_course(self):
        self.client.force_login(self.school_admin)

        _response, body = self.create_calendar(courseId="999999")
        self.assert_error(body, "not_found")

        _response, body = self.create_calendar(courseId="abc")
        self.assert_error(body, "not_found")

    def test_non_decimal_digit_course_id(self):
        self.client.force_login(self.school_admin)

        _response, body = self.create_calendar(courseId="²")

        self.assert_error(body, "not_found")
        self.assertFalse(Calendar.objects.exists())

    def test_course_of_another_school_is_not_found(self):
        _school, other_course, _cohort = self.create_other_school()
        self.client.force_login(self.school_admin)

        _response, body = self.create_calendar(courseId=str(other_course.id))

        self.assert_error(body, "not_found")

    def test_cohort_of_another_course(self):
        _school, _course, other_cohort = self.create_other_school()
        self.client.force_login(self.school_admin)

        _response, body = self.create_calendar(cohortIds=[str(other_cohort.id)])

        self.assert_error(body, "invalid", field="cohortIds")
        self.assertFalse(Calendar.objects.exists())


class CoursesQueryTest(GraphQLTestCase):
    def test_school_admin_lists_courses(self):
        Cohort.objects.create(course=self.course, name="Autumn Cohort")
        self.client.force_login(self.school_admin)

        _response, body = self.execute(COURSES)

        courses = body["data"]["courses"]
        self.assertEqual([course["name"] for course in courses], ["Web Development"])
        self.assertEqual(
            sorted(cohort["name"] for cohort in courses[0]["cohorts"]),
            ["Autumn Cohort", "Spring Cohort"],
        )

    def test_anonymous_user_is_unauthorized(self):
        _response, body = self.execute(COURSES)
        self.assert_error(body, "unauthorized")
