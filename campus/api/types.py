from graphene_django import DjangoObjectType

from campus.models import Calendar, Cohort, Course


class CohortType(DjangoObjectType):
    class Meta:
        model = Cohort
        fields = ("id", "name", "description", "ends_at")


class CalendarType(DjangoObjectType):
    class Meta:
        model = Calendar
        fields = ("id", "name", "cohorts")


class CourseType(DjangoObjectType):
    class Meta:
        model = Course
        fields = ("id", "name", "description", "featured", "cohorts", "calendars")
