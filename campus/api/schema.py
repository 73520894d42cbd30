import graphene

from campus.api.errors import unauthorized_error
from campus.api.mutations import CreateCalendar
from campus.api.types import CourseType
from campus.models import Course


class Query(graphene.ObjectType):
    courses = graphene.List(graphene.NonNull(CourseType), required=True)

    def resolve_courses(root, info):
        request = info.context
        school = getattr(request, "school", None)
        if not request.user.is_authenticated or not request.user.is_school_admin(school):
            raise unauthorized_error()
        return Course.objects.filter(school=school).order_by("name")


class Mutation(graphene.ObjectType):
    create_calendar = CreateCalendar.Field()


schema = graphene.Schema(query=Query, mutation=Mutation)
