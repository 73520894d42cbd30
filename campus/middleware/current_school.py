# Middleware to resolve the school (tenant) a request is addressed to
import logging

from django.http.request import split_domain_port

from campus.models import School

logger = logging.getLogger(__name__)


class CurrentSchoolMiddleware:
    """
    Sets ``request.school`` from the request host by matching it against
    the Domain table. Unknown hosts get ``None``; tenant-scoped views treat
    that as not found.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.school = self.resolve_school(request)
        return self.get_response(request)

    @staticmethod
    def resolve_school(request):
        domain, _port = split_domain_port(request.get_host())
        if not domain:
            return None

        school = School.objects.filter(domains__fqdn=domain.lower()).first()
        if school is None:
            logger.debug(f"No school configured for host {domain}")
        return school
