"""
Public health check used by the container orchestrator and the load balancer.
"""
import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """
    Report database connectivity and whether the host maps to a school.

    Always public; returns 503 when the database cannot be queried.
    """
    school = getattr(request, "school", None)
    payload = {"school": school.name if school else None}

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError:
        logger.exception("Health check failed to reach the database")
        payload.update(status="unhealthy", database="unreachable")
        return JsonResponse(payload, status=503)

    payload.update(status="healthy", database="connected")
    return JsonResponse(payload)
