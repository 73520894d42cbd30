import logging

from django.http import HttpResponseServerError
from django.shortcuts import render
from django.template import loader

logger = logging.getLogger(__name__)


def _school_name(request):
    school = getattr(request, "school", None)
    return school.name if school else "no school"


def handler403(request, exception=None):
    user_id = request.user.pk if request.user.is_authenticated else "anonymous"
    logger.warning(f"403 for user {user_id} on {request.path} ({_school_name(request)})")
    return render(request, "errors/403.html", status=403)


def handler404(request, exception=None):
    return render(request, "errors/404.html", status=404)


def handler500(request):
    # Rendered without the request: context processors query the database
    logger.error(f"500 on {request.path} ({_school_name(request)})")
    return HttpResponseServerError(loader.render_to_string("errors/500.html"))
