import json
import logging

from django.http import Http404, HttpResponse, HttpResponseBadRequest
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from campus.models import Course, DbConfig, Faculty

logger = logging.getLogger(__name__)

CSP_REPORT_FIELDS = ('blocked-uri', 'violated-directive', 'source-file')


def index_page(request):
    """Landing page listing the school's featured courses."""
    courses = Course.objects.none()
    if request.school is not None:
        courses = Course.objects.filter(school=request.school, featured=True).order_by('name')

    return render(request, 'home/index.html', {'featured_courses': courses})


def faculty_page(request):
    if not DbConfig.feature_active('faculty_page', request.user):
        raise Http404("Faculty page is not enabled")

    faculty = Faculty.objects.none()
    if request.school is not None:
        faculty = Faculty.objects.filter(school=request.school).order_by('name')

    return render(request, 'home/faculty.html', {'faculty': faculty, 'skip_container': True})


def foundation_page(request):
    if not DbConfig.feature_active('foundation_page', request.user):
        raise Http404("Foundation page is not enabled")

    return render(request, 'home/foundation.html')


@csrf_exempt
@require_POST
def csp_report(request):
    """
    Receive Content-Security-Policy violation reports from browsers and log them.
    """
    try:
        report = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Received unparseable CSP report")
        return HttpResponseBadRequest()

    if not isinstance(report, dict):
        logger.warning("Received CSP report that is not a JSON object")
        return HttpResponseBadRequest()

    details = report.get('csp-report')
    if not isinstance(details, dict):
        details = {}

    summary = {'event': 'csp_report'}
    summary.update({field: details[field] for field in CSP_REPORT_FIELDS if field in details})

    logger.warning(json.dumps(summary))
    logger.debug(json.dumps({'event': 'full_csp_report', **report}))

    return HttpResponse()
