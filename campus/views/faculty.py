"""
Weekly availability page for faculty, addressed by the faculty's token.
"""
import logging

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_http_methods

from campus.forms.weekly_slots import WeeklySlotsForm
from campus.models import Faculty
from campus.services.weekly_slots_service import (
    DAY_NAMES,
    SLOT_TIMES,
    WeeklySlotsService,
    slot_key,
    slot_label,
)

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "We have successfully recorded your availability for the upcoming week"


def build_days(selected_keys):
    days = []
    for number, name in enumerate(DAY_NAMES, start=1):
        slots = []
        for time in SLOT_TIMES:
            key = slot_key(number, time)
            slots.append({
                'key': key,
                'day': number,
                'time': f"{time:.1f}",
                'label': slot_label(time),
                'selected': key in selected_keys,
            })
        days.append({
            'number': number,
            'name': name,
            'active': number == 1,
            'slots': slots,
        })
    return days


@require_http_methods(["GET", "POST"])
def weekly_slots(request, token):
    """
    Show and update the faculty member's availability for next week.
    Faculty without an email address cannot use this page.
    """
    faculty = get_object_or_404(Faculty.objects.with_email(), token=token)
    service = WeeklySlotsService(faculty)
    status = 200

    if request.method == "POST":
        form = WeeklySlotsForm(request.POST)
        if form.is_valid():
            service.update(form.selected_slots())
            messages.success(request, SAVED_MESSAGE)
            return redirect('faculty_weekly_slots', token=token)

        logger.warning(f"Invalid weekly slots submitted for faculty {faculty.pk}: {form.errors.as_json()}")
        selected_keys = set(request.POST.getlist('slots'))
        status = 400
    else:
        form = WeeklySlotsForm()
        selected_keys = service.selected_keys()

    context = {
        'faculty': faculty,
        'form': form,
        'week_start': service.week_start,
        'days': build_days(selected_keys),
        'selected_count': len(selected_keys),
    }
    return render(request, 'faculty/weekly_slots.html', context, status=status)
