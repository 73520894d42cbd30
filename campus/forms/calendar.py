from django import forms

from campus.models import Cohort
from campus.models.calendar import NAME_MAX_LENGTH

NAME_LENGTH_ERROR = f"Name must be between 1 and {NAME_MAX_LENGTH} characters."


class CalendarForm(forms.Form):
    name = forms.CharField(
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        error_messages={
            'required': NAME_LENGTH_ERROR,
            'min_length': NAME_LENGTH_ERROR,
            'max_length': NAME_LENGTH_ERROR,
        },
    )
    cohort_ids = forms.ModelMultipleChoiceField(
        queryset=Cohort.objects.none(),
        required=False,
        error_messages={
            'invalid_choice': "Cohort %(value)s does not belong to this course.",
            'invalid_pk_value': "%(pk)s is not a valid cohort id.",
        },
    )

    def __init__(self, *args, course=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.course = course

        # Only the course's own cohorts can be linked to its calendars
        if course is not None:
            self.fields['cohort_ids'].queryset = course.cohorts.all()
