from django.db import models

from campus.models import BaseModel, Calendar, Cohort


class CalendarCohort(BaseModel):
    calendar = models.ForeignKey(Calendar, on_delete=models.CASCADE, related_name="calendar_cohorts")
    cohort = models.ForeignKey(Cohort, on_delete=models.CASCADE, related_name="calendar_cohorts")

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["calendar", "cohort"], name="unique_calendar_cohort"),
        ]
