from django.db import models
from django.db.models import Q
from django.utils import timezone

from campus.models import BaseModel, Course


class CohortQuerySet(models.QuerySet):
    def active(self):
        """Cohorts that have not ended yet, including open-ended ones."""
        return self.filter(Q(ends_at__gt=timezone.now()) | Q(ends_at__isnull=True))


class Cohort(BaseModel):
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="cohorts")
    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    ends_at = models.DateTimeField(null=True, blank=True)

    faculty = models.ManyToManyField(
        "Faculty",
        through="FacultyCohortEnrollment",
        related_name="cohorts",
        blank=True,
    )
    calendars = models.ManyToManyField(
        "Calendar",
        through="CalendarCohort",
        related_name="cohorts",
        blank=True,
    )

    objects = CohortQuerySet.as_manager()

    @property
    def school(self):
        return self.course.school

    @property
    def ended(self):
        return self.ends_at is not None and self.ends_at < timezone.now()

    def save(self, *args, **kwargs):
        # Blank descriptions are stored as NULL
        if self.description is not None:
            self.description = self.description.strip() or None
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
