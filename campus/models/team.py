from django.db import models
from django.db.models import Q
from django.utils import timezone

from campus.models import BaseModel, Cohort


class TeamQuerySet(models.QuerySet):
    def active(self):
        """Teams whose cohort has not ended."""
        return self.filter(Q(cohort__ends_at__gt=timezone.now()) | Q(cohort__ends_at__isnull=True))


class Team(BaseModel):
    cohort = models.ForeignKey(Cohort, on_delete=models.CASCADE, related_name="teams")
    name = models.CharField(max_length=255)

    objects = TeamQuerySet.as_manager()

    @property
    def course(self):
        return self.cohort.course

    @property
    def school(self):
        return self.cohort.course.school

    def __str__(self):
        return self.name
