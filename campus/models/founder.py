from django.conf import settings
from django.db import models

from campus.models import BaseModel, Cohort, Team


class Founder(BaseModel):
    """A student enrolled in a cohort."""

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="founders")
    cohort = models.ForeignKey(Cohort, on_delete=models.CASCADE, related_name="founders")

    # A team cannot be deleted while it still has founders, unless they go with it
    team = models.ForeignKey(
        Team,
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name="founders",
    )

    @property
    def name(self):
        return self.user.name

    @property
    def email(self):
        return self.user.email

    @property
    def course(self):
        return self.cohort.course

    @property
    def school(self):
        return self.cohort.course.school

    def __str__(self):
        return f"{self.user} ({self.cohort})"
