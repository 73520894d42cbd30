from django.db import models

from campus.models import BaseModel, Cohort, Faculty


class FacultyCohortEnrollment(BaseModel):
    faculty = models.ForeignKey(Faculty, on_delete=models.CASCADE, related_name="enrollments")
    cohort = models.ForeignKey(Cohort, on_delete=models.CASCADE, related_name="faculty_enrollments")

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["faculty", "cohort"], name="unique_faculty_cohort_enrollment"),
        ]
