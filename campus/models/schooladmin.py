from django.conf import settings
from django.db import models

from campus.models import BaseModel, School


class SchoolAdmin(BaseModel):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="school_admins")
    school = models.ForeignKey(School, on_delete=models.CASCADE, related_name="school_admins")

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "school"], name="unique_school_admin"),
        ]

    def __str__(self):
        return f"{self.user} ({self.school})"
