from django.conf import settings
from django.db import models

from campus.models import BaseModel, Organisation


class OrganisationAdmin(BaseModel):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    organisation = models.ForeignKey(Organisation, on_delete=models.CASCADE)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "organisation"], name="unique_organisation_admin"),
        ]
