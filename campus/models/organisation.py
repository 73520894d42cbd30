from django.db import models

from campus.models import BaseModel, School


class Organisation(BaseModel):
    school = models.ForeignKey(School, on_delete=models.CASCADE, related_name="organisations")
    name = models.CharField(max_length=255)

    def __str__(self):
        return self.name
