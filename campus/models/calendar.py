from django.db import models

from campus.models import BaseModel, Course

NAME_MAX_LENGTH = 50


class Calendar(BaseModel):
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="calendars")
    name = models.CharField(max_length=NAME_MAX_LENGTH)

    def __str__(self):
        return self.name
