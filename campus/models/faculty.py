from django.conf import settings
from django.db import models
from django.utils.crypto import get_random_string

from campus.models import BaseModel, School

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
TOKEN_LENGTH = 24


def generate_token():
    return get_random_string(TOKEN_LENGTH, allowed_chars=BASE58_ALPHABET)


class FacultyQuerySet(models.QuerySet):
    def with_email(self):
        """Faculty that can be contacted, and so may manage their own slots."""
        return self.exclude(email__isnull=True).exclude(email="")


class Faculty(BaseModel):
    school = models.ForeignKey(School, on_delete=models.CASCADE, related_name="faculty")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="faculty",
    )
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, null=True, blank=True)
    title = models.CharField(max_length=255, blank=True)
    current_commitment = models.TextField(blank=True)
    token = models.CharField(max_length=64, unique=True, default=generate_token, editable=False)

    objects = FacultyQuerySet.as_manager()

    class Meta:
        verbose_name_plural = "faculty"

    def __str__(self):
        return self.name
