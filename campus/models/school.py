from django.db import models

from campus.models import BaseModel


class School(BaseModel):
    name = models.CharField(max_length=255)
    configuration = models.JSONField(default=dict, blank=True)

    @property
    def discord_configuration(self):
        """The Discord bot settings for this school, or an empty dict."""
        return (self.configuration or {}).get("discord") or {}

    def __str__(self):
        return self.name


class Domain(BaseModel):
    school = models.ForeignKey(School, on_delete=models.CASCADE, related_name="domains")
    fqdn = models.CharField(max_length=255, unique=True)
    primary = models.BooleanField(default=False)

    def save(self, *args, **kwargs):
        self.fqdn = self.fqdn.strip().lower()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.fqdn
