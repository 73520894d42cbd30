import logging
import re

from django.conf import settings
from django.db import models

from campus.models import BaseModel

logger = logging.getLogger(__name__)


class DbConfig(BaseModel):
    """Runtime configuration stored in the database, such as feature flags."""

    FEATURE_KEY_PREFIX = "feature_"

    key = models.CharField(max_length=255, unique=True)
    value = models.JSONField(default=dict, blank=True)

    class Meta:
        verbose_name = "DB config"
        verbose_name_plural = "DB config"

    @classmethod
    def feature_configuration(cls, feature):
        """
        Configuration for a feature flag. A DbConfig row keyed
        "feature_<name>" takes precedence over the defaults in application.yml.
        """
        row = cls.objects.filter(key=f"{cls.FEATURE_KEY_PREFIX}{feature}").first()
        if row is not None:
            return row.value
        return settings.APP_CONFIG.get("features", {}).get(feature)

    @classmethod
    def feature_active(cls, feature, user=None):
        """
        Check if a feature is turned on for a user.

        Supported configurations:
            {"active": true}                  - on for everyone
            {"admin": true}                   - on for staff users
            {"email_regexes": ["@x\\.org$"]}  - on for matching signed-in users
        """
        config = cls.feature_configuration(feature)
        if not isinstance(config, dict):
            return False

        if config.get("active"):
            return True

        if user is None or not user.is_authenticated:
            return False

        if config.get("admin") and user.is_staff:
            return True

        email = user.email or ""
        for pattern in config.get("email_regexes") or []:
            try:
                if re.search(pattern, email):
                    return True
            except re.error:
                logger.warning(f"Invalid email regex {pattern!r} for feature {feature}")

        return False

    def __str__(self):
        return self.key
