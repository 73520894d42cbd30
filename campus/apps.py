from django.apps import AppConfig


class CampusConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "campus"

    def ready(self):
        # Import signals to register them
        from . import signals  # noqa: F401
