from datetime import datetime, time, timedelta

from django.db import models
from django.utils import timezone

from campus.models import BaseModel, Faculty


class ConnectSlot(BaseModel):
    """A half-hour window a faculty member is available for, as an absolute time."""

    faculty = models.ForeignKey(Faculty, on_delete=models.CASCADE, related_name="connect_slots")
    slot_at = models.DateTimeField()

    class Meta:
        indexes = [
            models.Index(fields=["faculty", "slot_at"], name="connectslot_faculty_slot_idx"),
        ]

    @staticmethod
    def next_week_start(now=None):
        """Midnight, local time, on the Monday of the next calendar week."""
        today = timezone.localtime(now).date()
        monday = today - timedelta(days=today.weekday()) + timedelta(weeks=1)
        return timezone.make_aware(datetime.combine(monday, time.min))

    def __str__(self):
        return f"{self.faculty} @ {self.slot_at.isoformat()}"
