"""
Weekly Slots Service

Reconciles the connect slots a faculty member marks available for the
upcoming week. Slots are addressed by (day, time): day 1..7 is Monday to
Sunday and time is the hour of day in half-hour steps (0.0 .. 23.5).

Offsets from the start of the week are elapsed time, so a slot keeps its
key across daylight saving changes.
"""
import logging
from datetime import timedelta, timezone as dt_timezone
from typing import Iterable, List, Set, Tuple

from django.db import transaction

from campus.models import ConnectSlot, Faculty

logger = logging.getLogger(__name__)

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
SLOT_TIMES = [hour / 2 for hour in range(48)]

Slot = Tuple[int, float]


def slot_key(day: int, time: float) -> str:
    """Form value for a slot, e.g. '1:11.5'."""
    return f"{day}:{time:.1f}"


def parse_slot_key(value: str) -> Slot:
    day, time = value.split(":", 1)
    return int(day), float(time)


def slot_label(time: float) -> str:
    """Clock label for a slot time, e.g. 11.5 -> '11:30'."""
    minutes = 30 if time % 1 else 0
    return f"{int(time):02d}:{minutes:02d}"


def all_slot_keys() -> List[str]:
    return [slot_key(day, time) for day in range(1, 8) for time in SLOT_TIMES]


class WeeklySlotsService:
    """Read and update one faculty member's slots for the next calendar week."""

    def __init__(self, faculty: Faculty, week_start=None):
        self.faculty = faculty
        self.week_start = week_start or ConnectSlot.next_week_start()

    @property
    def week_start_utc(self):
        return self.week_start.astimezone(dt_timezone.utc)

    @property
    def week_end(self):
        return self.week_start_utc + timedelta(weeks=1)

    def slot_at(self, day: int, time: float):
        return self.week_start_utc + timedelta(days=day - 1, hours=time)

    def position(self, slot_at) -> Slot:
        """(day, time) of a timestamp within the week."""
        offset = slot_at.astimezone(dt_timezone.utc) - self.week_start_utc
        return offset.days + 1, offset.seconds / 3600

    def slots(self):
        return self.faculty.connect_slots.filter(
            slot_at__gte=self.week_start,
            slot_at__lt=self.week_end,
        )

    def selected_keys(self) -> Set[str]:
        return {slot_key(*self.position(slot.slot_at)) for slot in self.slots()}

    def update(self, selected: Iterable[Slot]):
        """
        Make the stored slots for the week match ``selected`` exactly.

        Unselected slots are deleted and new ones created in chronological
        order; slots that are kept, and slots outside the week, are left alone.

        Returns:
            tuple: (number of slots added, number of slots removed)
        """
        wanted = {self.slot_at(day, time) for day, time in selected}

        with transaction.atomic():
            existing = {slot.slot_at: slot for slot in self.slots().select_for_update()}

            stale_ids = [slot.pk for slot_at, slot in existing.items() if slot_at not in wanted]
            if stale_ids:
                ConnectSlot.objects.filter(pk__in=stale_ids).delete()

            new_times = sorted(wanted - set(existing))
            ConnectSlot.objects.bulk_create(
                [ConnectSlot(faculty=self.faculty, slot_at=slot_at) for slot_at in new_times]
            )

        logger.info(
            f"Updated weekly slots for faculty {self.faculty.pk}: "
            f"{len(new_times)} added, {len(stale_ids)} removed"
        )
        return len(new_times), len(stale_ids)
