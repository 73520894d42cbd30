"""
Django signals for campus application.
Handles Discord role cleanup when students are removed.
"""
import logging

from django.db import transaction
from django.db.models.signals import pre_delete
from django.dispatch import receiver

from campus.models import Founder, User, Cohort

logger = logging.getLogger(__name__)


@receiver(pre_delete, sender=Founder)
def clear_discord_roles_on_founder_delete(sender, instance, **kwargs):
    """
    Queue removal of the student's Discord roles once the delete commits.

    Runs before the delete so the user and cohort rows are still readable when
    the removal cascades from either of them.
    """
    discord_user_id = (
        User.objects.filter(pk=instance.user_id).values_list('discord_user_id', flat=True).first()
    )
    if not discord_user_id:
        return

    school_id = (
        Cohort.objects.filter(pk=instance.cohort_id).values_list('course__school_id', flat=True).first()
    )
    if school_id is None:
        return

    from campus.tasks.discord import clear_discord_roles_task

    def enqueue_clear_roles():
        clear_discord_roles_task.delay(discord_user_id, school_id)

    logger.info(f"Founder {instance.pk} removed, queueing Discord role clear for {discord_user_id}")
    # A broker outage is logged by Django; the delete has already committed
    transaction.on_commit(enqueue_clear_roles, robust=True)
