"""
Celery tasks for Discord role sync.
"""
import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task(bind=True)
def clear_discord_roles_task(self, discord_user_id, school_id):
    """
    Remove all roles from a member of the school's Discord server.

    Args:
        discord_user_id: Discord account of the member
        school_id: School whose Discord configuration should be used

    Returns:
        dict: Outcome of the call
    """
    from campus.models import School
    from campus.services.discord.clear_roles_service import ClearRolesService

    school = School.objects.filter(pk=school_id).first()
    if school is None:
        logger.warning(f"DISCORD_TASK: School {school_id} not found, skipping role clear for {discord_user_id}")
        return {'cleared': False, 'reason': 'school_not_found'}

    configuration = school.discord_configuration
    if not configuration:
        logger.info(f"DISCORD_TASK: School {school_id} has no Discord configuration")
        return {'cleared': False, 'reason': 'not_configured'}

    response = ClearRolesService(discord_user_id, configuration).execute()
    return {'cleared': response is not None}
