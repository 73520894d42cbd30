# Services for campus application

from .weekly_slots_service import WeeklySlotsService
from .discord.clear_roles_service import ClearRolesService

__all__ = (
    'WeeklySlotsService',
    'ClearRolesService',
)
