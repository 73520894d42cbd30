from .discord import clear_discord_roles_task

__all__ = [
    'clear_discord_roles_task',
]
