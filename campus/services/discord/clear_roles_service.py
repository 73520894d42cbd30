"""
Clears every role a member holds on a school's Discord server.
"""
import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class ClearRolesService:
    """
    Fire-and-forget call to the Discord bot API.

    ``configuration`` is the school's Discord block, with ``bot_token`` and
    ``server_id`` keys. A blank configuration makes ``execute`` a no-op.
    Permission (403) and bad request (400) responses are logged; any other
    failure propagates to the caller.
    """

    def __init__(self, discord_user_id, configuration):
        self.discord_user_id = discord_user_id
        self.configuration = configuration

    def execute(self):
        if not self.configuration:
            return None

        response = requests.patch(
            self.member_url(),
            json={"roles": []},
            headers={"Authorization": f"Bot {self.configuration['bot_token']}"},
            timeout=settings.DISCORD_CONFIG['timeout'],
        )

        try:
            response.raise_for_status()
        except requests.HTTPError:
            if response.status_code == 403:
                logger.error(f"No permission to update member {self.discord_user_id}")
                return None
            if response.status_code == 400:
                logger.error(f"Bad request with discord_user_id: {self.discord_user_id}")
                return None
            raise

        logger.info(f"Cleared Discord roles for member {self.discord_user_id}")
        return response

    def member_url(self):
        base_url = settings.DISCORD_CONFIG['api_base_url'].rstrip('/')
        return f"{base_url}/guilds/{self.configuration['server_id']}/members/{self.discord_user_id}"
