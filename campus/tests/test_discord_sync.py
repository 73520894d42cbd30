"""
Discord role clearing when a student is removed from a cohort.
"""
from unittest.mock import patch

from kombu.exceptions import OperationalError

from campus.models import Founder
from campus.tasks.discord import clear_discord_roles_task
from campus.tests.base import CampusTestCase

CONFIGURATION = {"bot_token": "bot-secret", "server_id": "9001"}


class FounderDeleteSignalTest(CampusTestCase):
    def setUp(self):
        self.user = self.create_user("student@test.org", school=self.school, discord_user_id="12345")
        self.founder = Founder.objects.create(user=self.user, cohort=self.cohort)

    @patch.object(clear_discord_roles_task, "delay")
    def test_queues_role_clear_after_commit(self, mock_delay):
        with self.captureOnCommitCallbacks(execute=False) as callbacks:
            self.founder.delete()

        mock_delay.assert_not_called()
        self.assertEqual(len(callbacks), 1)

        callbacks[0]()
        mock_delay.assert_called_once_with("12345", self.school.id)

    @patch.object(clear_discord_roles_task, "delay")
    def test_cascade_from_user_delete(self, mock_delay):
        with self.captureOnCommitCallbacks(execute=True):
            self.user.delete()

        mock_delay.assert_called_once_with("12345", self.school.id)

    @patch.object(clear_discord_roles_task, "delay")
    def test_broker_outage_does_not_undo_the_delete(self, mock_delay):
        mock_delay.side_effect = OperationalError("broker unreachable")

        with self.assertLogs("django", level="ERROR"):
            with self.captureOnCommitCallbacks(execute=True):
                self.founder.delete()

        mock_delay.assert_called_once_with("12345", self.school.id)
        self.assertFalse(Founder.objects.filter(pk=self.founder.pk).exists())

    @patch.object(clear_discord_roles_task, "delay")
    def test_skipped_without_discord_account(self, mock_delay):
        self.user.discord_user_id = None
        self.user.save()

        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            self.founder.delete()

        self.assertEqual(callbacks, [])
        mock_delay.assert_not_called()


class ClearDiscordRolesTaskTest(CampusTestCase):
    def test_school_not_found(self):
        result = clear_discord_roles_task.apply(args=["12345", 999999]).get()
        self.assertEqual(result, {'cleared': False, 'reason': 'school_not_found'})

    def test_school_without_configuration(self):
        result = clear_discord_roles_task.apply(args=["12345", self.school.id]).get()
        self.assertEqual(result, {'cleared': False, 'reason': 'not_configured'})

    def test_clears_with_school_configuration(self):
        self.school.configuration = {"discord": CONFIGURATION}
        self.school.save()

        with patch("campus.services.discord.clear_roles_service.ClearRolesService.execute") as mock_execute:
            mock_execute.return_value = object()
            result = clear_discord_roles_task.apply(args=["12345", self.school.id]).get()

        self.assertEqual(result, {'cleared': True})
        mock_execute.assert_called_once_with()
