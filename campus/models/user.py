from django.contrib.auth.models import AbstractUser
from django.db import models

from campus.models import BaseModel


class User(AbstractUser, BaseModel):
    school = models.ForeignKey(
        "School",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="users",
    )

    # The organisation this user belongs to (as a student, for example)
    organisation = models.ForeignKey(
        "Organisation",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="members",
    )

    # Organisations this user administers
    organisations = models.ManyToManyField(
        "Organisation",
        through="OrganisationAdmin",
        related_name="admins",
        blank=True,
    )

    discord_user_id = models.CharField(
        max_length=64,
        blank=True,
        null=True,
        help_text="Discord account linked to this user, used for role sync",
    )

    @property
    def name(self):
        return self.get_full_name() or self.username

    def is_school_admin(self, school):
        """Check if user administers the given school."""
        if school is None:
            return False
        return self.school_admins.filter(school=school).exists()

    def administers_organisation(self, organisation_id):
        if organisation_id is None:
            return False
        return self.organisations.filter(id=organisation_id).exists()

    def __str__(self):
        return self.username
