from typing import TYPE_CHECKING, Optional

from django.contrib.auth.models import AbstractUser
from django.db import models

if TYPE_CHECKING:
	from core.models.team import Team


class User(AbstractUser):
	"""Account of a league manager; one user may manage teams in several leagues."""

	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)
	phone_country_code = models.CharField(max_length=8, blank=True, help_text="User's cellphone country code")
	phone_number = models.CharField(max_length=31, blank=True, help_text="User's cellphone number")

	def __str__(self) -> str:
		return self.username

	@property
	def phone(self) -> str:
		"""Returns the full phone number including country code."""
		if self.phone_country_code and self.phone_number:
			return f"+{self.phone_country_code}{self.phone_number}"

		return ""

	def team_in(self, league_id: int) -> Optional["Team"]:
		"""The team this user manages in a league, if any."""  # noqa: DOC201
		return self.teams.filter(league_id=league_id).first()
