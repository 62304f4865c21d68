from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from django.db import models

from core.enums.notification_levels import NotificationLevels
from core.models.notification import Notification

if TYPE_CHECKING:
	from core.models.contract import Contract


class Team(models.Model):
	"""Model representing a fantasy team (a roster) inside a league."""

	league = models.ForeignKey("core.League", on_delete=models.CASCADE, related_name="teams")
	name = models.CharField(max_length=100)
	owner_name = models.CharField(max_length=100, blank=True, help_text="Display name of the manager")
	owner = models.ForeignKey(
		"core.User",
		on_delete=models.SET_NULL,
		null=True,
		blank=True,
		related_name="teams",
		help_text="Account that manages this team, if it has signed up",
	)
	external_roster_id = models.PositiveIntegerField(null=True, blank=True, help_text="Roster id on the host platform")
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:  # noqa: D106
		ordering = ("league", "name")
		unique_together = ("league", "name")

	def __str__(self) -> str:
		return self.name

	def save(self, *args: Sequence[Any], **kwargs: dict[str, Any]) -> None:  # pyright: ignore[reportIncompatibleMethodOverride] # noqa: D102
		is_new = not self.pk

		super().save(*args, **kwargs)  # pyright: ignore[reportArgumentType]

		if is_new and self.owner is not None:
			Notification.objects.create(
				user=self.owner,
				message=f'Your team "{self.name}" has been created.',
				priority=1,
				level=NotificationLevels.INFO,
			)

	@property
	def display_name(self) -> str:
		"""Manager name when known, otherwise the team name."""
		return self.owner_name or self.name

	def active_contracts(self, season: int | None = None) -> models.QuerySet["Contract"]:
		"""
		Active contracts on this team, optionally restricted to those covering a season.

		Args:
			season (int | None): Season the contracts must cover.

		Returns:
			QuerySet[Contract]: The matching contracts.
		"""
		from core.models.contract import Contract  # noqa: PLC0415

		contracts = Contract.objects.filter(team=self, status=Contract.Status.ACTIVE)

		if season is not None:
			contracts = contracts.filter(start_season__lte=season, end_season__gte=season)

		return contracts
