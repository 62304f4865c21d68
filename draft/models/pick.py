from django.db import models

from dynasty.common.util import get_number_suffix


class Pick(models.Model):
	"""Draft capital that teams own and can trade until it is used."""

	league = models.ForeignKey("core.League", on_delete=models.CASCADE, related_name="picks")
	original_team = models.ForeignKey("core.Team", on_delete=models.CASCADE, related_name="original_picks")
	current_team = models.ForeignKey("core.Team", on_delete=models.CASCADE, related_name="current_picks")
	season = models.PositiveIntegerField()
	round_number = models.PositiveIntegerField()
	pick_number = models.PositiveIntegerField(null=True, blank=True, help_text="Slot within the round, once known")
	is_used = models.BooleanField(default=False, help_text="Pick has been converted into a rookie contract")
	used_for_contract = models.ForeignKey(
		"core.Contract",
		on_delete=models.SET_NULL,
		null=True,
		blank=True,
		related_name="drafted_with",
	)

	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:  # noqa: D106
		ordering = ("season", "round_number", "pick_number")
		unique_together = ("original_team", "season", "round_number")
		indexes = (models.Index(fields=["season", "current_team"], name="pick_season_owner_idx"),)

	def __str__(self) -> str:
		suffix = f" (via {self.original_team.name})" if self.current_team_id != self.original_team_id else ""
		return f"{self.season} {self.round_label} - {self.current_team.name}{suffix}"

	@property
	def round_label(self) -> str:
		"""Ordinal round name, e.g. ``1st`` or ``3rd``."""
		return f"{self.round_number}{get_number_suffix(self.round_number)}"
