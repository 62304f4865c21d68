from collections.abc import Sequence
from typing import Any

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models


class Contract(models.Model):
	"""Model representing a player's contract with a team."""

	class Status(models.TextChoices):
		"""Lifecycle of a contract; only active contracts count against the cap."""

		ACTIVE = "active", "Active"
		RELEASED = "released", "Released"
		EXPIRED = "expired", "Expired"

	league = models.ForeignKey("core.League", on_delete=models.CASCADE, related_name="contracts")
	player = models.ForeignKey("core.Player", on_delete=models.CASCADE, related_name="contracts")
	team = models.ForeignKey("core.Team", on_delete=models.SET_NULL, related_name="contracts", null=True, blank=True)
	salary = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
	years_total = models.PositiveIntegerField(validators=[MinValueValidator(1)])
	years_remaining = models.PositiveIntegerField()
	start_season = models.PositiveIntegerField()
	end_season = models.PositiveIntegerField()
	status = models.CharField(max_length=20, choices=Status.choices, default=Status.ACTIVE)
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:  # noqa: D106
		ordering = ("-salary",)
		indexes = (
			models.Index(fields=["team", "status"], name="contract_team_status_idx"),
			models.Index(fields=["league", "status"], name="contract_league_status_idx"),
		)

	def __str__(self) -> str:
		return f"{self.player} - {self.team} ({self.start_season}-{self.end_season}, ${self.salary})"

	def clean(self) -> None:
		"""
		Validate the contract window.

		Raises:
			ValidationError: If the contract ends before it starts.
		"""
		super().clean()

		if self.end_season < self.start_season:
			raise ValidationError("A contract cannot end before it starts.")

	def save(self, *args: Sequence[Any], **kwargs: dict[str, Any]) -> None:  # pyright: ignore[reportIncompatibleMethodOverride]  # noqa: D102
		self.full_clean()
		return super().save(*args, **kwargs)  # pyright: ignore[reportArgumentType]

	@property
	def is_active(self) -> bool:
		"""Whether the contract currently counts against its team's cap."""
		return self.status == self.Status.ACTIVE

	@property
	def salary_year(self) -> int:
		"""The season whose cap this contract's salary is charged against when traded."""
		return self.league.current_season
