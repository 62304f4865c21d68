"""League model and the settings it provides to the trade engine.

A league owns the salary cap and the trade-approval policy. Trades read these
values once, at proposal time, and freeze them (see ``Trade.approval_snapshot``),
so later edits by commissioners never change the behavior of an in-flight trade.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from dynasty.settings import LEAGUE_SETTINGS
from trade.enums.approval_modes import ApprovalModes

if TYPE_CHECKING:
	from core.models.team import Team


class League(models.Model):
	"""A dynasty league with its salary cap and trade-approval settings.

	Attributes:
		name: Display name of the league.
		external_id: Identifier of the league on the host platform (e.g. Sleeper).
		salary_cap: Cap ceiling applied to every team, every season.
		trade_approval_mode: How accepted trades become completed trades.
		league_vote_window_hours: Length of the veto window under league_vote mode.
		veto_threshold: Fraction of eligible voters needed to veto a trade.
		total_rosters: Number of teams in the league.
		current_season: Season used for contract salary and cap-room checks.
	"""

	name = models.CharField(max_length=100)
	external_id = models.CharField(max_length=50, blank=True, help_text="League id on the host platform")
	salary_cap = models.DecimalField(
		max_digits=10,
		decimal_places=2,
		default=Decimal(LEAGUE_SETTINGS.DEFAULT_SALARY_CAP),
	)
	trade_approval_mode = models.CharField(
		max_length=20,
		choices=ApprovalModes.choices(),
		default=ApprovalModes.AUTO.value,
	)
	league_vote_window_hours = models.PositiveIntegerField(null=True, blank=True)
	veto_threshold = models.DecimalField(
		max_digits=4,
		decimal_places=3,
		null=True,
		blank=True,
		validators=[MinValueValidator(Decimal(0)), MaxValueValidator(Decimal(1))],
		help_text="Fraction of eligible voters needed to veto a trade",
	)
	total_rosters = models.PositiveIntegerField(null=True, blank=True)
	current_season = models.PositiveIntegerField()

	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:  # noqa: D106
		ordering = ("name",)

	def __str__(self) -> str:
		return self.name

	@property
	def vote_window_hours(self) -> int:
		"""Hours a league vote stays open, falling back to the league-wide default."""
		if self.league_vote_window_hours is None:
			return LEAGUE_SETTINGS.DEFAULT_VOTE_WINDOW_HOURS

		return self.league_vote_window_hours

	@property
	def veto_fraction(self) -> Decimal:
		"""Fraction of eligible voters needed to veto, defaulting to one half."""
		if self.veto_threshold is None:
			return Decimal(str(LEAGUE_SETTINGS.DEFAULT_VETO_FRACTION))

		return self.veto_threshold

	@property
	def roster_count(self) -> int:
		"""Number of teams in the league used to size the voting pool."""
		if self.total_rosters is None:
			return LEAGUE_SETTINGS.DEFAULT_TOTAL_ROSTERS

		return self.total_rosters

	def is_commissioner(self, team: Team) -> bool:
		"""Check whether a team is registered as a commissioner of this league."""  # noqa: DOC201
		return self.commissioners.filter(team=team).exists()


class LeagueCommissioner(models.Model):
	"""Membership row granting a team commissioner powers in a league."""

	league = models.ForeignKey(League, on_delete=models.CASCADE, related_name="commissioners")
	team = models.ForeignKey("core.Team", on_delete=models.CASCADE, related_name="commissioner_of")

	created_at = models.DateTimeField(auto_now_add=True)

	class Meta:  # noqa: D106
		unique_together = ("league", "team")

	def __str__(self) -> str:
		return f"{self.team} (commissioner of {self.league})"
