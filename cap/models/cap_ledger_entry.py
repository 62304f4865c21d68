"""Append-only salary-cap ledger.

Every cap-affecting event (a contract changing teams, cap space absorbed or
relieved in a trade, dead money from a release) is one signed row per team and
season. Rows are never updated or deleted: a correction is another row.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Sum

from cap.enums.cap_transaction_types import CapTransactionTypes


class CapLedgerQuerySet(models.QuerySet):
	"""Query helpers for summing ledger rows."""

	def for_team_season(self, team_id: int, season: int) -> CapLedgerQuerySet:
		"""Entries charged to one team in one season."""  # noqa: DOC201
		return self.filter(team_id=team_id, season=season)

	def of_types(self, types: Iterable[str]) -> CapLedgerQuerySet:
		"""Entries whose transaction type is in ``types``."""  # noqa: DOC201
		return self.filter(transaction_type__in=list(types))

	def total(self) -> Decimal:
		"""Signed sum of the selected entries (zero when empty)."""  # noqa: DOC201
		return self.aggregate(total=Sum("amount"))["total"] or Decimal(0)

	def delete(self) -> None:  # noqa: D102
		raise ValidationError("Cap ledger entries are append-only and cannot be deleted.")

	def update(self, **kwargs) -> None:  # noqa: ANN003, D102
		raise ValidationError("Cap ledger entries are append-only and cannot be updated.")


class CapLedgerEntry(models.Model):
	"""A signed salary-cap charge (positive) or credit (negative) for a team and season.

	Attributes:
		league: League the entry belongs to.
		team: Team whose cap is affected.
		season: Cap year the amount applies to.
		transaction_type: What kind of event produced the entry.
		amount: Signed amount; positive uses cap room, negative frees it.
		description: Human-readable explanation shown on cap pages.
		contract: Contract that produced the entry, if any.
		trade: Trade that produced the entry, if any.
	"""

	league = models.ForeignKey("core.League", on_delete=models.CASCADE, related_name="cap_entries")
	team = models.ForeignKey("core.Team", on_delete=models.CASCADE, related_name="cap_entries")
	season = models.PositiveIntegerField()
	transaction_type = models.CharField(max_length=30, choices=CapTransactionTypes.choices())
	amount = models.DecimalField(max_digits=10, decimal_places=2)
	description = models.TextField(blank=True)
	contract = models.ForeignKey(
		"core.Contract",
		on_delete=models.SET_NULL,
		null=True,
		blank=True,
		related_name="cap_entries",
	)
	trade = models.ForeignKey(
		"trade.Trade",
		on_delete=models.SET_NULL,
		null=True,
		blank=True,
		related_name="cap_entries",
	)

	created_at = models.DateTimeField(auto_now_add=True)

	objects = CapLedgerQuerySet.as_manager()

	class Meta:  # noqa: D106
		ordering = ("created_at", "id")
		verbose_name = "Cap Ledger Entry"
		verbose_name_plural = "Cap Ledger Entries"
		indexes = [
			models.Index(fields=["team", "season"], name="cap_ledger_team_season_idx"),
			models.Index(fields=["league", "season"], name="cap_ledger_league_season_idx"),
			models.Index(fields=["trade"], name="cap_ledger_trade_idx"),
		]

	def __str__(self) -> str:
		return f"{self.team} {self.season}: {self.amount:+} ({self.transaction_type})"

	def save(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003
		"""
		Insert the entry; existing entries are immutable.

		Raises:
			ValidationError: If the entry was already saved.
		"""
		if self.pk is not None:
			raise ValidationError("Cap ledger entries are append-only and cannot be modified.")

		super().save(*args, **kwargs)

	def delete(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003, D102
		raise ValidationError("Cap ledger entries are append-only and cannot be deleted.")
