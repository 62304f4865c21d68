"""Display record of a completed trade.

One row per completed trade, numbered ``YY.NN`` within its league and calendar
year, listing what each of the first two participants received. Pages that show
past trades read only this table, never the live assets, since contracts and
picks keep moving after the trade.
"""

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models


class TradeHistoryRecord(models.Model):
	"""Numbered summary of a completed trade.

	Attributes:
		league: League the trade happened in.
		trade: The completed trade.
		trade_number: ``YY.NN`` number within the league and year.
		trade_year: Calendar year of completion.
		team1_name: Name of the first participant at completion time.
		team1_received: Items the first participant received.
		team2_name: Name of the second participant at completion time.
		team2_received: Items the second participant received.
		trade_date: Date of completion.
	"""

	league = models.ForeignKey("core.League", on_delete=models.CASCADE, related_name="trade_history")
	trade = models.OneToOneField(
		"trade.Trade",
		on_delete=models.SET_NULL,
		null=True,
		blank=True,
		related_name="history_record",
	)
	trade_number = models.CharField(max_length=10)
	trade_year = models.PositiveIntegerField()
	team1 = models.ForeignKey("core.Team", on_delete=models.SET_NULL, null=True, related_name="+")
	team1_name = models.CharField(max_length=100)
	team1_received = models.JSONField(default=list, encoder=DjangoJSONEncoder)
	team2 = models.ForeignKey("core.Team", on_delete=models.SET_NULL, null=True, related_name="+")
	team2_name = models.CharField(max_length=100)
	team2_received = models.JSONField(default=list, encoder=DjangoJSONEncoder)
	trade_date = models.DateField()
	notes = models.TextField(blank=True)

	created_at = models.DateTimeField(auto_now_add=True)

	class Meta:  # noqa: D106
		ordering = ("-trade_year", "-created_at", "-id")
		unique_together = ("league", "trade_number")
		indexes = (models.Index(fields=["league", "trade_year"], name="trade_history_year_idx"),)

	def __str__(self) -> str:
		return f"Trade {self.trade_number}: {self.team1_name} / {self.team2_name}"
