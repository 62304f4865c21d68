from django.db import models

from trade.enums.votes import VoteChoices


class TradeVote(models.Model):
	"""A non-participant team's current vote on a trade; one row per team."""

	trade = models.ForeignKey("trade.Trade", on_delete=models.CASCADE, related_name="votes")
	team = models.ForeignKey("core.Team", on_delete=models.CASCADE, related_name="trade_votes")
	vote = models.CharField(max_length=10, choices=VoteChoices.choices())
	voted_at = models.DateTimeField(auto_now=True)

	class Meta:  # noqa: D106
		ordering = ("voted_at",)
		unique_together = ("trade", "team")

	def __str__(self) -> str:
		return f"{self.team} votes {self.vote} on trade #{self.trade_id}"
