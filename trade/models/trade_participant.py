from django.db import models

from trade.enums.participant_statuses import ParticipantStatuses


class TradeParticipant(models.Model):
	"""A team's place in a trade and its response to it."""

	trade = models.ForeignKey("trade.Trade", on_delete=models.CASCADE, related_name="participants")
	team = models.ForeignKey("core.Team", on_delete=models.CASCADE, related_name="trade_participations")
	status = models.CharField(
		max_length=20,
		choices=ParticipantStatuses.choices(),
		default=ParticipantStatuses.PENDING.value,
	)
	accepted_at = models.DateTimeField(null=True, blank=True)
	responded_at = models.DateTimeField(null=True, blank=True)

	created_at = models.DateTimeField(auto_now_add=True)

	class Meta:  # noqa: D106
		ordering = ("id",)
		unique_together = ("trade", "team")
		indexes = (models.Index(fields=["team", "status"], name="trade_participant_status_idx"),)

	def __str__(self) -> str:
		return f"{self.team} in trade #{self.trade_id} ({self.status})"
