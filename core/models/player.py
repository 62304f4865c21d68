from django.db import models


class Player(models.Model):
	"""Model representing an NFL player that can be rostered under contract."""

	POSITION_CHOICES = (
		("QB", "Quarterback"),
		("RB", "Running Back"),
		("WR", "Wide Receiver"),
		("TE", "Tight End"),
		("K", "Kicker"),
		("DEF", "Defense"),
	)

	full_name = models.CharField(max_length=150)
	position = models.CharField(max_length=3, choices=POSITION_CHOICES)
	nfl_team = models.CharField(max_length=3, blank=True, help_text="Abbreviation of the real NFL team")
	external_id = models.CharField(
		max_length=20,
		unique=True,
		null=True,
		blank=True,
		help_text="Player id on the host platform",
	)
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:  # noqa: D106
		ordering = ("full_name",)

	def __str__(self) -> str:
		return self.full_name
