from dynasty.common.enums import ChoicesEnum


class ApprovalModes(ChoicesEnum):
	"""How a trade accepted by every participant becomes a completed trade."""

	AUTO = "auto"
	COMMISSIONER = "commissioner"
	LEAGUE_VOTE = "league_vote"
