from dynasty.common.enums import ChoicesEnum


class VoteChoices(ChoicesEnum):
	"""A non-participant team's vote on a trade under league vote."""

	APPROVE = "approve"
	VETO = "veto"
