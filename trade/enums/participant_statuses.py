from dynasty.common.enums import ChoicesEnum


class ParticipantStatuses(ChoicesEnum):
	"""A single team's response to a trade."""

	PENDING = "pending"
	ACCEPTED = "accepted"
	REJECTED = "rejected"
