from dynasty.common.enums import ChoicesEnum


class TradeActions(ChoicesEnum):
	"""Actions a team can take on an existing trade."""

	ACCEPT = "accept"
	REJECT = "reject"
	APPROVE = "approve"
	VOTE = "vote"
	CANCEL = "cancel"
	WITHDRAW = "withdraw"

	@classmethod
	def get_decisions(cls) -> list["TradeActions"]:
		"""
		Get the actions that are a participant's response to the trade.

		Returns:
			list[TradeActions]: Accept and reject.
		"""
		return [cls.ACCEPT, cls.REJECT]
