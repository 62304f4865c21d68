from dynasty.common.enums import ChoicesEnum


class TradeStatuses(ChoicesEnum):
	"""The overall status of a trade."""

	PENDING = "pending"
	ACCEPTED = "accepted"
	COMPLETED = "completed"
	REJECTED = "rejected"
	CANCELLED = "cancelled"
	EXPIRED = "expired"

	@classmethod
	def get_terminal_statuses(cls) -> list["TradeStatuses"]:
		"""
		Get the statuses a trade never leaves.

		Returns:
			list[TradeStatuses]: The terminal statuses.
		"""
		return [cls.COMPLETED, cls.REJECTED, cls.CANCELLED, cls.EXPIRED]

	@classmethod
	def get_past_statuses(cls) -> list["TradeStatuses"]:
		"""
		Get the statuses listed under the ``past`` filter (trades that fell through).

		Returns:
			list[TradeStatuses]: Rejected, cancelled and expired.
		"""
		return [cls.REJECTED, cls.CANCELLED, cls.EXPIRED]
