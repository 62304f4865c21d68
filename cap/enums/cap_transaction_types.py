from dynasty.common.enums import ChoicesEnum


class CapTransactionTypes(ChoicesEnum):
	"""Kinds of salary-cap events recorded in the ledger."""

	CONTRACT_TRADED_OUT = "contract_traded_out"
	CONTRACT_TRADED_IN = "contract_traded_in"
	TRADE_CAP_HIT = "trade_cap_hit"
	TRADE_CAP_CREDIT = "trade_cap_credit"
	DEAD_MONEY = "dead_money"

	@classmethod
	def get_room_affecting_types(cls) -> list["CapTransactionTypes"]:
		"""
		Get the entry types that change a team's cap room.

		Contract transfer entries only document where a salary went: the salary
		itself follows the contract's owning team, so counting those entries too
		would charge the receiving team twice.

		Returns:
			list[CapTransactionTypes]: Types summed into a team's dead money.
		"""
		return [cls.TRADE_CAP_HIT, cls.TRADE_CAP_CREDIT, cls.DEAD_MONEY]
