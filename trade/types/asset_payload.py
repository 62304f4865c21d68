from typing import NotRequired, TypedDict


class AssetPayload(TypedDict):
	"""Payload describing one asset of a trade proposal, as received from clients."""

	from_team_id: int
	to_team_id: int
	asset_type: str
	contract_id: NotRequired[int]
	draft_pick_id: NotRequired[int]
	cap_amount: NotRequired[float | str]
	cap_year: NotRequired[int]
