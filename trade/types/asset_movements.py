"""Typed, validated forms of a trade asset.

A proposal payload is loose: a kind plus whichever identifiers the client sent.
``parse_asset_payload`` turns it into exactly one of the movement classes below,
so code further down can dispatch on the class and never meets a contract asset
without a contract id.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from dynasty.common.util import to_money
from dynasty.settings import LEAGUE_SETTINGS
from trade.enums.asset_kinds import AssetKinds
from trade.exceptions import TradeValidationError


@dataclass(frozen=True)
class ContractMovement:
	"""A player contract changing teams."""

	from_team_id: int
	to_team_id: int
	contract_id: int

	kind = AssetKinds.CONTRACT


@dataclass(frozen=True)
class DraftPickMovement:
	"""A draft pick changing owners."""

	from_team_id: int
	to_team_id: int
	draft_pick_id: int

	kind = AssetKinds.DRAFT_PICK


@dataclass(frozen=True)
class CapSpaceMovement:
	"""Cap space absorbed by the sending team on behalf of the receiving team."""

	from_team_id: int
	to_team_id: int
	cap_amount: Decimal
	cap_year: int

	kind = AssetKinds.CAP_SPACE


AssetMovement = Union[ContractMovement, DraftPickMovement, CapSpaceMovement]


def _require_int(payload: Mapping[str, Any], key: str) -> int:
	value = payload.get(key)

	if value is None or isinstance(value, bool):
		raise TradeValidationError(f"Asset is missing {key}.")

	try:
		return int(value)

	except (TypeError, ValueError) as e:
		raise TradeValidationError(f"Asset {key} must be an integer.") from e


def parse_asset_payload(payload: Mapping[str, Any]) -> AssetMovement:
	"""
	Validate one proposal asset and build its typed movement.

	Args:
		payload (Mapping[str, Any]): The raw asset as sent by the client.

	Raises:
		TradeValidationError: If the kind is unknown, an identifier is missing, the
			cap amount is not positive or the cap year is not supported.

	Returns:
		AssetMovement: The movement matching the asset's kind.
	"""
	from_team_id = _require_int(payload, "from_team_id")
	to_team_id = _require_int(payload, "to_team_id")
	asset_type = payload.get("asset_type")

	if asset_type == AssetKinds.CONTRACT:
		return ContractMovement(from_team_id, to_team_id, _require_int(payload, "contract_id"))

	if asset_type == AssetKinds.DRAFT_PICK:
		return DraftPickMovement(from_team_id, to_team_id, _require_int(payload, "draft_pick_id"))

	if asset_type == AssetKinds.CAP_SPACE:
		if payload.get("cap_amount") is None:
			raise TradeValidationError("Asset is missing cap_amount.")

		try:
			cap_amount = to_money(payload["cap_amount"])

		except (InvalidOperation, ValueError) as e:
			raise TradeValidationError("Asset cap_amount must be a number.") from e

		if not cap_amount.is_finite() or cap_amount <= 0:
			raise TradeValidationError("Asset cap_amount must be positive.")

		cap_year = (
			_require_int(payload, "cap_year") if payload.get("cap_year") is not None else LEAGUE_SETTINGS.DEFAULT_CAP_YEAR
		)

		if cap_year not in LEAGUE_SETTINGS.CAP_YEARS:
			raise TradeValidationError(f"Cap year {cap_year} is not supported.")

		return CapSpaceMovement(from_team_id, to_team_id, cap_amount, cap_year)

	raise TradeValidationError(f"Unknown asset type: {asset_type}")
