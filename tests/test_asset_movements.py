from decimal import Decimal

import pytest

from trade.exceptions import TradeValidationError
from trade.types.asset_movements import CapSpaceMovement, ContractMovement, DraftPickMovement, parse_asset_payload


def test_parses_each_asset_kind():
	contract = parse_asset_payload({"from_team_id": 1, "to_team_id": 2, "asset_type": "contract", "contract_id": 7})
	pick = parse_asset_payload({"from_team_id": 1, "to_team_id": 2, "asset_type": "draft_pick", "draft_pick_id": 3})
	cap = parse_asset_payload(
		{"from_team_id": 1, "to_team_id": 2, "asset_type": "cap_space", "cap_amount": "10.5", "cap_year": 2028},
	)

	assert contract == ContractMovement(1, 2, 7)
	assert pick == DraftPickMovement(1, 2, 3)
	assert cap == CapSpaceMovement(1, 2, Decimal("10.50"), 2028)


def test_cap_year_defaults_to_first_supported_year():
	cap = parse_asset_payload({"from_team_id": 1, "to_team_id": 2, "asset_type": "cap_space", "cap_amount": 5})

	assert cap.cap_year == 2026


@pytest.mark.parametrize(
	("payload", "message"),
	[
		({"from_team_id": 1, "to_team_id": 2, "asset_type": "player", "contract_id": 1}, "Unknown asset type"),
		({"from_team_id": 1, "to_team_id": 2, "asset_type": "contract"}, "contract_id"),
		({"to_team_id": 2, "asset_type": "draft_pick", "draft_pick_id": 1}, "from_team_id"),
		({"from_team_id": 1, "to_team_id": 2, "asset_type": "cap_space", "cap_amount": 0}, "positive"),
		({"from_team_id": 1, "to_team_id": 2, "asset_type": "cap_space", "cap_amount": "abc"}, "number"),
		(
			{"from_team_id": 1, "to_team_id": 2, "asset_type": "cap_space", "cap_amount": 5, "cap_year": 2031},
			"not supported",
		),
	],
)
def test_rejects_malformed_assets(payload, message):
	with pytest.raises(TradeValidationError, match=message):
		parse_asset_payload(payload)
