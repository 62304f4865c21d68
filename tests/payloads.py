"""Builders for the asset payloads a client sends when proposing a trade."""

from core.models import Contract, Team
from draft.models import Pick


def contract_asset(contract: Contract, to_team: Team) -> dict:
	return {
		"from_team_id": contract.team_id,
		"to_team_id": to_team.pk,
		"asset_type": "contract",
		"contract_id": contract.pk,
	}


def pick_asset(pick: Pick, to_team: Team) -> dict:
	return {
		"from_team_id": pick.current_team_id,
		"to_team_id": to_team.pk,
		"asset_type": "draft_pick",
		"draft_pick_id": pick.pk,
	}


def cap_asset(from_team: Team, to_team: Team, amount: int | str, year: int = 2027) -> dict:
	return {
		"from_team_id": from_team.pk,
		"to_team_id": to_team.pk,
		"asset_type": "cap_space",
		"cap_amount": amount,
		"cap_year": year,
	}
