from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework import status

from core.models import User
from trade.models import Trade
from trade.services.history import format_trade_number
from trade.services.proposal import propose_trade

from payloads import contract_asset, pick_asset


@pytest.fixture
def pending_trade(league, team_a, team_b, make_pick):
	return propose_trade(league.pk, [team_a.pk, team_b.pk], [pick_asset(make_pick(team_a), team_b)])


def _act(client, action, trade, **extra):
	return client.post("/api/trades/actions/", {"action": action, "trade_id": trade.pk, **extra}, format="json")


def test_health_check(api_client, db):
	response = api_client.get("/api/health/")

	assert response.status_code == status.HTTP_200_OK
	assert response.data == {"api": "up", "database": "up"}


def test_trades_require_authentication(api_client, pending_trade):
	response = api_client.get(f"/api/trades/{pending_trade.pk}/")

	assert response.status_code == status.HTTP_401_UNAUTHORIZED


# ============================================================================
# PROPOSALS
# ============================================================================


def test_propose_trade(client_for, league, team_a, team_b, make_contract):
	contract = make_contract(team_a, 20)

	response = client_for(team_a).post(
		"/api/trades/",
		{
			"league_id": league.pk,
			"team_ids": [team_a.pk, team_b.pk],
			"assets": [contract_asset(contract, team_b)],
			"expires_in": "2d",
			"notes": "WR for a future first",
		},
		format="json",
	)

	assert response.status_code == status.HTTP_201_CREATED
	assert response.data["status"] == "pending"
	assert response.data["proposer"]["id"] == team_a.pk
	assert [participant["status"] for participant in response.data["participants"]] == ["accepted", "pending"]
	assert response.data["assets"][0]["asset_type"] == "contract"
	assert response.data["participants"][0]["receives"] == []
	assert response.data["participants"][1]["receives"][0]["kind"] == "player"
	assert Trade.objects.count() == 1


def test_propose_without_cap_room(client_for, league, team_a, team_b, make_contract):
	make_contract(team_b, 90)
	contract = make_contract(team_a, 20)

	response = client_for(team_a).post(
		"/api/trades/",
		{"league_id": league.pk, "team_ids": [team_a.pk, team_b.pk], "assets": [contract_asset(contract, team_b)]},
		format="json",
	)

	assert response.status_code == status.HTTP_400_BAD_REQUEST
	assert response.data["detail"] == "Team B doesn't have enough cap room for this trade"
	assert not Trade.objects.exists()


def test_propose_for_a_team_the_user_does_not_manage(client_for, league, team_a, team_b, make_pick):
	response = client_for(team_a).post(
		"/api/trades/",
		{
			"league_id": league.pk,
			"team_ids": [team_b.pk, team_a.pk],
			"assets": [pick_asset(make_pick(team_b), team_a)],
		},
		format="json",
	)

	assert response.status_code == status.HTTP_403_FORBIDDEN


def test_propose_with_no_assets(client_for, league, team_a, team_b):
	response = client_for(team_a).post(
		"/api/trades/",
		{"league_id": league.pk, "team_ids": [team_a.pk, team_b.pk], "assets": []},
		format="json",
	)

	assert response.status_code == status.HTTP_400_BAD_REQUEST


# ============================================================================
# LISTING
# ============================================================================


def test_list_defaults_to_the_users_team(client_for, league, team_c, pending_trade):
	response = client_for(team_c).get("/api/trades/", {"league": league.pk})

	assert response.status_code == status.HTTP_200_OK
	assert response.data == []


def test_list_for_a_participant(client_for, league, team_b, pending_trade):
	response = client_for(team_b).get("/api/trades/", {"league": league.pk})

	assert [trade["id"] for trade in response.data] == [pending_trade.pk]


def test_list_as_another_managers_team(client_for, league, team_b, team_c, pending_trade):
	response = client_for(team_c).get("/api/trades/", {"league": league.pk, "team_id": team_b.pk})

	assert response.status_code == status.HTTP_403_FORBIDDEN


def test_list_for_a_user_without_a_team_in_the_league(api_client, make_league, make_team, league, pending_trade):
	other_team = make_team(make_league())
	api_client.force_authenticate(user=other_team.owner)

	response = api_client.get("/api/trades/", {"league": league.pk})

	assert response.status_code == status.HTTP_200_OK
	assert response.data == []


def test_staff_list_every_trade(api_client, league, pending_trade):
	staff = User.objects.create_user(username="league-office", password="not-a-real-password", is_staff=True)
	api_client.force_authenticate(user=staff)

	response = api_client.get("/api/trades/", {"league": league.pk})

	assert [trade["id"] for trade in response.data] == [pending_trade.pk]


def test_list_requires_a_league(client_for, team_a):
	response = client_for(team_a).get("/api/trades/")

	assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_retrieve_unknown_trade(client_for, team_a):
	response = client_for(team_a).get("/api/trades/987654/")

	assert response.status_code == status.HTTP_404_NOT_FOUND


# ============================================================================
# ACTIONS
# ============================================================================


def test_accept_completes_the_trade(client_for, team_b, pending_trade):
	response = _act(client_for(team_b), "accept", pending_trade)

	assert response.status_code == status.HTTP_200_OK
	assert response.data["detail"] == "Trade accept action completed."
	assert response.data["trade"]["status"] == "completed"
	assert response.data["trade"]["is_terminal"] is True


def test_accept_by_a_non_participant(client_for, team_c, pending_trade):
	response = _act(client_for(team_c), "accept", pending_trade)

	assert response.status_code == status.HTTP_400_BAD_REQUEST
	assert response.data["detail"] == "Not a participant or already responded"


def test_acting_for_another_managers_team(client_for, team_a, team_b, pending_trade):
	response = _act(client_for(team_a), "accept", pending_trade, team_id=team_b.pk)

	assert response.status_code == status.HTTP_403_FORBIDDEN


def test_withdraw_by_a_non_proposer(client_for, team_b, pending_trade):
	response = _act(client_for(team_b), "withdraw", pending_trade)

	assert response.status_code == status.HTTP_403_FORBIDDEN


def test_withdraw_by_the_proposer(client_for, team_a, pending_trade):
	response = _act(client_for(team_a), "withdraw", pending_trade)

	assert response.status_code == status.HTTP_200_OK
	assert response.data["trade"]["status"] == "cancelled"


def test_action_on_unknown_trade(client_for, team_a, pending_trade):
	response = client_for(team_a).post("/api/trades/actions/", {"action": "cancel", "trade_id": 987654}, format="json")

	assert response.status_code == status.HTTP_404_NOT_FOUND


def test_unknown_action(client_for, team_a, pending_trade):
	response = _act(client_for(team_a), "counter", pending_trade)

	assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_vote_returns_the_tally(client_for, make_league, make_team, make_pick):
	league = make_league(trade_approval_mode="league_vote", total_rosters=3)
	proposer, partner, voter = make_team(league), make_team(league), make_team(league)
	trade = propose_trade(league.pk, [proposer.pk, partner.pk], [pick_asset(make_pick(proposer), partner)])
	_act(client_for(partner), "accept", trade)

	response = _act(client_for(voter), "vote", trade, vote="approve")

	assert response.status_code == status.HTTP_200_OK
	assert response.data == {
		"votes_for": 1,
		"votes_against": 0,
		"veto_threshold": 1,
		"eligible_voters": 1,
		"status": "accepted",
	}


# ============================================================================
# CAP AND HISTORY
# ============================================================================


def test_cap_summary_for_a_season(client_for, team_a, make_contract):
	make_contract(team_a, 30)

	response = client_for(team_a).get(f"/api/cap/teams/{team_a.pk}/summary/", {"season": 2026})

	assert response.status_code == status.HTTP_200_OK
	assert Decimal(response.data["cap_room"]) == Decimal(70)
	assert Decimal(response.data["committed_salary"]) == Decimal(30)


def test_trade_history_by_number(client_for, league, team_a, team_b, pending_trade):
	_act(client_for(team_b), "accept", pending_trade)

	number = format_trade_number(timezone.now().year, 1)
	response = client_for(team_a).get(f"/api/trade-history/number/{number}/", {"league": league.pk})

	assert response.status_code == status.HTTP_200_OK
	assert response.data["team1_name"] == "Team A"
	assert response.data["team2_received"][0]["kind"] == "pick"


# ============================================================================
# LEAGUE AND TEAM ADMINISTRATION
# ============================================================================


def test_managers_cannot_take_over_another_team(client_for, team_a, team_b):
	response = client_for(team_a).patch(f"/api/teams/{team_b.pk}/", {"owner": team_a.owner_id}, format="json")
	team_b.refresh_from_db()

	assert response.status_code == status.HTTP_403_FORBIDDEN
	assert team_b.owner_id != team_a.owner_id


def test_managers_cannot_reassign_their_own_team(client_for, team_a, team_b, make_league):
	other_league = make_league()

	response = client_for(team_a).patch(
		f"/api/teams/{team_a.pk}/",
		{"name": "Team Alpha", "owner": team_b.owner_id, "league": other_league.pk},
		format="json",
	)
	team_a.refresh_from_db()

	assert response.status_code == status.HTTP_200_OK
	assert team_a.name == "Team Alpha"
	assert team_a.owner_id != team_b.owner_id
	assert team_a.league_id != other_league.pk


def test_only_staff_create_teams(client_for, league, team_a):
	response = client_for(team_a).post("/api/teams/", {"name": "Team Z", "league": league.pk}, format="json")

	assert response.status_code == status.HTTP_403_FORBIDDEN


def test_league_settings_are_changed_by_commissioners_only(client_for, league, team_a, team_b, make_commissioner):
	make_commissioner(team_b)

	denied = client_for(team_a).patch(f"/api/leagues/{league.pk}/", {"salary_cap": "1.00"}, format="json")
	allowed = client_for(team_b).patch(f"/api/leagues/{league.pk}/", {"trade_approval_mode": "league_vote"}, format="json")
	league.refresh_from_db()

	assert denied.status_code == status.HTTP_403_FORBIDDEN
	assert allowed.status_code == status.HTTP_200_OK
	assert league.salary_cap == Decimal(100)
	assert league.trade_approval_mode == "league_vote"
