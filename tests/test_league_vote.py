from datetime import timedelta
from decimal import Decimal

import pytest

from trade.exceptions import InvalidTradeState, ParticipantCannotVote, TradeValidationError, VotingClosed
from trade.models import TradeVote
from trade.services.proposal import propose_trade
from trade.services.trades import approve_trade, respond_to_trade, vote_on_trade

from payloads import pick_asset


@pytest.fixture
def vote_league(make_league):
	return make_league(trade_approval_mode="league_vote", total_rosters=12)


@pytest.fixture
def league_teams(vote_league, make_team):
	return [make_team(vote_league, f"Franchise {number}") for number in range(12)]


@pytest.fixture
def voting_trade(vote_league, league_teams, make_pick, now):
	team_a, team_b = league_teams[:2]
	trade = propose_trade(vote_league.pk, [team_a.pk, team_b.pk], [pick_asset(make_pick(team_a), team_b)], now=now)
	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)
	trade.refresh_from_db()

	return trade


def test_all_accepted_opens_the_vote_window(voting_trade, now):
	assert voting_trade.status == "accepted"
	assert voting_trade.vote_deadline == now + timedelta(hours=24)


def test_fifth_veto_of_ten_eligible_voters_rejects(voting_trade, league_teams, now):
	voters = league_teams[2:7]

	for voter in voters[:4]:
		tally = vote_on_trade(voting_trade.pk, voter.pk, "veto", now=now)

		assert tally["status"] == "accepted"

	tally = vote_on_trade(voting_trade.pk, voters[4].pk, "veto", now=now)
	voting_trade.refresh_from_db()

	assert tally == {
		"votes_for": 0,
		"votes_against": 5,
		"veto_threshold": 5,
		"eligible_voters": 10,
		"status": "rejected",
	}
	assert voting_trade.status == "rejected"


def test_approvals_never_complete_the_trade(voting_trade, league_teams, now):
	for voter in league_teams[2:]:
		vote_on_trade(voting_trade.pk, voter.pk, "approve", now=now)

	voting_trade.refresh_from_db()

	assert voting_trade.status == "accepted"
	assert voting_trade.votes_for == 10


def test_changing_a_vote_moves_it_between_tallies(voting_trade, league_teams, now):
	voter = league_teams[5]

	vote_on_trade(voting_trade.pk, voter.pk, "veto", now=now)
	tally = vote_on_trade(voting_trade.pk, voter.pk, "approve", now=now)

	assert tally["votes_for"] == 1
	assert tally["votes_against"] == 0
	assert TradeVote.objects.get(trade=voting_trade, team=voter).vote == "approve"


def test_repeating_a_vote_counts_once(voting_trade, league_teams, now):
	voter = league_teams[5]

	vote_on_trade(voting_trade.pk, voter.pk, "veto", now=now)
	tally = vote_on_trade(voting_trade.pk, voter.pk, "veto", now=now)

	assert tally["votes_against"] == 1
	assert TradeVote.objects.filter(trade=voting_trade).count() == 1


def test_participants_cannot_vote(voting_trade, league_teams, now):
	with pytest.raises(ParticipantCannotVote):
		vote_on_trade(voting_trade.pk, league_teams[0].pk, "approve", now=now)


def test_votes_after_the_deadline_are_refused(voting_trade, league_teams, now):
	with pytest.raises(VotingClosed):
		vote_on_trade(voting_trade.pk, league_teams[3].pk, "veto", now=now + timedelta(hours=25))


def test_invalid_vote_value(voting_trade, league_teams, now):
	with pytest.raises(TradeValidationError, match="approve"):
		vote_on_trade(voting_trade.pk, league_teams[3].pk, "abstain", now=now)


def test_pending_trade_cannot_be_voted_on(vote_league, league_teams, make_pick, now):
	team_a, team_b = league_teams[:2]
	trade = propose_trade(vote_league.pk, [team_a.pk, team_b.pk], [pick_asset(make_pick(team_a), team_b)], now=now)

	with pytest.raises(InvalidTradeState):
		vote_on_trade(trade.pk, league_teams[4].pk, "veto", now=now)


def test_veto_fraction_is_frozen_at_proposal(vote_league, league_teams, make_pick, now):
	vote_league.veto_threshold = Decimal("0.2")
	vote_league.save()
	team_a, team_b = league_teams[:2]
	trade = propose_trade(vote_league.pk, [team_a.pk, team_b.pk], [pick_asset(make_pick(team_a), team_b)], now=now)
	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)

	vote_league.veto_threshold = Decimal("0.9")
	vote_league.save()

	tally = vote_on_trade(trade.pk, league_teams[2].pk, "veto", now=now)

	assert tally["veto_threshold"] == 2
	assert tally["status"] == "accepted"


def test_commissioner_can_push_a_voted_trade_through(voting_trade, league_teams, make_commissioner, now):
	commissioner = league_teams[11]
	make_commissioner(commissioner)

	approve_trade(voting_trade.pk, commissioner.pk, now=now)
	voting_trade.refresh_from_db()

	assert voting_trade.status == "completed"
