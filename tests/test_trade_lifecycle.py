from datetime import timedelta
from decimal import Decimal

import pytest

from cap.services.cap_room import get_cap_room
from trade.exceptions import (
	AssetNotOwned,
	InsufficientCapRoom,
	InvalidTradeState,
	NotAParticipantOrAlreadyResponded,
	TradePermissionDenied,
	TradeValidationError,
)
from trade.models import TradeHistoryRecord
from trade.services.proposal import propose_trade
from trade.services.trades import (
	approve_trade,
	cancel_trade,
	respond_to_trade,
	withdraw_trade,
)

from payloads import contract_asset, pick_asset


@pytest.fixture
def swap(league, team_a, team_b, make_contract, make_pick, now):
	"""Team A sends a 20 salary contract, Team B sends a first round pick."""
	contract = make_contract(team_a, 20, name="Deebo Samuel")
	make_contract(team_a, 60)
	pick = make_pick(team_b)

	trade = propose_trade(
		league.pk,
		[team_a.pk, team_b.pk],
		[contract_asset(contract, team_b), pick_asset(pick, team_a)],
		now=now,
	)

	return trade, contract, pick


# ============================================================================
# AUTO APPROVAL
# ============================================================================


def test_auto_mode_completes_when_everyone_accepts(swap, team_a, team_b, now):
	trade, contract, pick = swap

	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)

	trade.refresh_from_db()
	contract.refresh_from_db()
	pick.refresh_from_db()

	assert trade.status == "completed"
	assert trade.completed_at == now
	assert contract.team == team_b
	assert contract.status == "active"
	assert pick.current_team == team_a
	assert TradeHistoryRecord.objects.get(trade=trade).trade_number == "26.01"


def test_sender_room_is_freed_and_receiver_room_used(swap, team_a, team_b, now):
	trade, _, _ = swap
	room_a, room_b = get_cap_room(team_a, 2026), get_cap_room(team_b, 2026)

	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)

	assert get_cap_room(team_a, 2026) == room_a + Decimal(20)
	assert get_cap_room(team_b, 2026) == room_b - Decimal(20)


def test_trade_waits_for_every_participant(league, team_a, team_b, team_c, make_pick, now):
	pick = make_pick(team_a)
	trade = propose_trade(league.pk, [team_a.pk, team_b.pk, team_c.pk], [pick_asset(pick, team_b)], now=now)

	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)
	trade.refresh_from_db()

	assert trade.status == "pending"

	respond_to_trade(trade.pk, team_c.pk, "accept", now=now)
	trade.refresh_from_db()

	assert trade.status == "completed"


def test_double_accept_is_rejected(league, team_a, team_b, team_c, make_pick, now):
	trade = propose_trade(league.pk, [team_a.pk, team_b.pk, team_c.pk], [pick_asset(make_pick(team_a), team_b)], now=now)

	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)

	with pytest.raises(NotAParticipantOrAlreadyResponded):
		respond_to_trade(trade.pk, team_b.pk, "accept", now=now)


def test_non_participant_cannot_accept(swap, team_c, now):
	trade, _, _ = swap

	with pytest.raises(NotAParticipantOrAlreadyResponded):
		respond_to_trade(trade.pk, team_c.pk, "accept", now=now)


def test_invalid_decision(swap, team_b, now):
	trade, _, _ = swap

	with pytest.raises(TradeValidationError, match="Invalid decision"):
		respond_to_trade(trade.pk, team_b.pk, "maybe", now=now)


def test_completed_trade_cannot_be_accepted_again(swap, team_a, team_b, now):
	trade, _, _ = swap
	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)

	with pytest.raises(InvalidTradeState):
		respond_to_trade(trade.pk, team_a.pk, "accept", now=now)


def test_execution_revalidates_ownership_and_rolls_back(swap, team_b, team_c, now):
	trade, contract, pick = swap
	contract.team = team_c
	contract.save()

	with pytest.raises(AssetNotOwned):
		respond_to_trade(trade.pk, team_b.pk, "accept", now=now)

	trade.refresh_from_db()
	pick.refresh_from_db()

	assert trade.status == "pending"
	assert trade.participants.get(team=team_b).status == "pending"
	assert pick.current_team == team_b
	assert not trade.cap_entries.exists()


def test_execution_revalidates_cap_room(swap, team_a, team_b, make_contract, now):
	trade, contract, pick = swap
	make_contract(team_b, 90)

	with pytest.raises(InsufficientCapRoom, match="Team B"):
		respond_to_trade(trade.pk, team_b.pk, "accept", now=now)

	trade.refresh_from_db()
	contract.refresh_from_db()
	pick.refresh_from_db()

	assert trade.status == "pending"
	assert trade.participants.get(team=team_b).status == "pending"
	assert contract.team == team_a
	assert pick.current_team == team_b
	assert not trade.cap_entries.exists()
	assert not TradeHistoryRecord.objects.exists()


def test_frozen_mode_survives_league_changes(swap, league, team_b, now):
	trade, _, _ = swap
	league.trade_approval_mode = "commissioner"
	league.save()

	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)
	trade.refresh_from_db()

	assert trade.status == "completed"


# ============================================================================
# REJECTION
# ============================================================================


def test_one_rejection_rejects_a_three_team_trade(league, team_a, team_b, team_c, make_pick, now):
	trade = propose_trade(league.pk, [team_a.pk, team_b.pk, team_c.pk], [pick_asset(make_pick(team_a), team_b)], now=now)

	respond_to_trade(trade.pk, team_c.pk, "reject", now=now)
	trade.refresh_from_db()

	assert trade.status == "rejected"
	assert trade.participants.get(team=team_b).status == "pending"
	assert trade.participants.get(team=team_c).status == "rejected"
	assert team_a.owner.notifications.filter(level="warning").exists()


def test_rejected_trade_cannot_be_accepted(swap, team_b, now):
	trade, _, _ = swap
	respond_to_trade(trade.pk, team_b.pk, "reject", now=now)

	with pytest.raises(InvalidTradeState):
		respond_to_trade(trade.pk, team_b.pk, "accept", now=now)


def test_non_participant_cannot_reject(swap, team_c, now):
	trade, _, _ = swap

	with pytest.raises(NotAParticipantOrAlreadyResponded):
		respond_to_trade(trade.pk, team_c.pk, "reject", now=now)


# ============================================================================
# COMMISSIONER APPROVAL
# ============================================================================


@pytest.fixture
def commissioner_trade(make_league, make_team, make_pick, make_commissioner, now):
	league = make_league(trade_approval_mode="commissioner")
	team_a, team_b, commissioner = make_team(league), make_team(league), make_team(league)
	make_commissioner(commissioner)

	trade = propose_trade(league.pk, [team_a.pk, team_b.pk], [pick_asset(make_pick(team_a), team_b)], now=now)

	return trade, team_b, commissioner


def test_commissioner_mode_parks_trade_until_approved(commissioner_trade, now):
	trade, team_b, commissioner = commissioner_trade

	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)
	trade.refresh_from_db()

	assert trade.status == "accepted"
	assert trade.assets.get().draft_pick.current_team != team_b
	assert commissioner.owner.notifications.filter(message__icontains="commissioner").exists()

	approved_at = now + timedelta(hours=2)
	approve_trade(trade.pk, commissioner.pk, now=approved_at)
	trade.refresh_from_db()

	assert trade.status == "completed"
	assert trade.commissioner_approved_by == commissioner
	assert trade.commissioner_approved_at == approved_at
	assert trade.assets.get().draft_pick.current_team == team_b


def test_only_commissioners_approve(commissioner_trade, now):
	trade, team_b, _ = commissioner_trade
	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)

	with pytest.raises(TradePermissionDenied):
		approve_trade(trade.pk, team_b.pk, now=now)


def test_pending_trade_cannot_be_approved(commissioner_trade, now):
	trade, _, commissioner = commissioner_trade

	with pytest.raises(InvalidTradeState):
		approve_trade(trade.pk, commissioner.pk, now=now)


def test_participant_backs_out_while_awaiting_approval(commissioner_trade, now):
	trade, team_b, commissioner = commissioner_trade
	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)

	respond_to_trade(trade.pk, team_b.pk, "reject", now=now + timedelta(hours=1))
	trade.refresh_from_db()

	assert trade.status == "rejected"
	assert trade.participants.get(team=team_b).status == "rejected"
	assert trade.assets.get().draft_pick.current_team != team_b

	with pytest.raises(InvalidTradeState):
		approve_trade(trade.pk, commissioner.pk, now=now)


def test_completed_trade_cannot_be_rejected(swap, team_b, now):
	trade, _, _ = swap
	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)

	with pytest.raises(InvalidTradeState):
		respond_to_trade(trade.pk, team_b.pk, "reject", now=now)


# ============================================================================
# CANCEL AND WITHDRAW
# ============================================================================


def test_anyone_can_cancel_a_pending_trade(swap, now):
	trade, _, _ = swap

	cancel_trade(trade.pk, now=now)
	trade.refresh_from_db()

	assert trade.status == "cancelled"


def test_cancelling_a_resolved_trade_fails(swap, team_b, now):
	trade, _, _ = swap
	respond_to_trade(trade.pk, team_b.pk, "reject", now=now)

	with pytest.raises(InvalidTradeState):
		cancel_trade(trade.pk, now=now)


def test_proposer_withdraws(swap, team_a, now):
	trade, _, _ = swap

	withdraw_trade(trade.pk, team_a.pk, now=now)
	trade.refresh_from_db()

	assert trade.status == "cancelled"


def test_only_the_proposer_withdraws(swap, team_b, now):
	trade, _, _ = swap

	with pytest.raises(TradePermissionDenied):
		withdraw_trade(trade.pk, team_b.pk, now=now)


def test_withdrawing_a_completed_trade_fails(swap, team_a, team_b, now):
	trade, _, _ = swap
	respond_to_trade(trade.pk, team_b.pk, "accept", now=now)

	with pytest.raises(InvalidTradeState):
		withdraw_trade(trade.pk, team_a.pk, now=now)


# ============================================================================
# EXPIRATION
# ============================================================================


def test_expire_only_after_expiration_time(swap, now):
	trade, _, _ = swap

	assert not trade.is_expired(now)

	with pytest.raises(InvalidTradeState):
		trade.expire(now=now)

	later = now + timedelta(hours=25)

	assert trade.is_expired(later)

	trade.expire(now=later)
	trade.refresh_from_db()

	assert trade.status == "expired"
