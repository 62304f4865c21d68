import pytest
from django.utils import timezone

from trade.exceptions import LeagueNotFound, TradeNotFound, TradeValidationError
from trade.models import TradeHistoryRecord
from trade.services.history import get_history_record, get_history_team_names, get_history_years, search_history
from trade.services.proposal import propose_trade
from trade.services.trades import cancel_trade, get_trade, list_trades, respond_to_trade

from payloads import pick_asset


@pytest.fixture
def current_league(make_league):
	return make_league(current_season=timezone.now().year)


@pytest.fixture
def teams(current_league, make_team):
	return [make_team(current_league, name) for name in ("Gridiron", "Blitz", "Audible")]


def _propose(league, sender, receiver, make_pick, season):
	return propose_trade(league.pk, [sender.pk, receiver.pk], [pick_asset(make_pick(sender, season=season), receiver)])


# ============================================================================
# TRADE LISTING
# ============================================================================


def test_pending_trades_are_only_listed_for_their_participants(current_league, teams, make_pick):
	gridiron, blitz, audible = teams
	trade = _propose(current_league, gridiron, blitz, make_pick, 2027)

	assert list(list_trades(current_league.pk, team_id=blitz.pk)) == [trade]
	assert list(list_trades(current_league.pk, team_id=audible.pk)) == []
	assert list(list_trades(current_league.pk)) == [trade]


def test_resolved_trades_are_listed_for_everyone(current_league, teams, make_pick):
	gridiron, blitz, audible = teams
	trade = _propose(current_league, gridiron, blitz, make_pick, 2027)
	cancel_trade(trade.pk)

	assert list(list_trades(current_league.pk, team_id=audible.pk)) == [trade]


def test_trades_are_listed_newest_first(current_league, teams, make_pick):
	gridiron, blitz, _ = teams
	first = _propose(current_league, gridiron, blitz, make_pick, 2027)
	second = _propose(current_league, gridiron, blitz, make_pick, 2028)

	assert list(list_trades(current_league.pk)) == [second, first]


def test_status_filter(current_league, teams, make_pick):
	gridiron, blitz, _ = teams
	completed = _propose(current_league, gridiron, blitz, make_pick, 2027)
	respond_to_trade(completed.pk, blitz.pk, "accept")
	pending = _propose(current_league, gridiron, blitz, make_pick, 2028)

	assert list(list_trades(current_league.pk, status="completed")) == [completed]
	assert list(list_trades(current_league.pk, status="pending")) == [pending]


def test_past_filter_selects_failed_trades_of_the_current_season(current_league, teams, make_pick):
	gridiron, blitz, audible = teams
	cancelled = _propose(current_league, gridiron, blitz, make_pick, 2027)
	cancel_trade(cancelled.pk)
	rejected = _propose(current_league, gridiron, audible, make_pick, 2028)
	respond_to_trade(rejected.pk, audible.pk, "reject")
	completed = _propose(current_league, blitz, audible, make_pick, 2027)
	respond_to_trade(completed.pk, audible.pk, "accept")
	_propose(current_league, blitz, gridiron, make_pick, 2028)

	assert set(list_trades(current_league.pk, status="past")) == {cancelled, rejected}


def test_past_filter_ignores_other_seasons(make_league, make_team, make_pick):
	league = make_league(current_season=timezone.now().year - 1)
	sender, receiver = make_team(league), make_team(league)
	trade = _propose(league, sender, receiver, make_pick, 2027)
	cancel_trade(trade.pk)

	assert list(list_trades(league.pk, status="past")) == []


def test_unknown_status_filter_is_rejected(current_league):
	with pytest.raises(TradeValidationError):
		list_trades(current_league.pk, status="vetoed")


def test_unknown_league(db):
	with pytest.raises(LeagueNotFound):
		list_trades(987654)


def test_get_trade_loads_participants_and_assets(current_league, teams, make_pick):
	gridiron, blitz, _ = teams
	trade = _propose(current_league, gridiron, blitz, make_pick, 2027)

	loaded = get_trade(trade.pk)

	assert [participant.team for participant in loaded.participants.all()] == [gridiron, blitz]
	assert [asset.asset_type for asset in loaded.assets.all()] == ["draft_pick"]


@pytest.mark.parametrize("trade_id", [987654, "abc", None])
def test_get_unknown_trade(db, trade_id):
	with pytest.raises(TradeNotFound):
		get_trade(trade_id)


# ============================================================================
# TRADE HISTORY
# ============================================================================


@pytest.fixture
def history(current_league, teams, make_pick, now):
	gridiron, blitz, audible = teams
	records = []

	for sender, receiver, season in ((gridiron, blitz, 2027), (blitz, audible, 2028), (audible, gridiron, 2029)):
		trade = _propose(current_league, sender, receiver, make_pick, season)
		respond_to_trade(trade.pk, receiver.pk, "accept", now=now)
		records.append(trade.history_record)

	return records


def test_history_is_searchable_by_team(current_league, teams, history):
	gridiron, _, _ = teams

	assert list(search_history(current_league.pk, team_id=gridiron.pk)) == [history[2], history[0]]
	assert list(search_history(current_league.pk, team_name="bli")) == [history[1], history[0]]


def test_history_is_searchable_by_year(current_league, history):
	assert list(search_history(current_league.pk, year=2026)) == history[::-1]
	assert list(search_history(current_league.pk, year=2025)) == []


def test_history_years_and_team_names(current_league, history):
	assert get_history_years(current_league.pk) == [2026]
	assert get_history_team_names(current_league.pk) == ["Audible", "Blitz", "Gridiron"]


def test_history_record_lookup_by_number(current_league, history):
	assert get_history_record(current_league.pk, "26.02") == history[1]

	with pytest.raises(TradeNotFound):
		get_history_record(current_league.pk, "26.04")


def test_history_keeps_completion_order_past_ninety_nine_trades(current_league, now):
	for number in ("26.98", "26.99", "26.100"):
		TradeHistoryRecord.objects.create(
			league=current_league,
			trade_number=number,
			trade_year=2026,
			team1_name="Gridiron",
			team2_name="Blitz",
			trade_date=now.date(),
		)

	numbers = [record.trade_number for record in search_history(current_league.pk)]

	assert numbers == ["26.100", "26.99", "26.98"]
