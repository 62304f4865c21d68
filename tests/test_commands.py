from datetime import timedelta
from io import StringIO

from django.core.management import call_command
from django.utils import timezone

from trade.services.proposal import propose_trade

from payloads import pick_asset


def _run(*args):
	out = StringIO()
	call_command("expire_trades", *args, stdout=out)
	return out.getvalue()


def test_expires_overdue_trades(league, team_a, team_b, make_pick):
	overdue = propose_trade(
		league.pk,
		[team_a.pk, team_b.pk],
		[pick_asset(make_pick(team_a, season=2027), team_b)],
		expires_in="1h",
		now=timezone.now() - timedelta(days=3),
	)
	open_trade = propose_trade(league.pk, [team_a.pk, team_b.pk], [pick_asset(make_pick(team_a, season=2028), team_b)])

	output = _run()
	overdue.refresh_from_db()
	open_trade.refresh_from_db()

	assert "Expired 1 trades" in output
	assert overdue.status == "expired"
	assert open_trade.status == "pending"


def test_league_option_limits_the_sweep(make_league, make_team, make_pick):
	past = timezone.now() - timedelta(days=3)
	trades = []

	for league in (make_league(), make_league()):
		sender, receiver = make_team(league), make_team(league)
		trades.append(
			propose_trade(league.pk, [sender.pk, receiver.pk], [pick_asset(make_pick(sender), receiver)], expires_in="1h", now=past),
		)

	_run("--league", str(trades[0].league_id))

	for trade in trades:
		trade.refresh_from_db()

	assert [trade.status for trade in trades] == ["expired", "pending"]


def test_verbose_reports_an_empty_sweep(db):
	assert "No expired trades found" in _run("--verbose")


def test_dry_run_changes_nothing(league, team_a, team_b, make_pick):
	trade = propose_trade(
		league.pk,
		[team_a.pk, team_b.pk],
		[pick_asset(make_pick(team_a), team_b)],
		expires_in="1h",
		now=timezone.now() - timedelta(days=3),
	)

	output = _run("--dry-run")
	trade.refresh_from_db()

	assert f"Would expire trade {trade.pk}" in output
	assert "1 trades would expire" in output
	assert trade.status == "pending"
