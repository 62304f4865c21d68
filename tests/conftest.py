"""
Shared fixtures for the trade engine tests.

Provides:
- A league with a 100 cap in the 2026 season
- Teams with owners, contracts and picks built through factories
- An authenticated API client
"""

from datetime import UTC, datetime
from decimal import Decimal
from itertools import count

import pytest
from rest_framework.test import APIClient

from core.models import Contract, League, LeagueCommissioner, Player, Team, User
from draft.models import Pick

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)

_sequence = count(1)


# ============================================================================
# LEAGUE FIXTURES
# ============================================================================


@pytest.fixture
def now() -> datetime:
	return NOW


@pytest.fixture
def make_league(db):
	def _make_league(**overrides) -> League:
		values = {"name": f"League {next(_sequence)}", "salary_cap": Decimal(100), "current_season": 2026}
		values.update(overrides)
		return League.objects.create(**values)

	return _make_league


@pytest.fixture
def league(make_league) -> League:
	return make_league()


@pytest.fixture
def make_team(db):
	def _make_team(league: League, name: str | None = None, *, with_owner: bool = True) -> Team:
		number = next(_sequence)
		owner = User.objects.create_user(username=f"manager{number}", password="not-a-real-password") if with_owner else None
		return Team.objects.create(league=league, name=name or f"Team {number}", owner=owner)

	return _make_team


@pytest.fixture
def team_a(league, make_team) -> Team:
	return make_team(league, "Team A")


@pytest.fixture
def team_b(league, make_team) -> Team:
	return make_team(league, "Team B")


@pytest.fixture
def team_c(league, make_team) -> Team:
	return make_team(league, "Team C")


@pytest.fixture
def make_commissioner(db):
	def _make_commissioner(team: Team) -> LeagueCommissioner:
		return LeagueCommissioner.objects.create(league=team.league, team=team)

	return _make_commissioner


# ============================================================================
# ASSET FIXTURES
# ============================================================================


@pytest.fixture
def make_contract(db):
	def _make_contract(team: Team, salary: int | str, *, name: str | None = None, years: int = 3) -> Contract:
		player = Player.objects.create(full_name=name or f"Player {next(_sequence)}", position="WR")
		return Contract.objects.create(
			league=team.league,
			player=player,
			team=team,
			salary=Decimal(salary),
			years_total=years,
			years_remaining=years,
			start_season=team.league.current_season,
			end_season=team.league.current_season + years - 1,
		)

	return _make_contract


@pytest.fixture
def make_pick(db):
	def _make_pick(team: Team, season: int = 2027, round_number: int = 1) -> Pick:
		return Pick.objects.create(
			league=team.league,
			original_team=team,
			current_team=team,
			season=season,
			round_number=round_number,
		)

	return _make_pick

# ============================================================================
# API FIXTURES
# ============================================================================


@pytest.fixture
def api_client() -> APIClient:
	return APIClient()


@pytest.fixture
def client_for(api_client):
	def _client_for(team: Team) -> APIClient:
		api_client.force_authenticate(user=team.owner)
		return api_client

	return _client_for
