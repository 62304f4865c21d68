from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from django.db.models import Sum

from cap.services.ledger import dead_money
from dynasty.settings import LEAGUE_SETTINGS

if TYPE_CHECKING:
	from core.models import Team


@dataclass(frozen=True)
class CapSummary:
	"""Cap position of one team for one season."""

	team_id: int
	season: int
	salary_cap: Decimal
	committed_salary: Decimal
	dead_money: Decimal

	@property
	def cap_used(self) -> Decimal:
		return self.committed_salary + self.dead_money

	@property
	def cap_room(self) -> Decimal:
		return self.salary_cap - self.cap_used


def committed_salary(team: "Team", season: int) -> Decimal:
	"""Salary of the team's active contracts that cover the season."""  # noqa: DOC201
	return team.active_contracts(season).aggregate(total=Sum("salary"))["total"] or Decimal(0)


def get_cap_summary(team: "Team", season: int) -> CapSummary:
	"""
	Compute a team's cap position for a season.

	Cap room is the league's cap ceiling minus committed salary minus dead money,
	where dead money is the sum of room-affecting ledger entries for that season.

	Args:
		team (Team): The team.
		season (int): The cap year.

	Returns:
		CapSummary: The computed summary.
	"""
	return CapSummary(
		team_id=team.pk,
		season=season,
		salary_cap=team.league.salary_cap,
		committed_salary=committed_salary(team, season),
		dead_money=dead_money(team, season),
	)


def get_cap_room(team: "Team", season: int) -> Decimal:
	"""Cap room of a team for a season."""  # noqa: DOC201
	return get_cap_summary(team, season).cap_room


def get_cap_projection(team: "Team") -> list[CapSummary]:
	"""Cap summaries for the current season and every supported future cap year."""  # noqa: DOC201
	seasons = sorted({team.league.current_season, *LEAGUE_SETTINGS.CAP_YEARS})

	return [get_cap_summary(team, season) for season in seasons]
