from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from cap.enums.cap_transaction_types import CapTransactionTypes
from cap.models import CapLedgerEntry

if TYPE_CHECKING:
	from core.models import Contract, League, Team
	from trade.models import Trade


def record_entry(  # noqa: PLR0913
	*,
	league: "League",
	team: "Team",
	season: int,
	transaction_type: CapTransactionTypes,
	amount: Decimal,
	description: str,
	contract: Optional["Contract"] = None,
	trade: Optional["Trade"] = None,
) -> CapLedgerEntry:
	"""
	Append one entry to the cap ledger.

	Args:
		league (League): League the entry belongs to.
		team (Team): Team whose cap is affected.
		season (int): Cap year the amount applies to.
		transaction_type (CapTransactionTypes): Kind of event.
		amount (Decimal): Signed amount; positive uses cap room.
		description (str): Human-readable explanation.
		contract (Optional[Contract]): Related contract.
		trade (Optional[Trade]): Related trade.

	Returns:
		CapLedgerEntry: The inserted entry.
	"""
	return CapLedgerEntry.objects.create(
		league=league,
		team=team,
		season=season,
		transaction_type=transaction_type.value,
		amount=amount,
		description=description,
		contract=contract,
		trade=trade,
	)


def net_change(team: "Team", season: int, *, trade: Optional["Trade"] = None) -> Decimal:
	"""
	Signed sum of every ledger entry for a team and season.

	Args:
		team (Team): The team.
		season (int): The cap year.
		trade (Optional[Trade]): Restrict the sum to entries produced by this trade.

	Returns:
		Decimal: The net ledger delta.
	"""
	entries = CapLedgerEntry.objects.for_team_season(team.pk, season)

	if trade is not None:
		entries = entries.filter(trade=trade)

	return entries.total()


def dead_money(team: "Team", season: int) -> Decimal:
	"""Ledger amounts that reduce a team's cap room in a season."""  # noqa: DOC201
	return (
		CapLedgerEntry.objects.for_team_season(team.pk, season)
		.of_types(CapTransactionTypes.get_room_affecting_types())
		.total()
	)
