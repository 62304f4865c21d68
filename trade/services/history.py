import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from django.db.models import Q, QuerySet

from core.models import League
from trade.enums.asset_kinds import AssetKinds
from trade.exceptions import TradeNotFound
from trade.models import TradeAsset, TradeHistoryRecord
from trade.types.history_items import ReceivedItem

if TYPE_CHECKING:
	from trade.models import Trade

logger = logging.getLogger(__name__)


def format_trade_number(year: int, sequence: int) -> str:
	"""
	Format a trade number as ``YY.NN``.

	Args:
		year (int): Calendar year of the trade.
		sequence (int): Position of the trade within its league and year, from 1.

	Returns:
		str: The trade number.

	Example:
		>>> format_trade_number(2026, 3)
		'26.03'
	"""
	return f"{year % 100:02d}.{sequence:02d}"


def describe_received_item(asset: TradeAsset) -> ReceivedItem:
	"""
	Describe an asset the way trade history pages show it.

	Args:
		asset (TradeAsset): The executed asset.

	Returns:
		ReceivedItem: The display item.
	"""
	if asset.asset_type == AssetKinds.CONTRACT:
		contract = asset.contract

		return {
			"kind": "player",
			"name": contract.player.full_name,
			"position": contract.player.position,
			"salary": float(contract.salary),
			"years_left": contract.years_remaining,
		}

	if asset.asset_type == AssetKinds.DRAFT_PICK:
		pick = asset.draft_pick

		return {
			"kind": "pick",
			"name": f"{pick.season} {pick.round_label} ({pick.original_team.display_name})",
			"season": pick.season,
			"round": pick.round_label,
			"pick_number": pick.pick_number,
			"original_owner": pick.original_team.display_name,
		}

	return {
		"kind": "cap",
		"name": f"${asset.cap_amount} cap space ({asset.cap_year})",
		"cap_amount": float(asset.cap_amount),
		"cap_year": asset.cap_year,
	}


class TradeHistoryRecorder:
	"""Writes the numbered history record of a completed trade."""

	def record(self, trade: "Trade", now: datetime) -> TradeHistoryRecord:
		"""
		Create the history record of a trade that just executed.

		Only the first two participants, in the order they joined the trade, get a
		column; assets received by any further team are left out of the record.

		Args:
			trade (Trade): The executed trade.
			now (datetime): Completion time; its year numbers the record.

		Returns:
			TradeHistoryRecord: The created record.
		"""
		year = now.year
		# Holding the league row serializes numbering between concurrent completions
		League.objects.select_for_update().get(pk=trade.league_id)
		sequence = TradeHistoryRecord.objects.filter(league_id=trade.league_id, trade_year=year).count() + 1

		team1, team2 = [participant.team for participant in trade.participants.select_related("team").order_by("id")[:2]]
		received: dict[int, list[ReceivedItem]] = {team1.pk: [], team2.pk: []}

		assets = trade.assets.select_related(
			"contract__player",
			"draft_pick__original_team",
		).order_by("id")

		for asset in assets:
			if asset.to_team_id in received:
				received[asset.to_team_id].append(describe_received_item(asset))

		record = TradeHistoryRecord.objects.create(
			league_id=trade.league_id,
			trade=trade,
			trade_number=format_trade_number(year, sequence),
			trade_year=year,
			team1=team1,
			team1_name=team1.name,
			team1_received=received[team1.pk],
			team2=team2,
			team2_name=team2.name,
			team2_received=received[team2.pk],
			trade_date=now.date(),
			notes=trade.notes,
		)

		logger.info("Recorded trade %s as %s", trade.pk, record.trade_number)

		return record


def search_history(
	league_id: int,
	*,
	year: Optional[int] = None,
	team_id: Optional[int] = None,
	team_name: Optional[str] = None,
) -> QuerySet[TradeHistoryRecord]:
	"""
	Search a league's trade history, newest first.

	Args:
		league_id (int): The league.
		year (Optional[int]): Only trades of this calendar year.
		team_id (Optional[int]): Only trades this team took part in.
		team_name (Optional[str]): Only trades with a team whose name contains this text.

	Returns:
		QuerySet[TradeHistoryRecord]: The matching records.
	"""
	records = TradeHistoryRecord.objects.filter(league_id=league_id)

	if year is not None:
		records = records.filter(trade_year=year)

	if team_id is not None:
		records = records.filter(Q(team1_id=team_id) | Q(team2_id=team_id))

	if team_name:
		records = records.filter(Q(team1_name__icontains=team_name) | Q(team2_name__icontains=team_name))

	return records.order_by("-trade_year", "-created_at", "-id")


def get_history_years(league_id: int) -> list[int]:
	"""Years with at least one recorded trade, newest first."""  # noqa: DOC201
	return list(
		TradeHistoryRecord.objects.filter(league_id=league_id)
		.order_by("-trade_year")
		.values_list("trade_year", flat=True)
		.distinct(),
	)


def get_history_team_names(league_id: int) -> list[str]:
	"""Every team name that appears in a league's trade history, sorted."""  # noqa: DOC201
	records = TradeHistoryRecord.objects.filter(league_id=league_id)
	names = set(records.values_list("team1_name", flat=True)) | set(records.values_list("team2_name", flat=True))

	return sorted(names)


def get_history_record(league_id: int, trade_number: str) -> TradeHistoryRecord:
	"""
	Get a history record by its trade number.

	Raises:
		TradeNotFound: If the league has no trade with that number.

	Returns:
		TradeHistoryRecord: The record.
	"""
	try:
		return TradeHistoryRecord.objects.get(league_id=league_id, trade_number=trade_number)

	except TradeHistoryRecord.DoesNotExist as e:
		raise TradeNotFound(f"Trade {trade_number} not found") from e
