"""Entry points of the trade lifecycle, addressed by ids.

Views and commands call these functions; they look up the rows involved and hand
over to the state machine on ``Trade``.
"""

import logging
from datetime import datetime
from typing import Any, Optional

from django.db.models import Prefetch, Q, QuerySet
from django.utils import timezone

from core.models import League, Team
from trade.enums.trade_statuses import TradeStatuses
from trade.exceptions import InvalidTradeState, LeagueNotFound, TradeNotFound, TradeValidationError
from trade.models import Trade, TradeAsset, TradeParticipant
from trade.services.proposal import propose_trade
from trade.types.history_items import VoteTally

logger = logging.getLogger(__name__)

PAST_FILTER = "past"

# No team has this id, so a viewer set to it takes part in no trade
NO_VIEWER_TEAM = 0

__all__ = [
	"approve_trade",
	"cancel_trade",
	"expire_trades",
	"find_expired_trades",
	"get_trade",
	"list_trades",
	"propose_trade",
	"respond_to_trade",
	"vote_on_trade",
	"withdraw_trade",
]


def _get_trade(trade_id: Any) -> Trade:  # noqa: ANN401
	try:
		return Trade.objects.select_related("league", "proposer").get(pk=trade_id)

	except (Trade.DoesNotExist, TypeError, ValueError) as e:
		raise TradeNotFound(f"Trade {trade_id} not found") from e


def _get_team(team_id: Any) -> Team:  # noqa: ANN401
	if team_id is None:
		raise TradeValidationError("team_id is required.")

	try:
		return Team.objects.get(pk=team_id)

	except (Team.DoesNotExist, TypeError, ValueError) as e:
		raise TradeValidationError(f"Team {team_id} not found.") from e


def respond_to_trade(trade_id: int, team_id: int, decision: str, *, now: Optional[datetime] = None) -> Trade:
	"""
	Accept or reject a trade on behalf of a participant.

	Args:
		trade_id (int): The trade.
		team_id (int): The responding team.
		decision (str): ``accept`` or ``reject``.
		now (Optional[datetime]): Time of the response.

	Returns:
		Trade: The trade after the response.
	"""
	trade = _get_trade(trade_id)
	trade.respond(_get_team(team_id), decision, now=now)

	return trade


def approve_trade(trade_id: int, commissioner_team_id: int, *, now: Optional[datetime] = None) -> Trade:
	"""Approve an accepted trade as a commissioner of its league, executing it."""  # noqa: DOC201
	trade = _get_trade(trade_id)
	trade.approve_as_commissioner(_get_team(commissioner_team_id), now=now)

	return trade


def vote_on_trade(trade_id: int, team_id: int, vote: str, *, now: Optional[datetime] = None) -> VoteTally:
	"""
	Cast a league vote on an accepted trade.

	Args:
		trade_id (int): The trade.
		team_id (int): The voting, non-participant team.
		vote (str): ``approve`` or ``veto``.
		now (Optional[datetime]): Time of the vote.

	Returns:
		VoteTally: Counts after the vote, with the veto threshold and eligible voters.
	"""
	trade = _get_trade(trade_id)

	return trade.record_vote(_get_team(team_id), vote, now=now)


def cancel_trade(trade_id: int, *, now: Optional[datetime] = None) -> Trade:
	"""Cancel a pending trade; any caller may do so."""  # noqa: DOC201
	trade = _get_trade(trade_id)
	trade.cancel(now=now)

	return trade


def withdraw_trade(trade_id: int, team_id: int, *, now: Optional[datetime] = None) -> Trade:
	"""Withdraw a pending trade as its proposer."""  # noqa: DOC201
	trade = _get_trade(trade_id)
	trade.withdraw(_get_team(team_id), now=now)

	return trade


def find_expired_trades(*, now: Optional[datetime] = None, league_id: Optional[int] = None) -> QuerySet[Trade]:
	"""Pending trades whose expiration time has passed, oldest deadline first."""  # noqa: DOC201
	trades = Trade.objects.filter(status=TradeStatuses.PENDING, expires_at__lt=now or timezone.now())

	if league_id is not None:
		trades = trades.filter(league_id=league_id)

	return trades.order_by("expires_at", "id")


def expire_trades(*, now: Optional[datetime] = None, league_id: Optional[int] = None) -> list[int]:
	"""
	Expire every pending trade whose expiration time has passed.

	Args:
		now (Optional[datetime]): Reference time.
		league_id (Optional[int]): Only sweep this league.

	Returns:
		list[int]: Ids of the expired trades.
	"""
	now = now or timezone.now()
	expired = []

	for trade in find_expired_trades(now=now, league_id=league_id):
		try:
			trade.expire(now=now)

		except InvalidTradeState:
			# Resolved by another request since it was listed
			logger.info("Trade %s was resolved before it could expire", trade.pk)
			continue

		expired.append(trade.pk)

	logger.info("Expired %s trades", len(expired))

	return expired


def _with_details(trades: QuerySet[Trade]) -> QuerySet[Trade]:
	return trades.select_related("league", "proposer", "commissioner_approved_by").prefetch_related(
		Prefetch("participants", queryset=TradeParticipant.objects.select_related("team").order_by("id")),
		Prefetch(
			"assets",
			queryset=TradeAsset.objects.select_related(
				"from_team",
				"to_team",
				"contract__player",
				"draft_pick__original_team",
			).order_by("id"),
		),
		"votes__team",
	)


def list_trades(
	league_id: int,
	*,
	team_id: Optional[int] = None,
	status: Optional[str] = None,
) -> QuerySet[Trade]:
	"""
	List a league's trades, newest first.

	When ``team_id`` is given, pending trades are only listed if that team takes
	part in them; trades in any other status are visible to everyone. The
	``past`` status filter selects trades of the current season that fell
	through (rejected, cancelled or expired).

	Args:
		league_id (int): The league.
		team_id (Optional[int]): The viewing team.
		status (Optional[str]): A trade status, or ``past``.

	Raises:
		LeagueNotFound: If the league does not exist.
		TradeValidationError: If the status filter is unknown.

	Returns:
		QuerySet[Trade]: The visible trades.
	"""
	league = League.objects.filter(pk=league_id).first()

	if league is None:
		raise LeagueNotFound(f"League {league_id} not found")

	trades = Trade.objects.filter(league=league)

	if status == PAST_FILTER:
		trades = trades.filter(
			status__in=TradeStatuses.get_past_statuses(),
			created_at__year=league.current_season,
		)

	elif status:
		if status not in TradeStatuses.values():
			raise TradeValidationError(f"Unknown trade status: {status}")

		trades = trades.filter(status=status)

	if team_id is not None:
		participating = TradeParticipant.objects.filter(team_id=team_id).values("trade_id")
		trades = trades.filter(~Q(status=TradeStatuses.PENDING) | Q(pk__in=participating))

	return _with_details(trades).order_by("-created_at", "-id")


def get_trade(trade_id: int) -> Trade:
	"""
	Get a trade with its participants, assets and votes loaded.

	Raises:
		TradeNotFound: If the trade does not exist.

	Returns:
		Trade: The trade.
	"""
	try:
		return _with_details(Trade.objects.all()).get(pk=trade_id)

	except (Trade.DoesNotExist, TypeError, ValueError) as e:
		raise TradeNotFound(f"Trade {trade_id} not found") from e
