import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any, Optional

from django.db import transaction
from django.utils import timezone

from core.models import League, Team
from dynasty.settings import LEAGUE_SETTINGS
from trade.enums.participant_statuses import ParticipantStatuses
from trade.exceptions import LeagueNotFound, TradeValidationError
from trade.models import Trade, TradeAsset, TradeParticipant
from trade.services.asset_resolver import AssetResolver
from trade.types.approval_snapshot import ApprovalSnapshot
from trade.types.asset_movements import parse_asset_payload
from trade.types.asset_payload import AssetPayload

logger = logging.getLogger(__name__)


def get_expiration(expires_in: Optional[str], now: datetime) -> datetime:
	"""
	Compute when a trade proposed at ``now`` expires.

	Args:
		expires_in (Optional[str]): One of ``1h``, ``24h``, ``2d`` or ``1w``.
		now (datetime): Proposal time.

	Returns:
		datetime: The expiration time; unknown or missing offsets fall back to 24 hours.
	"""
	offsets = LEAGUE_SETTINGS.EXPIRATION_OFFSETS
	offset = offsets.get(expires_in) if isinstance(expires_in, str) else None

	return now + (offset or offsets[LEAGUE_SETTINGS.DEFAULT_EXPIRES_IN])


def _clean_team_ids(team_ids: Sequence[Any]) -> list[int]:
	try:
		cleaned = [int(team_id) for team_id in team_ids]

	except (TypeError, ValueError) as e:
		raise TradeValidationError("Team ids must be integers.") from e

	if len(cleaned) < 2:  # noqa: PLR2004
		raise TradeValidationError("A trade needs at least two teams.")

	if len(set(cleaned)) != len(cleaned):
		raise TradeValidationError("A team can only appear once in a trade.")

	return cleaned


def propose_trade(  # noqa: PLR0913
	league_id: int,
	team_ids: Sequence[int],
	assets: Sequence[AssetPayload],
	*,
	expires_in: Optional[str] = None,
	notes: str = "",
	proposer_team_id: Optional[int] = None,
	now: Optional[datetime] = None,
) -> Trade:
	"""
	Propose a trade.

	Validates the proposal in full before writing anything: on any error no trade
	row exists afterwards. The proposer starts out accepted, every other team
	pending, and the league's approval settings are frozen onto the trade.

	Args:
		league_id (int): League the trade happens in.
		team_ids (Sequence[int]): Participating teams, at least two and distinct.
		assets (Sequence[AssetPayload]): Asset payloads, at least one.
		expires_in (Optional[str]): Relative expiration, ``24h`` by default.
		notes (str): Free-text notes.
		proposer_team_id (Optional[int]): Proposing team, the first team by default.
		now (Optional[datetime]): Proposal time.

	Raises:
		LeagueNotFound: If the league does not exist.
		TradeValidationError: If the proposal is malformed.

	Returns:
		Trade: The created, pending trade.
	"""
	now = now or timezone.now()

	league = League.objects.filter(pk=league_id).first()

	if league is None:
		raise LeagueNotFound(f"League {league_id} not found")

	team_ids = _clean_team_ids(team_ids)

	if not assets:
		raise TradeValidationError("A trade must move at least one asset.")

	movements = [parse_asset_payload(asset) for asset in assets]

	proposer_id = int(proposer_team_id) if proposer_team_id is not None else team_ids[0]

	if proposer_id not in team_ids:
		raise TradeValidationError("The proposing team must take part in the trade.")

	AssetResolver(league).resolve(team_ids, movements)

	snapshot = ApprovalSnapshot.from_league(league)

	with transaction.atomic():
		trade = Trade.objects.create(
			league=league,
			proposer_id=proposer_id,
			notes=notes or "",
			expires_at=get_expiration(expires_in, now),
			approval_mode=snapshot.approval_mode.value,
			requires_commissioner_approval=snapshot.requires_commissioner_approval,
			requires_league_vote=snapshot.requires_league_vote,
			vote_window_hours=snapshot.vote_window_hours,
			veto_fraction=snapshot.veto_fraction,
		)

		for team_id in team_ids:
			is_proposer = team_id == proposer_id
			TradeParticipant.objects.create(
				trade=trade,
				team_id=team_id,
				status=(ParticipantStatuses.ACCEPTED if is_proposer else ParticipantStatuses.PENDING).value,
				accepted_at=now if is_proposer else None,
				responded_at=now if is_proposer else None,
			)

		TradeAsset.objects.bulk_create([TradeAsset.from_movement(trade, movement) for movement in movements])

	logger.info("Trade %s proposed in league %s by team %s", trade.pk, league.pk, proposer_id)

	trade.notify(
		"A new trade has been proposed involving your team.",
		teams=Team.objects.filter(pk__in=team_ids).exclude(pk=proposer_id),
	)

	return trade
