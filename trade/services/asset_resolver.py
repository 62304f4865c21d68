"""Validation of the assets a trade moves.

The resolver runs twice in a trade's life: when the trade is proposed, and again
right before it executes, under row locks, because contracts and picks can change
hands in between.
"""

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from cap.services.cap_room import get_cap_room
from core.models import Contract, Team
from draft.models import Pick
from trade.exceptions import AssetNotOwned, InsufficientCapRoom, TradeValidationError
from trade.types.asset_movements import AssetMovement, ContractMovement, DraftPickMovement

if TYPE_CHECKING:
	from core.models import League


@dataclass
class ResolvedAssets:
	"""Rows a set of movements refers to, keyed by id."""

	teams: dict[int, Team] = field(default_factory=dict)
	contracts: dict[int, Contract] = field(default_factory=dict)
	picks: dict[int, Pick] = field(default_factory=dict)


class AssetResolver:
	"""Checks that a set of asset movements is valid for a league right now."""

	def __init__(self, league: "League") -> None:
		self.league = league

	def resolve(
		self,
		team_ids: Sequence[int],
		movements: Sequence[AssetMovement],
		*,
		lock: bool = False,
	) -> ResolvedAssets:
		"""
		Load and validate everything a trade moves.

		Checks, in order: every movement goes between two different participants,
		every participant belongs to the league, each asset is listed once, each
		contract is active and held by its sending team, each pick is unused and held
		by its sending team, and every receiving team has cap room for the combined
		salary it takes on in each salary year.

		Args:
			team_ids (Sequence[int]): Ids of the participating teams.
			movements (Sequence[AssetMovement]): The validated movements.
			lock (bool): Lock the team, contract and pick rows for update.

		Raises:
			TradeValidationError: If an identifier is unknown or a movement is malformed.
			AssetNotOwned: If an asset is not held by its sending team.
			InsufficientCapRoom: If a receiving team cannot absorb the salary it takes on.

		Returns:
			ResolvedAssets: The loaded rows.
		"""
		participants = set(team_ids)

		for movement in movements:
			if movement.from_team_id == movement.to_team_id:
				raise TradeValidationError("An asset cannot be sent to the team it comes from.")

			if movement.from_team_id not in participants or movement.to_team_id not in participants:
				raise TradeValidationError("Every asset must move between participating teams.")

		resolved = ResolvedAssets(teams=self._load_teams(participants, lock=lock))

		contract_ids = [m.contract_id for m in movements if isinstance(m, ContractMovement)]
		pick_ids = [m.draft_pick_id for m in movements if isinstance(m, DraftPickMovement)]

		if len(set(contract_ids)) != len(contract_ids) or len(set(pick_ids)) != len(pick_ids):
			raise TradeValidationError("An asset can only be listed once per trade.")

		resolved.contracts = self._load(
			Contract.objects.select_related("player", "league"),
			contract_ids,
			lock=lock,
		)
		resolved.picks = self._load(Pick.objects.select_related("original_team"), pick_ids, lock=lock)

		incoming: dict[tuple[int, int], Decimal] = defaultdict(Decimal)

		for movement in movements:
			if isinstance(movement, ContractMovement):
				contract = self._check_contract(movement, resolved)
				incoming[movement.to_team_id, contract.salary_year] += contract.salary

			elif isinstance(movement, DraftPickMovement):
				self._check_pick(movement, resolved)

		for (team_id, season), salary in incoming.items():
			receiver = resolved.teams[team_id]

			if get_cap_room(receiver, season) < salary:
				raise InsufficientCapRoom(receiver)

		return resolved

	def _load_teams(self, team_ids: set[int], *, lock: bool) -> dict[int, Team]:
		teams = Team.objects.filter(pk__in=team_ids, league=self.league).order_by("pk")

		if lock:
			teams = teams.select_for_update()

		found = {team.pk: team for team in teams}

		if len(found) != len(team_ids):
			raise TradeValidationError("Every team in a trade must belong to the trade's league.")

		return found

	def _load(self, queryset, ids: list[int], *, lock: bool) -> dict:  # noqa: ANN001
		if not ids:
			return {}

		queryset = queryset.filter(pk__in=ids, league=self.league).order_by("pk")

		if lock:
			queryset = queryset.select_for_update(of=("self",))

		return {row.pk: row for row in queryset}

	@staticmethod
	def _check_contract(movement: ContractMovement, resolved: ResolvedAssets) -> Contract:
		contract = resolved.contracts.get(movement.contract_id)

		if contract is None:
			raise TradeValidationError(f"Contract {movement.contract_id} not found.")

		sender = resolved.teams[movement.from_team_id]

		if contract.team_id != sender.pk or not contract.is_active:
			raise AssetNotOwned(f"{sender.name} does not hold an active contract for {contract.player}.")

		return contract

	@staticmethod
	def _check_pick(movement: DraftPickMovement, resolved: ResolvedAssets) -> None:
		pick = resolved.picks.get(movement.draft_pick_id)

		if pick is None:
			raise TradeValidationError(f"Draft pick {movement.draft_pick_id} not found.")

		sender = resolved.teams[movement.from_team_id]

		if pick.current_team_id != sender.pk:
			raise AssetNotOwned(f"{sender.name} does not own the {pick.season} {pick.round_label} round pick.")

		if pick.is_used:
			raise AssetNotOwned(f"The {pick.season} {pick.round_label} round pick has already been used.")
