"""Applies a trade's assets to the league.

Execution runs inside the caller's transaction, with the trade row already
locked. The assets are re-validated under row locks before anything is written,
so either every asset moves or none does. Writing the history record is the one
step allowed to fail on its own: the trade still completes and the failure is
logged.
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from cap.enums.cap_transaction_types import CapTransactionTypes
from cap.services.ledger import record_entry
from core.models import Contract
from trade.exceptions import TradeValidationError
from trade.models import TradeHistoryRecord
from trade.services.asset_resolver import AssetResolver, ResolvedAssets
from trade.services.history import TradeHistoryRecorder
from trade.types.asset_movements import CapSpaceMovement, ContractMovement, DraftPickMovement

if TYPE_CHECKING:
	from trade.models import Trade

logger = logging.getLogger(__name__)


class TradeExecutionEngine:
	"""Moves contracts, picks and cap space between the teams of a trade."""

	def __init__(self, history_recorder: Optional[TradeHistoryRecorder] = None) -> None:
		self.history_recorder = history_recorder or TradeHistoryRecorder()

	def execute(self, trade: "Trade", *, now: datetime) -> Optional[TradeHistoryRecord]:
		"""
		Execute every asset of a trade.

		Args:
			trade (Trade): The locked trade.
			now (datetime): Execution time.

		Raises:
			TradeValidationError: If the trade has no assets.
			ValidationError: If an asset no longer passes ownership or cap-room checks.

		Returns:
			Optional[TradeHistoryRecord]: The history record, or None if writing it failed.
		"""
		assets = list(trade.assets.order_by("id"))

		if not assets:
			raise TradeValidationError("A trade must move at least one asset.")

		movements = [asset.payload for asset in assets]

		try:
			resolved = AssetResolver(trade.league).resolve(trade.participant_team_ids(), movements, lock=True)

		except ValidationError as e:
			logger.warning("Trade %s failed re-validation at execution: %s", trade.pk, "; ".join(e.messages))
			raise

		for asset, movement in zip(assets, movements, strict=True):
			if isinstance(movement, ContractMovement):
				self._transfer_contract(trade, resolved, movement)

			elif isinstance(movement, DraftPickMovement):
				self._transfer_pick(resolved, movement)

			elif isinstance(movement, CapSpaceMovement):
				self._transfer_cap_space(trade, resolved, movement)

			else:
				raise TradeValidationError(f"Unknown asset type on asset {asset.pk}.")

		logger.info("Executed %s assets of trade %s", len(assets), trade.pk)

		return self._record_history(trade, now)

	@staticmethod
	def _transfer_contract(trade: "Trade", resolved: ResolvedAssets, movement: ContractMovement) -> None:
		contract = resolved.contracts[movement.contract_id]
		sender = resolved.teams[movement.from_team_id]
		receiver = resolved.teams[movement.to_team_id]
		season = contract.salary_year

		contract.team = receiver
		contract.status = Contract.Status.ACTIVE
		contract.save(update_fields=["team", "status", "updated_at"])

		record_entry(
			league=trade.league,
			team=sender,
			season=season,
			transaction_type=CapTransactionTypes.CONTRACT_TRADED_OUT,
			amount=-contract.salary,
			description=f"{contract.player} traded to {receiver.name}",
			contract=contract,
			trade=trade,
		)
		record_entry(
			league=trade.league,
			team=receiver,
			season=season,
			transaction_type=CapTransactionTypes.CONTRACT_TRADED_IN,
			amount=contract.salary,
			description=f"{contract.player} acquired from {sender.name}",
			contract=contract,
			trade=trade,
		)

	@staticmethod
	def _transfer_pick(resolved: ResolvedAssets, movement: DraftPickMovement) -> None:
		pick = resolved.picks[movement.draft_pick_id]
		pick.current_team = resolved.teams[movement.to_team_id]
		pick.save(update_fields=["current_team", "updated_at"])

	@staticmethod
	def _transfer_cap_space(trade: "Trade", resolved: ResolvedAssets, movement: CapSpaceMovement) -> None:
		sender = resolved.teams[movement.from_team_id]
		receiver = resolved.teams[movement.to_team_id]

		# The sending team absorbs the amount and the receiving team is relieved of it
		record_entry(
			league=trade.league,
			team=sender,
			season=movement.cap_year,
			transaction_type=CapTransactionTypes.TRADE_CAP_HIT,
			amount=movement.cap_amount,
			description=f"Cap space sent to {receiver.name}",
			trade=trade,
		)
		record_entry(
			league=trade.league,
			team=receiver,
			season=movement.cap_year,
			transaction_type=CapTransactionTypes.TRADE_CAP_CREDIT,
			amount=-movement.cap_amount,
			description=f"Cap space received from {sender.name}",
			trade=trade,
		)

	def _record_history(self, trade: "Trade", now: datetime) -> Optional[TradeHistoryRecord]:
		try:
			with transaction.atomic():
				return self.history_recorder.record(trade, now)

		except Exception:  # noqa: BLE001
			logger.exception("Could not write the history record of trade %s", trade.pk)
			return None
