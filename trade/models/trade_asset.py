from typing import TYPE_CHECKING

from django.db import models
from django.db.models import Q

from trade.enums.asset_kinds import AssetKinds
from trade.exceptions import TradeValidationError
from trade.types.asset_movements import AssetMovement, CapSpaceMovement, ContractMovement, DraftPickMovement

if TYPE_CHECKING:
	from trade.models.trade import Trade


class TradeAsset(models.Model):
	"""One asset moving from one participant to another inside a trade.

	Exactly the columns of the asset's kind are set: a contract for contract
	assets, a pick for draft pick assets, an amount and a year for cap space. The
	check constraint keeps it that way at the database level too.
	"""

	trade = models.ForeignKey("trade.Trade", on_delete=models.CASCADE, related_name="assets")
	from_team = models.ForeignKey("core.Team", on_delete=models.CASCADE, related_name="trade_assets_sent")
	to_team = models.ForeignKey("core.Team", on_delete=models.CASCADE, related_name="trade_assets_received")
	asset_type = models.CharField(max_length=20, choices=AssetKinds.choices())
	contract = models.ForeignKey(
		"core.Contract",
		null=True,
		blank=True,
		on_delete=models.PROTECT,
		related_name="trade_assets",
	)
	draft_pick = models.ForeignKey(
		"draft.Pick",
		null=True,
		blank=True,
		on_delete=models.PROTECT,
		related_name="trade_assets",
	)
	cap_amount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
	cap_year = models.PositiveIntegerField(null=True, blank=True)

	created_at = models.DateTimeField(auto_now_add=True)

	class Meta:  # noqa: D106
		ordering = ("id",)
		indexes = (models.Index(fields=["from_team", "to_team"], name="trade_asset_teams_idx"),)
		constraints = (
			models.CheckConstraint(
				condition=(
					Q(
						asset_type=AssetKinds.CONTRACT.value,
						contract__isnull=False,
						draft_pick__isnull=True,
						cap_amount__isnull=True,
						cap_year__isnull=True,
					)
					| Q(
						asset_type=AssetKinds.DRAFT_PICK.value,
						contract__isnull=True,
						draft_pick__isnull=False,
						cap_amount__isnull=True,
						cap_year__isnull=True,
					)
					| Q(
						asset_type=AssetKinds.CAP_SPACE.value,
						contract__isnull=True,
						draft_pick__isnull=True,
						cap_amount__gt=0,
						cap_year__isnull=False,
					)
				),
				name="trade_asset_matches_kind",
			),
		)

	def __str__(self) -> str:
		return f"TradeAsset ({self.asset_type}) from {self.from_team_id} to {self.to_team_id}"

	@classmethod
	def from_movement(cls, trade: "Trade", movement: AssetMovement) -> "TradeAsset":
		"""
		Build an unsaved asset row for a validated movement.

		Args:
			trade (Trade): The trade the asset belongs to.
			movement (AssetMovement): The validated movement.

		Returns:
			TradeAsset: The unsaved row.
		"""
		asset = cls(
			trade=trade,
			from_team_id=movement.from_team_id,
			to_team_id=movement.to_team_id,
			asset_type=movement.kind.value,
		)

		if isinstance(movement, ContractMovement):
			asset.contract_id = movement.contract_id

		elif isinstance(movement, DraftPickMovement):
			asset.draft_pick_id = movement.draft_pick_id

		else:
			asset.cap_amount = movement.cap_amount
			asset.cap_year = movement.cap_year

		return asset

	@property
	def payload(self) -> AssetMovement:
		"""
		The asset as a typed movement.

		Raises:
			TradeValidationError: Unknown asset type.

		Returns:
			AssetMovement: The movement for this row's kind.
		"""
		if self.asset_type == AssetKinds.CONTRACT:
			return ContractMovement(self.from_team_id, self.to_team_id, self.contract_id)

		if self.asset_type == AssetKinds.DRAFT_PICK:
			return DraftPickMovement(self.from_team_id, self.to_team_id, self.draft_pick_id)

		if self.asset_type == AssetKinds.CAP_SPACE:
			return CapSpaceMovement(self.from_team_id, self.to_team_id, self.cap_amount, self.cap_year)

		raise TradeValidationError("Unknown asset type.")
