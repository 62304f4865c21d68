from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from trade.enums.approval_modes import ApprovalModes

if TYPE_CHECKING:
	from core.models import League


@dataclass(frozen=True)
class ApprovalSnapshot:
	"""League approval settings frozen onto a trade when it is proposed."""

	approval_mode: ApprovalModes
	requires_commissioner_approval: bool
	requires_league_vote: bool
	vote_window_hours: int
	veto_fraction: Decimal

	@classmethod
	def from_league(cls, league: "League") -> "ApprovalSnapshot":
		"""
		Capture a league's current approval settings.

		Args:
			league (League): The league the trade is proposed in.

		Returns:
			ApprovalSnapshot: The snapshot to store on the trade.
		"""
		mode = ApprovalModes(league.trade_approval_mode)

		return cls(
			approval_mode=mode,
			requires_commissioner_approval=mode == ApprovalModes.COMMISSIONER,
			requires_league_vote=mode == ApprovalModes.LEAGUE_VOTE,
			vote_window_hours=league.vote_window_hours,
			veto_fraction=league.veto_fraction,
		)
