"""What happens once every participant has accepted a trade.

One policy per approval mode. The trade picks its policy from the settings it
froze at proposal time, never from the league's current settings.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from trade.enums.approval_modes import ApprovalModes
from trade.types.approval_snapshot import ApprovalSnapshot

if TYPE_CHECKING:
	from trade.models import Trade


class ApprovalPolicy:
	"""Base policy: hold the trade as ``accepted`` until someone approves it."""

	mode: ApprovalModes

	def on_all_accepted(self, trade: "Trade", now: datetime) -> None:
		"""
		React to the last participant accepting.

		Args:
			trade (Trade): The locked trade.
			now (datetime): Time of the last acceptance.
		"""
		trade.await_approval(now)

	def can_commissioner_approve(self) -> bool:
		"""Whether a commissioner may approve an accepted trade under this policy."""  # noqa: DOC201
		return True


class AutoApproval(ApprovalPolicy):
	"""Execute the trade as soon as every participant has accepted."""

	mode = ApprovalModes.AUTO

	def on_all_accepted(self, trade: "Trade", now: datetime) -> None:  # noqa: D102
		trade.complete(now)

	def can_commissioner_approve(self) -> bool:  # noqa: D102
		return False


class CommissionerApproval(ApprovalPolicy):
	"""Wait for a commissioner to approve."""

	mode = ApprovalModes.COMMISSIONER


class LeagueVoteApproval(ApprovalPolicy):
	"""Open a veto window; the league can veto it and a commissioner can still push it through."""

	mode = ApprovalModes.LEAGUE_VOTE


POLICIES: dict[ApprovalModes, type[ApprovalPolicy]] = {
	ApprovalModes.AUTO: AutoApproval,
	ApprovalModes.COMMISSIONER: CommissionerApproval,
	ApprovalModes.LEAGUE_VOTE: LeagueVoteApproval,
}


def get_approval_policy(snapshot: ApprovalSnapshot) -> ApprovalPolicy:
	"""
	Get the approval policy for a trade's frozen settings.

	Args:
		snapshot (ApprovalSnapshot): The trade's approval snapshot.

	Returns:
		ApprovalPolicy: The policy instance.
	"""
	return POLICIES[snapshot.approval_mode]()
