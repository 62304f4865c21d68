"""Errors raised by the trade engine.

Everything here derives from one of Django's core exceptions, so the API layer
(``dynasty.common.exceptions.domain_exception_handler``) maps them to HTTP
responses without knowing about trades: validation and policy failures become
400, permission failures 403 and missing rows 404.
"""

from typing import TYPE_CHECKING

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError

if TYPE_CHECKING:
	from core.models import Team


class TradeValidationError(ValidationError):
	"""The request is malformed: bad identifiers, missing fields or unknown values."""


class TradePolicyError(ValidationError):
	"""The request is well formed but a league rule forbids it."""


class InsufficientCapRoom(TradePolicyError):
	"""A receiving team cannot absorb a contract's salary."""

	def __init__(self, team: "Team") -> None:
		self.team = team
		super().__init__(f"{team.name} doesn't have enough cap room for this trade")


class AssetNotOwned(TradePolicyError):
	"""An asset is not currently held by the team said to be sending it."""


class NotAParticipantOrAlreadyResponded(TradePolicyError):
	"""The responding team is not part of the trade, or has already responded."""

	def __init__(self, message: str = "Not a participant or already responded") -> None:
		super().__init__(message)


class InvalidTradeState(TradePolicyError):
	"""The trade's current status does not allow the requested transition."""


class VotingClosed(TradePolicyError):
	"""The league vote deadline has passed."""

	def __init__(self, message: str = "Voting period has ended") -> None:
		super().__init__(message)


class ParticipantCannotVote(TradePolicyError):
	"""Teams in a trade do not vote on it."""

	def __init__(self, message: str = "Trade participants cannot vote") -> None:
		super().__init__(message)


class TradePermissionDenied(PermissionDenied):
	"""The caller lacks the role the action needs (commissioner, proposer)."""


class TradeNotFound(ObjectDoesNotExist):
	"""No trade with the given identifier."""


class LeagueNotFound(ObjectDoesNotExist):
	"""No league with the given identifier."""
