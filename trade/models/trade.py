"""The trade aggregate and its state machine.

A trade moves ``pending -> accepted -> completed`` (or straight from ``pending``
to ``completed`` under automatic approval) and may end early as ``rejected``,
``cancelled`` or ``expired``. Every transition locks the trade row first, so two
concurrent requests on the same trade are applied one after the other and the
loser sees the winner's status.
"""

import logging
import math
from datetime import datetime, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models, transaction
from django.utils import timezone

from core.enums.notification_levels import NotificationLevels
from core.models import Notification, Team
from trade.enums.approval_modes import ApprovalModes
from trade.enums.participant_statuses import ParticipantStatuses
from trade.enums.trade_actions import TradeActions
from trade.enums.trade_statuses import TradeStatuses
from trade.enums.votes import VoteChoices
from trade.exceptions import (
	InvalidTradeState,
	NotAParticipantOrAlreadyResponded,
	ParticipantCannotVote,
	TradePermissionDenied,
	TradeValidationError,
	VotingClosed,
)
from trade.types.approval_snapshot import ApprovalSnapshot

if TYPE_CHECKING:
	from trade.services.execution import TradeExecutionEngine
	from trade.types.history_items import VoteTally

logger = logging.getLogger(__name__)


class Trade(models.Model):
	"""A proposed exchange of assets between two or more teams of one league.

	Attributes:
		league: League the trade belongs to.
		proposer: Team that proposed the trade; it starts out accepted.
		teams: Participating teams, through ``TradeParticipant``.
		status: Overall status of the trade.
		approval_mode: League approval mode frozen at proposal time.
		requires_commissioner_approval: Frozen flag, true under commissioner mode.
		requires_league_vote: Frozen flag, true under league vote mode.
		vote_window_hours: Frozen length of the veto window.
		veto_fraction: Frozen fraction of eligible voters needed to veto.
		expires_at: When a still-pending trade lapses.
		vote_deadline: End of the veto window, set once every team accepted.
		votes_for: Approve votes cast so far.
		votes_against: Veto votes cast so far.
	"""

	league = models.ForeignKey("core.League", on_delete=models.CASCADE, related_name="trades")
	proposer = models.ForeignKey("core.Team", on_delete=models.CASCADE, related_name="trades_proposed")
	teams = models.ManyToManyField("core.Team", through="trade.TradeParticipant", related_name="trades")
	status = models.CharField(max_length=20, choices=TradeStatuses.choices(), default=TradeStatuses.PENDING.value)
	notes = models.TextField(blank=True)

	approval_mode = models.CharField(max_length=20, choices=ApprovalModes.choices())
	requires_commissioner_approval = models.BooleanField(default=False)
	requires_league_vote = models.BooleanField(default=False)
	vote_window_hours = models.PositiveIntegerField()
	veto_fraction = models.DecimalField(
		max_digits=4,
		decimal_places=3,
		validators=[MinValueValidator(Decimal(0)), MaxValueValidator(Decimal(1))],
	)

	expires_at = models.DateTimeField()
	vote_deadline = models.DateTimeField(null=True, blank=True)
	votes_for = models.PositiveIntegerField(default=0)
	votes_against = models.PositiveIntegerField(default=0)

	commissioner_approved_by = models.ForeignKey(
		"core.Team",
		on_delete=models.SET_NULL,
		null=True,
		blank=True,
		related_name="trades_approved",
	)
	commissioner_approved_at = models.DateTimeField(null=True, blank=True)
	completed_at = models.DateTimeField(null=True, blank=True)

	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:  # noqa: D106
		ordering = ("-created_at", "-id")
		indexes = (
			models.Index(fields=["league", "status"], name="trade_league_status_idx"),
			models.Index(fields=["status", "expires_at"], name="trade_status_expiry_idx"),
		)

	def __str__(self) -> str:
		return f"Trade #{self.pk} ({self.status}) proposed by {self.proposer}"

	@property
	def approval_snapshot(self) -> ApprovalSnapshot:
		"""The league approval settings as they were when the trade was proposed."""
		return ApprovalSnapshot(
			approval_mode=ApprovalModes(self.approval_mode),
			requires_commissioner_approval=self.requires_commissioner_approval,
			requires_league_vote=self.requires_league_vote,
			vote_window_hours=self.vote_window_hours,
			veto_fraction=Decimal(self.veto_fraction),
		)

	@property
	def is_terminal(self) -> bool:
		"""Whether the trade reached a status it can never leave."""
		return self.status in TradeStatuses.get_terminal_statuses()

	def is_expired(self, now: Optional[datetime] = None) -> bool:
		"""
		Check whether a pending trade's expiration time has passed.

		Args:
			now (Optional[datetime]): Reference time, defaults to the current time.

		Returns:
			bool: True if the trade is pending and past its expiration time.
		"""
		now = now or timezone.now()

		return self.status == TradeStatuses.PENDING and now > self.expires_at

	def participant_team_ids(self) -> list[int]:
		"""Ids of the participating teams, in the order they were added."""  # noqa: DOC201
		return list(self.participants.order_by("id").values_list("team_id", flat=True))

	def _lock(self) -> None:
		"""Reload the trade under a row lock; only valid inside a transaction."""
		self.refresh_from_db(from_queryset=Trade.objects.select_for_update())

	def respond(self, team: Team, decision: str, *, now: Optional[datetime] = None) -> None:
		"""
		Record a participant's response.

		Args:
			team (Team): The responding team.
			decision (str): Either ``accept`` or ``reject``.
			now (Optional[datetime]): Time of the response.

		Raises:
			TradeValidationError: If the decision is neither accept nor reject.
		"""
		if decision not in TradeActions.get_decisions():
			raise TradeValidationError(f"Invalid decision: {decision}")

		if decision == TradeActions.ACCEPT:
			self.accept(team, now=now)

		else:
			self.reject(team, now=now)

	@transaction.atomic
	def accept(self, team: Team, *, now: Optional[datetime] = None) -> None:
		"""
		Accept the trade on behalf of a participant.

		Once the last pending participant accepts, the league's approval policy
		decides what happens next: the trade executes immediately, or waits for a
		commissioner or a league vote.

		Args:
			team (Team): The accepting team.
			now (Optional[datetime]): Time of the response.

		Raises:
			InvalidTradeState: If the trade is no longer pending.
			NotAParticipantOrAlreadyResponded: If the team is not a pending participant.
		"""
		now = now or timezone.now()
		self._lock()

		if self.status != TradeStatuses.PENDING:
			raise InvalidTradeState(f"Trade is {self.status} and can no longer be accepted")

		# Only a still-pending row can flip, so a repeated accept changes nothing
		updated = self.participants.filter(team=team, status=ParticipantStatuses.PENDING).update(
			status=ParticipantStatuses.ACCEPTED.value,
			accepted_at=now,
			responded_at=now,
		)

		if not updated:
			raise NotAParticipantOrAlreadyResponded

		logger.info("Team %s accepted trade %s", team.pk, self.pk)

		if self.participants.filter(status=ParticipantStatuses.PENDING).exists():
			return

		from trade.services.approval_policy import get_approval_policy  # noqa: PLC0415

		get_approval_policy(self.approval_snapshot).on_all_accepted(self, now)

	@transaction.atomic
	def reject(self, team: Team, *, now: Optional[datetime] = None) -> None:
		"""
		Reject the trade on behalf of a participant; a single rejection ends it.

		A participant may also back out of an accepted trade that is still waiting
		for commissioner approval or a league vote.

		Args:
			team (Team): The rejecting team.
			now (Optional[datetime]): Time of the response.

		Raises:
			InvalidTradeState: If the trade is neither pending nor awaiting approval.
			NotAParticipantOrAlreadyResponded: If the team is not a participant.
		"""
		now = now or timezone.now()
		self._lock()

		if self.status not in (TradeStatuses.PENDING, TradeStatuses.ACCEPTED):
			raise InvalidTradeState(f"Trade is {self.status} and can no longer be rejected")

		updated = (
			self.participants.filter(team=team)
			.exclude(status=ParticipantStatuses.REJECTED)
			.update(status=ParticipantStatuses.REJECTED.value, responded_at=now)
		)

		if not updated:
			raise NotAParticipantOrAlreadyResponded

		self.status = TradeStatuses.REJECTED.value
		self.save(update_fields=["status", "updated_at"])

		logger.info("Team %s rejected trade %s", team.pk, self.pk)
		self.notify(f"A trade you are involved in was rejected by {team.name}.", level=NotificationLevels.WARNING)

	@transaction.atomic
	def approve_as_commissioner(self, team: Team, *, now: Optional[datetime] = None) -> None:
		"""
		Approve an accepted trade as a league commissioner, executing it.

		Args:
			team (Team): The commissioner's team.
			now (Optional[datetime]): Time of the approval.

		Raises:
			TradePermissionDenied: If the team is not a commissioner of the league.
			InvalidTradeState: If the trade is not awaiting approval.
		"""
		now = now or timezone.now()
		self._lock()

		if not self.league.is_commissioner(team):
			raise TradePermissionDenied("Only a league commissioner can approve trades")

		from trade.services.approval_policy import get_approval_policy  # noqa: PLC0415

		policy = get_approval_policy(self.approval_snapshot)

		if self.status != TradeStatuses.ACCEPTED or not policy.can_commissioner_approve():
			raise InvalidTradeState("Trade is not awaiting commissioner approval")

		self.complete(now, approved_by=team)

	@transaction.atomic
	def record_vote(self, team: Team, vote: str, *, now: Optional[datetime] = None) -> "VoteTally":
		"""
		Cast or change a non-participant team's vote on an accepted trade.

		The trade is rejected as soon as the veto count reaches the threshold
		``ceil(eligible voters * veto fraction)``, where eligible voters are the
		league's rosters minus the participating teams.

		Args:
			team (Team): The voting team.
			vote (str): Either ``approve`` or ``veto``.
			now (Optional[datetime]): Time of the vote.

		Raises:
			TradeValidationError: If the vote value is unknown or the team is in another league.
			InvalidTradeState: If the trade is not open for a league vote.
			VotingClosed: If the vote deadline has passed.
			ParticipantCannotVote: If the team is part of the trade.

		Returns:
			VoteTally: The updated counts and the trade's status.
		"""
		if vote not in VoteChoices.values():
			raise TradeValidationError("Vote must be 'approve' or 'veto'")

		now = now or timezone.now()
		self._lock()

		if self.status != TradeStatuses.ACCEPTED or not self.requires_league_vote:
			raise InvalidTradeState("Trade is not open for a league vote")

		if self.vote_deadline is not None and now > self.vote_deadline:
			raise VotingClosed

		if team.league_id != self.league_id:
			raise TradeValidationError(f"{team.name} is not in this trade's league")

		if self.participants.filter(team=team).exists():
			raise ParticipantCannotVote

		existing = self.votes.filter(team=team).first()

		if existing is None:
			self.votes.create(team=team, vote=vote)
			self._count_vote(vote, 1)

		elif existing.vote != vote:
			self._count_vote(existing.vote, -1)
			self._count_vote(vote, 1)
			existing.vote = vote
			existing.save(update_fields=["vote", "voted_at"])

		eligible_voters = max(self.league.roster_count - self.participants.count(), 0)
		veto_threshold = math.ceil(Decimal(eligible_voters) * Decimal(self.veto_fraction))
		logger.info(
			"Team %s voted %s on trade %s (%s for, %s against, threshold %s)",
			team.pk,
			vote,
			self.pk,
			self.votes_for,
			self.votes_against,
			veto_threshold,
		)

		if self.votes_against >= veto_threshold:
			self.status = TradeStatuses.REJECTED.value
			logger.info("Trade %s vetoed by league vote (%s/%s)", self.pk, self.votes_against, veto_threshold)
			self.notify("A trade you are involved in was vetoed by a league vote.", level=NotificationLevels.WARNING)

		self.save(update_fields=["status", "votes_for", "votes_against", "updated_at"])

		return {
			"votes_for": self.votes_for,
			"votes_against": self.votes_against,
			"veto_threshold": veto_threshold,
			"eligible_voters": eligible_voters,
			"status": self.status,
		}

	def _count_vote(self, vote: str, delta: int) -> None:
		if vote == VoteChoices.VETO:
			self.votes_against += delta

		else:
			self.votes_for += delta

	@transaction.atomic
	def cancel(self, *, now: Optional[datetime] = None) -> None:
		"""
		Cancel a pending trade.

		Raises:
			InvalidTradeState: If the trade is not pending.
		"""
		self._lock()

		if self.status != TradeStatuses.PENDING:
			raise InvalidTradeState("Only pending trades can be cancelled")

		self.status = TradeStatuses.CANCELLED.value
		self.save(update_fields=["status", "updated_at"])

		logger.info("Trade %s cancelled", self.pk)
		self.notify("A trade you are involved in was cancelled.")

	@transaction.atomic
	def withdraw(self, team: Team, *, now: Optional[datetime] = None) -> None:
		"""
		Withdraw a pending trade; only its proposer may do so.

		Args:
			team (Team): The team asking to withdraw.
			now (Optional[datetime]): Time of the request.

		Raises:
			InvalidTradeState: If the trade is not pending.
			TradePermissionDenied: If the team did not propose the trade.
		"""
		self._lock()

		if self.status != TradeStatuses.PENDING:
			raise InvalidTradeState("Only pending trades can be withdrawn")

		if team.pk != self.proposer_id:
			raise TradePermissionDenied("Only the proposing team can withdraw a trade")

		self.status = TradeStatuses.CANCELLED.value
		self.save(update_fields=["status", "updated_at"])

		logger.info("Trade %s withdrawn by its proposer", self.pk)
		self.notify(f"{team.name} withdrew a trade you were involved in.")

	@transaction.atomic
	def expire(self, *, now: Optional[datetime] = None) -> None:
		"""
		Mark a pending trade whose expiration time has passed as expired.

		Raises:
			InvalidTradeState: If the trade is not pending or has not expired yet.
		"""
		now = now or timezone.now()
		self._lock()

		if self.status != TradeStatuses.PENDING:
			raise InvalidTradeState("Only pending trades can expire")

		if not self.is_expired(now):
			raise InvalidTradeState("Trade has not reached its expiration time")

		self.status = TradeStatuses.EXPIRED.value
		self.save(update_fields=["status", "updated_at"])

		logger.info("Trade %s expired", self.pk)
		self.notify("A trade you are involved in expired before every team responded.")

	def await_approval(self, now: datetime) -> None:
		"""
		Move a fully accepted trade to ``accepted`` until it is approved.

		Under league vote the veto window opens now and closes after the frozen
		vote window.

		Args:
			now (datetime): Time the last participant accepted.
		"""
		self.status = TradeStatuses.ACCEPTED.value

		if self.requires_league_vote:
			self.vote_deadline = now + timedelta(hours=self.vote_window_hours)

		self.save(update_fields=["status", "vote_deadline", "updated_at"])

		if self.requires_commissioner_approval:
			commissioners = Team.objects.filter(commissioner_of__league_id=self.league_id)
			self.notify("A trade has been accepted and requires your review as a commissioner.", teams=commissioners)

		self.notify("A trade you are involved in has been accepted by all parties and awaits approval.")

	def complete(
		self,
		now: datetime,
		*,
		approved_by: Optional[Team] = None,
		engine: Optional["TradeExecutionEngine"] = None,
	) -> None:
		"""
		Execute the trade's assets and mark it completed.

		Must run inside the transaction that holds the trade's lock, so a failed
		execution leaves the trade exactly as it was.

		Args:
			now (datetime): Completion time.
			approved_by (Optional[Team]): Commissioner who approved the trade, if any.
			engine (Optional[TradeExecutionEngine]): Engine to execute with.
		"""
		from trade.services.execution import TradeExecutionEngine  # noqa: PLC0415

		(engine or TradeExecutionEngine()).execute(self, now=now)

		self.status = TradeStatuses.COMPLETED.value
		self.completed_at = now

		if approved_by is not None:
			self.commissioner_approved_by = approved_by
			self.commissioner_approved_at = now

		self.save()

		logger.info("Trade %s completed", self.pk)
		self.notify("A trade you are involved in has been completed and assets have been transferred.", level=NotificationLevels.SUCCESS)

	def notify(
		self,
		message: str,
		*,
		level: str = NotificationLevels.INFO,
		teams: Optional[models.QuerySet[Team]] = None,
	) -> None:
		"""
		Notify the owners of some teams about this trade.

		Args:
			message (str): The notification text.
			level (str): Notification level.
			teams (Optional[QuerySet[Team]]): Teams to notify, defaults to the participants.
		"""
		if teams is None:
			teams = Team.objects.filter(trade_participations__trade=self)

		Notification.send_to_users(
			[team.owner for team in teams.filter(owner__isnull=False).select_related("owner")],
			message,
			level=level,
			redirect_to=f"/trades/{self.pk}/",
		)
