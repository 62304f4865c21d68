from typing import Any, Optional

from rest_framework import exceptions
from rest_framework.request import Request

from core.models import Team
from trade.exceptions import TradePermissionDenied


def get_acting_team_id(request: Request, league_id: int, team_id: Optional[Any]) -> Optional[int]:  # noqa: ANN401
	"""
	Work out which team a request acts for.

	Staff accounts may act for any team. Everyone else acts for their own team in
	the league, and may only name a team they manage.

	Args:
		request (Request): The request.
		league_id (int): League of the trade being acted on.
		team_id (Optional[Any]): Team named in the request, if any.

	Raises:
		ParseError: If ``team_id`` is not an integer.
		TradePermissionDenied: If the user does not manage the named team.

	Returns:
		Optional[int]: The acting team's id, or None when the user has no team in the league.
	"""
	user = request.user

	if team_id is not None:
		try:
			team_id = int(team_id)

		except (TypeError, ValueError) as e:
			raise exceptions.ParseError("team_id must be an integer.") from e

		if not user.is_staff and not Team.objects.filter(pk=team_id, owner=user).exists():
			raise TradePermissionDenied("You can only act on behalf of a team you manage")

		return team_id

	team = user.team_in(league_id) if hasattr(user, "team_in") else None

	return team.pk if team is not None else None
