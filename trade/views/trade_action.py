from collections.abc import Callable
from typing import Any, Optional

from rest_framework import exceptions, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from trade.enums.trade_actions import TradeActions
from trade.serializers.trade import TradeActionSerializer, TradeSerializer
from trade.services.trades import (
	approve_trade,
	cancel_trade,
	get_trade,
	respond_to_trade,
	vote_on_trade,
	withdraw_trade,
)
from trade.views.common import get_acting_team_id


class TradeActionView(APIView):
	"""View to handle trade actions: accept, reject, approve, vote, cancel and withdraw."""

	permission_classes = (IsAuthenticated,)

	def post(self, request: Request, *args, **kwargs) -> Response:  # noqa: ANN002, ANN003, ARG002
		serializer = TradeActionSerializer(data=request.data)
		serializer.is_valid(raise_exception=True)

		action = TradeActions(serializer.validated_data["action"])
		trade_id = serializer.validated_data["trade_id"]
		vote: Optional[str] = serializer.validated_data.get("vote")

		trade = get_trade(trade_id)
		team_id = get_acting_team_id(request, trade.league_id, serializer.validated_data.get("team_id"))

		if team_id is None and action != TradeActions.CANCEL:
			raise exceptions.ParseError("team_id is required for this action.")

		action_method_map: dict[TradeActions, Callable[[], Any]] = {
			TradeActions.ACCEPT: lambda: respond_to_trade(trade_id, team_id, TradeActions.ACCEPT),
			TradeActions.REJECT: lambda: respond_to_trade(trade_id, team_id, TradeActions.REJECT),
			TradeActions.APPROVE: lambda: approve_trade(trade_id, team_id),
			TradeActions.VOTE: lambda: vote_on_trade(trade_id, team_id, vote),
			TradeActions.CANCEL: lambda: cancel_trade(trade_id),
			TradeActions.WITHDRAW: lambda: withdraw_trade(trade_id, team_id),
		}

		result = action_method_map[action]()

		if action == TradeActions.VOTE:
			return Response(result, status=status.HTTP_200_OK)

		return Response(
			{
				"detail": f"Trade {action.value} action completed.",
				"trade": TradeSerializer(get_trade(trade_id)).data,
			},
			status=status.HTTP_200_OK,
		)
