from rest_framework import exceptions, mixins, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from trade.models import Trade
from trade.serializers.trade import TradeProposalSerializer, TradeSerializer
from trade.services.trades import NO_VIEWER_TEAM, get_trade, list_trades, propose_trade
from trade.views.common import get_acting_team_id


class TradeViewSet(
	mixins.CreateModelMixin,
	mixins.RetrieveModelMixin,
	mixins.ListModelMixin,
	GenericViewSet,
):
	"""
	List, inspect and propose trades.

	Listing requires a ``league`` query parameter and accepts ``team_id`` (the
	viewing team, defaulting to the user's own team in the league) and ``status``
	(a trade status or ``past``).
	"""

	serializer_class = TradeSerializer
	permission_classes = (IsAuthenticated,)
	queryset = Trade.objects.none()

	def list(self, request: Request, *args, **kwargs) -> Response:  # noqa: ANN002, ANN003, ARG002
		league_id = request.query_params.get("league")

		if not league_id or not league_id.isdigit():
			raise exceptions.ParseError("The league query parameter is required.")

		viewer_team_id = request.query_params.get("team_id")

		if viewer_team_id is not None or not request.user.is_staff:
			viewer_team_id = get_acting_team_id(request, int(league_id), viewer_team_id)

			# Without a team of their own in the league a manager sees no pending trades
			if viewer_team_id is None:
				viewer_team_id = NO_VIEWER_TEAM

		trades = list_trades(
			int(league_id),
			team_id=viewer_team_id,
			status=request.query_params.get("status"),
		)

		page = self.paginate_queryset(trades)

		if page is not None:
			return self.get_paginated_response(self.get_serializer(page, many=True).data)

		return Response(self.get_serializer(trades, many=True).data)

	def retrieve(self, request: Request, *args, **kwargs) -> Response:  # noqa: ANN002, ANN003, ARG002
		return Response(self.get_serializer(get_trade(kwargs["pk"])).data)

	def create(self, request: Request, *args, **kwargs) -> Response:  # noqa: ANN002, ANN003, ARG002
		"""Propose a trade; the proposer defaults to the first listed team."""
		serializer = TradeProposalSerializer(data=request.data)
		serializer.is_valid(raise_exception=True)
		data = serializer.validated_data

		proposer_team_id = data.get("proposer_team_id", data["team_ids"][0])
		get_acting_team_id(request, data["league_id"], proposer_team_id)

		trade = propose_trade(
			data["league_id"],
			data["team_ids"],
			data["assets"],
			expires_in=data["expires_in"],
			notes=data["notes"],
			proposer_team_id=proposer_team_id,
		)

		return Response(self.get_serializer(get_trade(trade.pk)).data, status=status.HTTP_201_CREATED)
