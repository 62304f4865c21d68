from rest_framework import exceptions, mixins
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from trade.models import TradeHistoryRecord
from trade.serializers.trade_history import TradeHistoryRecordSerializer
from trade.services.history import get_history_record, get_history_team_names, get_history_years, search_history


def _int_param(request: Request, name: str, *, required: bool = False) -> int | None:
	value = request.query_params.get(name)

	if value is None or value == "":
		if required:
			raise exceptions.ParseError(f"The {name} query parameter is required.")

		return None

	if not value.isdigit():
		raise exceptions.ParseError(f"{name} must be an integer.")

	return int(value)


class TradeHistoryViewSet(mixins.ListModelMixin, GenericViewSet):
	"""Numbered records of a league's completed trades."""

	serializer_class = TradeHistoryRecordSerializer
	permission_classes = (IsAuthenticated,)
	queryset = TradeHistoryRecord.objects.none()

	def get_queryset(self):  # noqa: ANN201
		return search_history(
			_int_param(self.request, "league", required=True),
			year=_int_param(self.request, "year"),
			team_id=_int_param(self.request, "team_id"),
			team_name=self.request.query_params.get("team_name"),
		)

	@action(detail=False, methods=["get"])
	def years(self, request: Request) -> Response:
		return Response(get_history_years(_int_param(request, "league", required=True)))

	@action(detail=False, methods=["get"])
	def teams(self, request: Request) -> Response:
		return Response(get_history_team_names(_int_param(request, "league", required=True)))

	@action(detail=False, methods=["get"], url_path=r"number/(?P<trade_number>\d{2}\.\d{2,})")
	def number(self, request: Request, trade_number: str) -> Response:
		record = get_history_record(_int_param(request, "league", required=True), trade_number)

		return Response(self.get_serializer(record).data)
