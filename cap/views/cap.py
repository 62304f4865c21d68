from rest_framework import exceptions, generics
from rest_framework.decorators import api_view
from rest_framework.response import Response

from cap.models import CapLedgerEntry
from cap.serializers.cap_ledger_entry import CapLedgerEntrySerializer, CapSummarySerializer
from cap.services.cap_room import get_cap_projection, get_cap_summary
from core.models import Team


class CapLedgerListView(generics.ListAPIView):
	queryset = CapLedgerEntry.objects.select_related("team")
	serializer_class = CapLedgerEntrySerializer
	filterset_fields = ("league", "team", "season", "transaction_type", "trade", "contract")
	ordering_fields = ("created_at", "amount")


@api_view(["GET"])
def team_cap_summary_view(request, pk):
	try:
		team = Team.objects.select_related("league").get(pk=pk)
	except Team.DoesNotExist as e:
		raise exceptions.NotFound("Team not found") from e

	season = request.query_params.get("season")

	if season is None:
		return Response(CapSummarySerializer(get_cap_projection(team), many=True).data)

	if not season.isdigit():
		raise exceptions.ParseError("season must be an integer.")

	return Response(CapSummarySerializer(get_cap_summary(team, int(season))).data)
