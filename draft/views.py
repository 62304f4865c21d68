from rest_framework import generics

from draft.serializers.pick import PickSerializer

from .models import Pick


class PickListCreateView(generics.ListCreateAPIView):
	queryset = Pick.objects.select_related("original_team", "current_team")
	serializer_class = PickSerializer
	filterset_fields = ("league", "original_team", "current_team", "season", "round_number", "is_used")


class PickDetailView(generics.RetrieveAPIView):
	queryset = Pick.objects.select_related("original_team", "current_team")
	serializer_class = PickSerializer
