from django.contrib.auth import authenticate
from django.utils import timezone
from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken

from draft.models import Pick
from draft.serializers.pick import PickSerializer

from .models import Contract, League, Notification, Player, Team, User
from .permissions import IsCommissionerOrReadOnly, IsStaffOrReadOnly, IsTeamOwnerOrReadOnly
from .serializers import (
	ContractSerializer,
	LeagueSerializer,
	NotificationSerializer,
	PlayerSerializer,
	StaffTeamSerializer,
	TeamSerializer,
	UserRegistrationSerializer,
	UserSerializer,
)


class UserRegistrationView(generics.CreateAPIView):
	queryset = User.objects.all()
	serializer_class = UserRegistrationSerializer
	permission_classes = (permissions.AllowAny,)

	def create(self, request, *args, **kwargs):
		serializer = self.get_serializer(data=request.data)
		serializer.is_valid(raise_exception=True)
		user = serializer.save()
		refresh = RefreshToken.for_user(user)
		return Response(
			{
				"user": UserSerializer(user).data,
				"refresh": str(refresh),
				"access": str(refresh.access_token),
			},
			status=status.HTTP_201_CREATED,
		)


@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def login_view(request):
	username = request.data.get("username")
	password = request.data.get("password")

	if username and password:
		user = authenticate(username=username, password=password)
		if user:
			refresh = RefreshToken.for_user(user)
			user.last_login = timezone.now()
			user.save()
			return Response({
				"user": UserSerializer(user).data,
				"refresh": str(refresh),
				"access": str(refresh.access_token),
			})

	return Response({"error": "Invalid credentials"}, status=status.HTTP_401_UNAUTHORIZED)


class LeagueListCreateView(generics.ListCreateAPIView):
	queryset = League.objects.all()
	serializer_class = LeagueSerializer
	permission_classes = (permissions.IsAuthenticated, IsStaffOrReadOnly)
	filterset_fields = ("name", "external_id", "trade_approval_mode", "current_season")


class LeagueDetailView(generics.RetrieveUpdateAPIView):
	queryset = League.objects.all()
	serializer_class = LeagueSerializer
	permission_classes = (permissions.IsAuthenticated, IsCommissionerOrReadOnly)


class TeamListCreateView(generics.ListCreateAPIView):
	queryset = Team.objects.select_related("league", "owner")
	serializer_class = StaffTeamSerializer
	permission_classes = (permissions.IsAuthenticated, IsStaffOrReadOnly)
	filterset_fields = ("league", "name", "owner", "external_roster_id")


class TeamDetailView(generics.RetrieveUpdateAPIView):
	queryset = Team.objects.select_related("league", "owner")
	permission_classes = (permissions.IsAuthenticated, IsTeamOwnerOrReadOnly)

	def get_serializer_class(self):
		return StaffTeamSerializer if self.request.user.is_staff else TeamSerializer


@api_view(["GET"])
def team_picks_view(request, pk):
	try:
		team = Team.objects.get(pk=pk)
		picks = Pick.objects.filter(current_team=team, is_used=False).select_related("original_team", "current_team")
		serializer = PickSerializer(picks, many=True)
		return Response({"picks": serializer.data})
	except Team.DoesNotExist:
		return Response({"error": "Team not found"}, status=status.HTTP_404_NOT_FOUND)


class PlayerListCreateView(generics.ListCreateAPIView):
	queryset = Player.objects.all()
	serializer_class = PlayerSerializer
	permission_classes = (permissions.IsAuthenticated, IsStaffOrReadOnly)
	filterset_fields = ("position", "nfl_team", "external_id")
	ordering_fields = ("full_name", "position")


class ContractListView(generics.ListAPIView):
	queryset = Contract.objects.select_related("player", "team")
	serializer_class = ContractSerializer
	filterset_fields = ("league", "team", "player", "status", "start_season", "end_season")
	ordering_fields = ("salary", "end_season")


class ContractDetailView(generics.RetrieveAPIView):
	queryset = Contract.objects.select_related("player", "team")
	serializer_class = ContractSerializer


class NotificationView(generics.ListAPIView, generics.RetrieveUpdateDestroyAPIView):
	queryset = Notification.objects.all()
	serializer_class = NotificationSerializer
	filterset_fields = ("is_read", "level", "priority")
	ordering_fields = ("created_at",)

	def get_queryset(self):
		return self.queryset.filter(user=self.request.user).order_by("-created_at")
