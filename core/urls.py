from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from . import views

urlpatterns = [
	# Auth endpoints
	path("auth/register/", views.UserRegistrationView.as_view(), name="user-register"),
	path("auth/login/", views.login_view, name="user-login"),
	path("auth/refresh/", TokenRefreshView.as_view(), name="token-refresh"),
	# League endpoints
	path("leagues/", views.LeagueListCreateView.as_view(), name="league-list-create"),
	path("leagues/<int:pk>/", views.LeagueDetailView.as_view(), name="league-detail"),
	# Team endpoints
	path("teams/", views.TeamListCreateView.as_view(), name="team-list-create"),
	path("teams/<int:pk>/", views.TeamDetailView.as_view(), name="team-detail"),
	path("teams/<int:pk>/picks/", views.team_picks_view, name="team-picks"),
	# Player and contract endpoints
	path("players/", views.PlayerListCreateView.as_view(), name="player-list-create"),
	path("contracts/", views.ContractListView.as_view(), name="contract-list"),
	path("contracts/<int:pk>/", views.ContractDetailView.as_view(), name="contract-detail"),
	# Notification endpoints
	path(
		"notifications/",
		views.NotificationView.as_view(),
		name="notification-list",
	),
	path(
		"notifications/<int:pk>/",
		views.NotificationView.as_view(),
		name="notification-actions",
	),
]
