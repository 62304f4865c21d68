from django.urls import path

from .views import cap

urlpatterns = [
	path("cap/ledger/", cap.CapLedgerListView.as_view(), name="cap-ledger-list"),
	path("cap/teams/<int:pk>/summary/", cap.team_cap_summary_view, name="team-cap-summary"),
]
