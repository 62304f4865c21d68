from rest_framework import permissions
from rest_framework.request import Request
from rest_framework.views import APIView

from .models import League, LeagueCommissioner, Team


class IsStaffOrReadOnly(permissions.BasePermission):
	"""Anyone authenticated may read; only staff accounts may write."""

	def has_permission(self, request: Request, view: APIView) -> bool:  # noqa: ARG002
		return request.method in permissions.SAFE_METHODS or request.user.is_staff


class IsCommissionerOrReadOnly(permissions.BasePermission):
	"""League settings may only be changed by staff or one of the league's commissioners."""

	def has_object_permission(self, request: Request, view: APIView, obj: League) -> bool:  # noqa: ARG002
		if request.method in permissions.SAFE_METHODS or request.user.is_staff:
			return True

		return LeagueCommissioner.objects.filter(league=obj, team__owner=request.user).exists()


class IsTeamOwnerOrReadOnly(permissions.BasePermission):
	"""A team may only be edited by staff or the user who manages it."""

	def has_object_permission(self, request: Request, view: APIView, obj: Team) -> bool:  # noqa: ARG002
		if request.method in permissions.SAFE_METHODS or request.user.is_staff:
			return True

		return obj.owner_id == request.user.pk
